from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class Property:
    """
    Определение свойства сущности.

    type описывает тип одного значения; для массива (array=True) это тип
    элемента, а в таблице хранится хэш содержимого.
    """
    type: str
    updatable: bool = False
    nullable: bool = False
    default: Optional[str] = None
    references: Optional[str] = None
    check: Optional[str] = None
    array: bool = False


@dataclass(frozen=True)
class Entity:
    """
    Декларация сущности: статическая идентичность + изменяемые версии.

    unique — альтернативный ключ, по которому определяется
    "тот же самый" логический экземпляр.
    """
    name: str
    properties: Dict[str, Property]
    unique: Tuple[str, ...]

    def __post_init__(self):
        # ГАРАНТИЯ: unique ВСЕГДА tuple
        object.__setattr__(self, "unique", tuple(self.unique))


@dataclass(frozen=True)
class ValueObject(Entity):
    """
    Сущность, уникальная по всем своим свойствам.

    Два значения с одинаковыми свойствами считаются одним экземпляром,
    поэтому у value object нет изменяемых версий.
    """
    unique: Tuple[str, ...] = field(default=())

    def __post_init__(self):
        if not self.unique:
            object.__setattr__(self, "unique", tuple(self.properties.keys()))
        super().__post_init__()
