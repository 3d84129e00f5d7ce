from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from schemagen.core.constants import STATIC_ID_COLUMN
from schemagen.utils.naming import variable_name

from ..layout import StorageLayout


@dataclass(frozen=True)
class UpsertVariables:
    """
    Имена локальных переменных upsert-функции.

    Вычисляются один раз и передаются построителям явно: блок указателя
    обязан ссылаться на ту же переменную новой версии, что заполняет
    блок вставки версии.
    """
    static_id: str
    array_hashes: Dict[str, str] = field(default_factory=dict)
    matching_version_id: Optional[str] = None
    new_version_id: Optional[str] = None
    array_index: str = "v_array_access_index"


def define_upsert_variables(layout: StorageLayout) -> UpsertVariables:
    return UpsertVariables(
        static_id=variable_name(STATIC_ID_COLUMN),
        # value_expression свойства-массива и есть его хэш-переменная
        array_hashes={p.name: p.value_expression for p in layout.array_properties},
        matching_version_id=variable_name("matching_version_id") if layout.has_versions else None,
        new_version_id=variable_name("new_version_id") if layout.has_versions else None,
    )
