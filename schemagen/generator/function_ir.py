from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class FunctionDefinition:
    """
    Промежуточное представление хранимой функции.

    blocks — блоки логики в порядке выполнения; None означает, что
    блок не нужен и при рендеринге опускается целиком.
    """
    name: str
    parameters: Tuple[str, ...]
    returns: str
    language: str
    declarations: Tuple[str, ...]
    blocks: Tuple[Optional[str], ...]
    return_variable: str
    return_comment: str = "return the static entity id"

    @property
    def present_blocks(self) -> Tuple[str, ...]:
        return tuple(b for b in self.blocks if b)
