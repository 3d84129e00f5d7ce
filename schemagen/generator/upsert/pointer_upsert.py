from __future__ import annotations

from typing import Optional

from schemagen.core.constants import STATIC_ID_COLUMN, UPDATED_AT_COLUMN, VERSION_ID_COLUMN

from ..layout import StorageLayout
from .variables import UpsertVariables


def define_upsert_current_version_pointer_if_needed_logic(
    layout: StorageLayout,
    variables: UpsertVariables,
) -> Optional[str]:
    """Указатель меняется, только если блок версии вставил новую версию."""
    if not layout.has_versions:
        return None

    lines = [
        "-- point the static entity at its new current version, if one was inserted",
        f"IF ({variables.new_version_id} IS NOT NULL) THEN",
        f"  INSERT INTO {layout.pointer_table} ({STATIC_ID_COLUMN}, {VERSION_ID_COLUMN}, {UPDATED_AT_COLUMN})",
        f"  VALUES ({variables.static_id}, {variables.new_version_id}, now())",
        f"  ON CONFLICT ({STATIC_ID_COLUMN}) DO UPDATE",
        f"    SET {VERSION_ID_COLUMN} = excluded.{VERSION_ID_COLUMN},",
        f"        {UPDATED_AT_COLUMN} = excluded.{UPDATED_AT_COLUMN};",
        "END IF;",
    ]
    return "\n".join(lines)
