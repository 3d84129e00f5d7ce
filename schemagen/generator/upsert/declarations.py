from typing import List

from schemagen.core.constants import ARRAY_HASH_TYPE

from ..layout import StorageLayout
from .variables import UpsertVariables


def define_declarations(layout: StorageLayout, variables: UpsertVariables, static_id_type: str) -> List[str]:
    declarations = [f"{variables.static_id} {static_id_type};"]
    declarations.extend(
        f"{variables.array_hashes[p.name]} {ARRAY_HASH_TYPE};"
        for p in layout.array_properties
    )
    if layout.has_versions:
        declarations.append(f"{variables.matching_version_id} bigint;")
        declarations.append(f"{variables.new_version_id} bigint;")
    return declarations
