from .variables import UpsertVariables, define_upsert_variables
from .input_definitions import define_input_definitions
from .declarations import define_declarations
from .find_or_create import define_find_or_create_static_entity_logic
from .version_insert import define_insert_version_if_dynamic_data_changed_logic
from .pointer_upsert import define_upsert_current_version_pointer_if_needed_logic
from .upsert import define_entity_upsert, generate_entity_upsert

__all__ = [
    "UpsertVariables",
    "define_upsert_variables",
    "define_input_definitions",
    "define_declarations",
    "define_find_or_create_static_entity_logic",
    "define_insert_version_if_dynamic_data_changed_logic",
    "define_upsert_current_version_pointer_if_needed_logic",
    "define_entity_upsert",
    "generate_entity_upsert",
]
