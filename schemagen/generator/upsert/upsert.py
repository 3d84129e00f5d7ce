"""
Генерация upsert-функции сущности.

1. раскладка хранения и имена переменных
2. входные параметры
3. объявления переменных
4. логика
  1. найти или создать статическую сущность, получить её id
    - при создании заполнить таблицы связей массивов
  2. проверить, изменились ли динамические данные
  3. если изменились, вставить новую версию
  4. если вставлена новая версия, обновить указатель текущей версии
5. вернуть id статической сущности (не версии)

Генерация — чистая функция декларации: повторный вызов на неизменной
сущности даёт побайтно тот же текст.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from schemagen.core.constants import DEFAULT_CONFIG
from schemagen.utils.naming import upsert_function_name

from ..function_ir import FunctionDefinition
from ..layout import derive_storage_layout
from ..renderer import FunctionRenderer
from .declarations import define_declarations
from .find_or_create import define_find_or_create_static_entity_logic
from .input_definitions import define_input_definitions
from .pointer_upsert import define_upsert_current_version_pointer_if_needed_logic
from .variables import define_upsert_variables
from .version_insert import define_insert_version_if_dynamic_data_changed_logic

logger = logging.getLogger(__name__)


def define_entity_upsert(entity: Any, config: Optional[Dict[str, Any]] = None) -> FunctionDefinition:
    settings = {**DEFAULT_CONFIG["generator"], **(config or {})}

    layout = derive_storage_layout(entity)
    variables = define_upsert_variables(layout)

    return FunctionDefinition(
        name=upsert_function_name(entity.name),
        parameters=tuple(define_input_definitions(layout)),
        returns=settings["static_id_type"],
        language=settings["language"],
        declarations=tuple(define_declarations(layout, variables, settings["static_id_type"])),
        blocks=(
            define_find_or_create_static_entity_logic(layout, variables),
            define_insert_version_if_dynamic_data_changed_logic(layout, variables),
            define_upsert_current_version_pointer_if_needed_logic(layout, variables),
        ),
        return_variable=variables.static_id,
    )


def generate_entity_upsert(entity: Any, config: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
    settings = {**DEFAULT_CONFIG["generator"], **(config or {})}
    definition = define_entity_upsert(entity, settings)
    sql = FunctionRenderer(indent=settings["indent"]).render(definition)
    logger.debug("сгенерирована функция %s (%d блоков)", definition.name, len(definition.present_blocks))
    return {
        "name": definition.name,
        "sql": sql,
    }
