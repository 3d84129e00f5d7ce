"""
Нормализатор деклараций сущностей.

Шлюз перед генерацией: проверяет экспорт исходного файла и каждую
сущность, но ничего не преобразует. Порядок проверок фиксирован:
  1) экспортирован массив entities
  2) каждый элемент обладает структурой Entity
  3) для каждой сущности по порядку: D1 → D2 → D3 → D4
Первое нарушение прерывает всю пачку (fail-fast, без накопления ошибок).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, Optional

from schemagen.core.exceptions import InvalidEntityType, MissingEntitiesExport
from schemagen.rules import DEFAULT_RULES, RuleRegistry
from schemagen.utils.validators import conforms_to_entity_shape

logger = logging.getLogger(__name__)


def _read_entities_export(contents: Any) -> Any:
    """Содержимое модуля: dict с ключом entities или объект с атрибутом."""
    if contents is None:
        return None
    if isinstance(contents, Mapping):
        return contents.get("entities")
    return getattr(contents, "entities", None)


class DeclarationNormalizer:
    """
    Основной класс нормализации деклараций.
    Держит сконфигурированный реестр правил.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self.registry = RuleRegistry(self.config.get("rules", {}))
        self.registry.register_rules(DEFAULT_RULES)

    def normalize(self, contents: Any) -> Dict[str, Any]:
        # ---------- 1. экспорт entities ----------
        entities = _read_entities_export(contents)
        if entities is None or not isinstance(entities, (list, tuple)):
            raise MissingEntitiesExport()

        # ---------- 2. структура Entity ----------
        for entity in entities:
            if not conforms_to_entity_shape(entity):
                raise InvalidEntityType()

        # ---------- 3. правила, сущность за сущностью ----------
        logger.info("проверка %d сущностей (%d правил)", len(entities), len(self.registry))
        self.registry.check_all(entities)

        # ---------- 4. возвращаем без изменений ----------
        return {"entities": entities}


def normalize_declaration_contents(
    contents: Any,
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    return DeclarationNormalizer(config).normalize(contents)
