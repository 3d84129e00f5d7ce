"""
Координатор генерации всей схемы.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from schemagen.core.constants import RESOURCE_KINDS
from schemagen.core.exceptions import GenerationError
from schemagen.generator import (
    generate_entity_current_view,
    generate_entity_tables,
    generate_entity_upsert,
)
from schemagen.normalization import DeclarationNormalizer
from schemagen.parser import is_single_create_statement

from .ordering import order_by_references

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchemaResource:
    kind: str
    name: str
    sql: str


@dataclass
class CompiledSchema:
    entities: List[Any] = field(default_factory=list)
    resources: Tuple[SchemaResource, ...] = ()

    def by_kind(self, kind: str) -> List[SchemaResource]:
        return [r for r in self.resources if r.kind == kind]

    def get(self, name: str) -> Optional[SchemaResource]:
        for r in self.resources:
            if r.name == name:
                return r
        return None

    def to_sql(self) -> str:
        return "\n\n".join(f"{r.sql};" for r in self.resources) + "\n"


class SchemaCompiler:
    """
    Полный конвейер: нормализация → таблицы → функции → представления.

    Ресурсы упорядочены по виду (сначала все таблицы, затем все функции,
    затем все представления). Внутри вида сущность, на которую ссылаются,
    идёт раньше ссылающейся; в остальном сохраняется порядок объявления.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self.normalizer = DeclarationNormalizer(self.config)

        self.stats: Dict[str, float] = {
            "normalization_time": 0.0,
            "generation_time": 0.0,
            "total_time": 0.0,
        }

    # ==========================================================
    # PUBLIC API
    # ==========================================================

    def compile(self, contents: Any) -> CompiledSchema:
        total_start = time.perf_counter()

        # ---------- Этап 1: Нормализация ----------
        t0 = time.perf_counter()
        entities = self.normalizer.normalize(contents)["entities"]
        self.stats["normalization_time"] = time.perf_counter() - t0

        # ---------- Этап 2: Генерация ----------
        t0 = time.perf_counter()
        generator_config = self.config.get("generator", {})

        tables: List[SchemaResource] = []
        functions: List[SchemaResource] = []
        views: List[SchemaResource] = []
        for entity in order_by_references(entities):
            tables.extend(
                self._resource(RESOURCE_KINDS["TABLE"], generated)
                for generated in generate_entity_tables(entity)
            )
            functions.append(self._resource(
                RESOURCE_KINDS["FUNCTION"],
                generate_entity_upsert(entity, generator_config),
            ))
            views.append(self._resource(
                RESOURCE_KINDS["VIEW"],
                generate_entity_current_view(entity),
            ))
        self.stats["generation_time"] = time.perf_counter() - t0
        self.stats["total_time"] = time.perf_counter() - total_start

        resources = tuple(tables + functions + views)
        logger.info("сгенерировано %d ресурсов для %d сущностей", len(resources), len(entities))
        return CompiledSchema(entities=list(entities), resources=resources)

    # ==========================================================
    # INTERNAL METHODS
    # ==========================================================

    def _resource(self, kind: str, generated: Dict[str, str]) -> SchemaResource:
        if not is_single_create_statement(generated["sql"]):
            raise GenerationError(
                f"generated {kind} '{generated['name']}' is not exactly one CREATE statement",
                generated["name"],
            )
        logger.debug("%s %s", kind, generated["name"])
        return SchemaResource(kind=kind, name=generated["name"], sql=generated["sql"])
