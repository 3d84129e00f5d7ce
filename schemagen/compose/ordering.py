"""
Порядок создания ресурсов сущностей.

Внешний ключ в CREATE TABLE требует уже существующей таблицы, поэтому
сущность, на которую ссылаются через references, создаётся раньше
ссылающейся. Ссылки на необъявленные в пачке сущности (внешние таблицы)
и ссылки сущности на саму себя порядок не ограничивают.
"""

from __future__ import annotations

from typing import Any, List, Sequence, Set

from schemagen.core.exceptions import GenerationError
from schemagen.utils.validators import property_flag


def entity_dependencies(entity: Any, declared: Set[str]) -> Set[str]:
    """Имена объявленных сущностей, на которые ссылается entity."""
    targets = (property_flag(d, "references") for d in entity.properties.values())
    return {
        target
        for target in targets
        if target and target in declared and target != entity.name
    }


def order_by_references(entities: Sequence[Any]) -> List[Any]:
    """
    Топологический порядок сущностей по ссылкам.

    На каждом шаге берётся первая по порядку объявления сущность, все
    зависимости которой уже созданы: без ссылок порядок не меняется.
    Цикл ссылок между разными сущностями — GenerationError.
    """
    declared = {entity.name for entity in entities}
    remaining = [(entity, entity_dependencies(entity, declared)) for entity in entities]
    created: Set[str] = set()
    ordered: List[Any] = []

    while remaining:
        for i, (entity, depends_on) in enumerate(remaining):
            if depends_on <= created:
                break
        else:
            cycle = ", ".join(sorted({entity.name for entity, _ in remaining}))
            raise GenerationError(f"entities reference each other in a cycle: {cycle}")

        ordered.append(entity)
        created.add(entity.name)
        del remaining[i]

    return ordered
