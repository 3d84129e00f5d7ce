"""
Загрузка исходного файла деклараций.

Исходный файл — обычный модуль Python, экспортирующий список entities.
Загруженный модуль и есть "содержимое модуля" для нормализатора.
"""

from __future__ import annotations

import importlib.util
from pathlib import Path
from types import ModuleType
from typing import Union

from schemagen.core.exceptions import SourceLoadingError


def load_declaration_contents(path: Union[str, Path]) -> ModuleType:
    source = Path(path)
    if not source.is_file():
        raise SourceLoadingError(f"source file not found: {source}", str(source))

    spec = importlib.util.spec_from_file_location(f"_schemagen_source_{source.stem}", source)
    if spec is None or spec.loader is None:
        raise SourceLoadingError(f"source file is not an importable python module: {source}", str(source))

    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        raise SourceLoadingError(f"could not import source file {source}: {e}", str(source)) from e
    return module
