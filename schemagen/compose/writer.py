"""
writer.py

Запись сгенерированной схемы на диск.

Раскладка каталога:
  <out>/tables/<name>.sql
  <out>/functions/<name>.sql
  <out>/views/<name>.sql
  <out>/schema.sql   — все ресурсы одним файлом в порядке создания
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from .compiler import CompiledSchema

_KIND_DIRECTORIES = {
    "table": "tables",
    "function": "functions",
    "view": "views",
}


class SchemaWriter:

    def __init__(self, out_dir: Union[str, Path]):
        self.out_dir = Path(out_dir)

    def write(self, compiled: CompiledSchema) -> List[Path]:
        written: List[Path] = []

        for resource in compiled.resources:
            directory = self.out_dir / _KIND_DIRECTORIES[resource.kind]
            directory.mkdir(parents=True, exist_ok=True)
            path = directory / f"{resource.name}.sql"
            path.write_text(f"{resource.sql};\n", encoding="utf-8")
            written.append(path)

        self.out_dir.mkdir(parents=True, exist_ok=True)
        combined = self.out_dir / "schema.sql"
        combined.write_text(compiled.to_sql(), encoding="utf-8")
        written.append(combined)

        return written
