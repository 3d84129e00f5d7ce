"""
main.py

Точка входа генератора битемпоральной схемы PostgreSQL.

Запуск:
    python main.py --source entities.py --out generated/
    python main.py --source entities.py --out generated/ --verbose
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from schemagen.compose import SchemaCompiler, SchemaWriter, load_declaration_contents
from schemagen.core.exceptions import SchemaGeneratorError, handle_exception


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Bitemporal PostgreSQL schema generator"
    )

    parser.add_argument(
        "--source",
        required=True,
        help="Python-файл, экспортирующий список entities",
    )

    parser.add_argument(
        "--out",
        required=True,
        help="Каталог для сгенерированных .sql файлов",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Подробный журнал (DEBUG)",
    )

    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        # --- Загрузка деклараций ---
        contents = load_declaration_contents(args.source)

        # --- Генерация ---
        compiled = SchemaCompiler().compile(contents)

        # --- Запись ---
        written = SchemaWriter(args.out).write(compiled)
    except SchemaGeneratorError as e:
        print(json.dumps(handle_exception(e), ensure_ascii=False), file=sys.stderr)
        return 1

    for path in written:
        print(path)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
