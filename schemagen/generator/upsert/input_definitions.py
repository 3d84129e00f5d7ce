from typing import List

from ..layout import StorageLayout


def define_input_definitions(layout: StorageLayout) -> List[str]:
    """Один параметр на свойство, в порядке объявления: in_<name> <type>."""
    return [f"{p.input_name} {p.input_type}" for p in layout.properties]
