"""
QML Script IntelliSense Type Mapper.

Normalizes documentation type names for display.
Requires Python 3.11+.
"""

from resolver.constants import DEFAULT_TYPE, TYPE_MAP


def map_type(type_name: str | None) -> str:
    """
    Map a documentation type name to the display vocabulary.

    Unknown names fall back to ``any``. Lookup is case-sensitive, so
    ``Object`` and ``object`` differ the same way they do in the table.
    """
    if not type_name:
        return DEFAULT_TYPE
    return TYPE_MAP.get(type_name.strip(), DEFAULT_TYPE)
