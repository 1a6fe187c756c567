"""
QML Script IntelliSense Providers Package.

Editor features built on the resolver: completion, hover, definition,
references and auto-import code actions.
Requires Python 3.11+.
"""

from providers.code_action import provide_code_actions
from providers.completion import provide_completion_items
from providers.definition import provide_definition
from providers.document import TextDocument
from providers.hover import provide_hover
from providers.references import provide_references

__all__ = [
    "TextDocument",
    "provide_code_actions",
    "provide_completion_items",
    "provide_definition",
    "provide_hover",
    "provide_references",
]
