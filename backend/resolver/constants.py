"""
QML Script IntelliSense Constants.

Patterns, type vocabulary and search bounds shared by the resolver.
Requires Python 3.11+.
"""

import re

LANGUAGE_QML = "qml"
LANGUAGE_JAVASCRIPT = "javascript"

SCRIPT_EXTENSION = ".js"
MARKUP_EXTENSION = ".qml"
SCRIPT_GLOB = "**/*.js"
MARKUP_GLOB = "**/*.qml"

# Appended to generated aliases so "util.js" does not become "Util"
ALIAS_SUFFIX = "JS"

MAX_QML_FILES_TO_SEARCH = 1000
MAX_JS_FILES_TO_SEARCH = 500

# Build, dependency and VCS directories skipped during enumeration
DEFAULT_EXCLUDE_PATTERNS: tuple[str, ...] = (
    "node_modules",
    "build",
    "dist",
    "out",
    ".git",
    "CMakeFiles",
    "*build-*",
    ".vscode",
    ".idea",
    "*~",
)

# import "path/to/file.js" as Alias
QML_JS_IMPORT = re.compile(r'import[ \t]+"([^"\n]+\.js)"[ \t]+as[ \t]+(\w+)')
# import QtQuick 2.15, import "components" (anything but a script import)
QML_IMPORT = re.compile(r'^\s*import\s+(?!".*\.js")\S')

ALIAS_DOT_PREFIX = re.compile(r"(\w+)\.(\w*)$")
ALIAS_DOT_FUNCTION = re.compile(r"(\w+)\.(\w+)")
WORD = re.compile(r"\w+")

FUNCTION_DECLARATION = re.compile(r"^function\s+(\w+)\s*\((.*?)\)")

JSDOC_START = "/**"
JSDOC_END = "*/"
JSDOC_TYPE = re.compile(r"^\{([^}]*)\}\s*")
JSDOC_PARAM_DESCRIPTION = re.compile(r"^\s*-\s+(.*)$")
JSDOC_RETURN_TAGS = ("@returns", "@return")

DEFAULT_TYPE = "any"

TYPE_MAP: dict[str, str] = {
    "string": "string",
    "number": "number",
    "int": "number",
    "double": "number",
    "boolean": "boolean",
    "bool": "boolean",
    "Object": "any",
    "Array": "any[]",
    "Function": "Function",
    "color": "string",
    "var": "any",
    "any": "any",
}
