"""
QML Script IntelliSense Workspace Package.

File enumeration and session lifecycle.
Requires Python 3.11+.
"""

from workspace.finder import WorkspaceFinder
from workspace.session import IntellisenseSession

__all__ = ["WorkspaceFinder", "IntellisenseSession"]
