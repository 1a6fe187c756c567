"""
QML Script IntelliSense API Dependencies.

Shared dependencies for FastAPI routes.
Requires Python 3.11+.
"""

from typing import Any

from fastapi import HTTPException

from workspace.session import IntellisenseSession


# Shared state - populated by main.py lifespan
_state: dict[str, Any] = {}


def set_session(session: IntellisenseSession | None) -> None:
    """Set the shared session instance."""
    _state["session"] = session


def get_session() -> IntellisenseSession | None:
    """Get the shared session instance."""
    return _state.get("session")


def require_session() -> IntellisenseSession:
    """
    Dependency that requires an active session.

    Raises HTTPException if no session is running.
    """
    session = get_session()
    if session is None:
        raise HTTPException(
            status_code=503,
            detail="Workspace session unavailable",
        )
    return session
