"""
QML Script IntelliSense API Package.

FastAPI service exposing editor features over HTTP.
Requires Python 3.11+.
"""

# Import app lazily to avoid circular imports
# Use: from api.main import app
