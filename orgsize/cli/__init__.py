"""
CLI module for orgsize.

Provides the command-line interface; business logic lives in the core
service layer.
"""
from orgsize.cli.app import app as _app

# Export app function for pyproject.toml entry point
def app():
    """Entry point function for pyproject.toml scripts."""
    _app()

__all__ = ['app']
