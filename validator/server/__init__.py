"""Local static file server package.

Public re-exports so callers can write::

    from validator.server import LocalServer, create_app
"""

from validator.server.app import create_app
from validator.server.local import LocalServer

__all__ = ["create_app", "LocalServer"]
