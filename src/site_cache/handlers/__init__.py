"""Handler layer for the admin UI.

Handlers attach user-facing notifications to the mutations a service
exposes. They depend on services, not on repositories.

Architecture:
    Handler -> Service -> Repository
    (UI)    -> (Cache sync) -> (Store / HTTP)
"""

from .config_handler import ConfigHandler
from .manager_handler import ManagerHandler

__all__ = [
    "ConfigHandler",
    "ManagerHandler",
]
