"""Application ports - interfaces for external adapters."""

from portalgate.application.ports.permission_checker import PermissionChecker
from portalgate.application.ports.session_store import SessionStore
from portalgate.application.ports.token_service import TokenService
from portalgate.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "PermissionChecker",
    "SessionStore",
    "TokenService",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
