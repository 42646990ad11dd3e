"""
Core dependencies module.
"""
from app.api.core.dependencies.auth import (
    get_current_identity,
    get_optional_identity,
    require_admin,
)

__all__ = ["get_current_identity", "get_optional_identity", "require_admin"]
