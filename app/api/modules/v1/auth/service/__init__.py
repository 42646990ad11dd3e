"""
Authentication service module.
"""
from app.api.modules.v1.auth.service.identity_service import IdentityResolver
from app.api.modules.v1.auth.service.login_service import LoginService
from app.api.modules.v1.auth.service.signup_service import SignupService

__all__ = ["IdentityResolver", "LoginService", "SignupService"]
