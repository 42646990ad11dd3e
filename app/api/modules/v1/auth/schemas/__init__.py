"""
Authentication schemas module.
"""
from app.api.modules.v1.auth.schemas.identity import Identity
from app.api.modules.v1.auth.schemas.login import LoginRequest, LoginResponse
from app.api.modules.v1.auth.schemas.signup import SignupRequest, SignupResponse

__all__ = ["Identity", "LoginRequest", "LoginResponse", "SignupRequest", "SignupResponse"]
