from .base import (
    AppError,
    ConfigError,
    DomainError,
    HashingError,
    InfrastructureError,
    SigningError,
    StoreError,
    ValidationError,
    VerificationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "ConfigError",
    "DomainError",
    "HashingError",
    "InfrastructureError",
    "SigningError",
    "StoreError",
    "ValidationError",
    "VerificationError",
    "handle_app_error",
    "register_error_handler",
]
