"""Application Exceptions."""

from apps.armory.application.common.exceptions.auth import MissingRequesterError
from apps.armory.application.common.exceptions.base import (
    ApplicationError,
    StoreFailureError,
    ValidationFailedError,
)

__all__ = [
    "ApplicationError",
    "MissingRequesterError",
    "StoreFailureError",
    "ValidationFailedError",
]
