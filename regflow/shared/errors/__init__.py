from regflow.shared.codes import AppCode, StatusClassification

from .base import AppError, raise_app_error

__all__ = [
    "AppCode",
    "AppError",
    "StatusClassification",
    "raise_app_error",
]
