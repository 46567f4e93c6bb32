"""
Services Layer

Provides the store-backed services used by the API endpoints.
"""

from app.services.core import FactorService
from app.services.exceptions import ServiceError, NotFoundError, FactorNotFoundError

__all__ = ["FactorService", "ServiceError", "NotFoundError", "FactorNotFoundError"]
