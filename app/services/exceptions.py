"""
Custom exceptions for the Services layer.
"""


class ServiceError(Exception):
    """Base class for exceptions in the services layer."""
    pass


class NotFoundError(ServiceError):
    """Raised when the requested entity does not exist."""

    entity = "资源"

    def __init__(self, entity_id):
        self.entity_id = entity_id
        super().__init__(f"{self.entity}未找到: {entity_id}")


class FactorNotFoundError(NotFoundError):
    entity = "Factor"
