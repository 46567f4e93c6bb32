"""
Custom exceptions for the Infrastructure layer.
"""

class InfrastructureError(Exception):
    """Base class for exceptions in the infrastructure layer."""
    pass


class StorageUnavailableError(InfrastructureError):
    """Raised when the relational store cannot be reached or fails operationally."""
    pass
