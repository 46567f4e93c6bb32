"""
Core Services Module

Provides basic CRUD services over the relational store.
"""

from app.services.core.factor_service import FactorService

__all__ = ["FactorService"]
