"""
API Dependencies

Provides dependency injection for services and database sessions.
This centralizes service creation and management for API endpoints.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.services import FactorService


def get_factor_service(db: Session = Depends(get_db)) -> FactorService:
    """
    Get Factor Service instance with database session

    Returns:
        FactorService: Configured factor service
    """
    return FactorService(db=db)
