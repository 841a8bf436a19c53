"""
FastAPI Dependencies

Common dependencies shared by the resource routers.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import get_db
from app.services.storage import StudyStorage


async def get_study_storage(db: AsyncSession = Depends(get_db)) -> StudyStorage:
    """Storage bound to the request's database session."""
    return StudyStorage(db)
