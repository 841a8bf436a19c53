"""
Subjects API Router

Endpoints:
- GET /api/subjects - List subjects (by name)
- POST /api/subjects - Create a subject
- PUT /api/subjects/{subject_id} - Update name and/or color
- DELETE /api/subjects/{subject_id} - Delete a subject and everything filed under it
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from app.dependencies import get_study_storage
from app.middleware.error_handling import NotFoundError, handle_endpoint_errors
from app.models.study import SubjectCreate, SubjectResponse, SubjectUpdate
from app.services.storage import StudyStorage

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/subjects", tags=["subjects"])


@router.get("", response_model=list[SubjectResponse])
@handle_endpoint_errors("Get subjects", "Failed to fetch subjects")
async def list_subjects(
    storage: StudyStorage = Depends(get_study_storage),
):
    return await storage.list_subjects()


@router.post("", response_model=SubjectResponse, status_code=status.HTTP_201_CREATED)
@handle_endpoint_errors("Create subject", "Failed to create subject")
async def create_subject(
    data: SubjectCreate,
    storage: StudyStorage = Depends(get_study_storage),
):
    subject = await storage.create_subject(data)
    logger.info(f"Created subject {subject.id} ({subject.name})")
    return subject


@router.put("/{subject_id}", response_model=SubjectResponse)
@handle_endpoint_errors("Update subject", "Failed to update subject")
async def update_subject(
    subject_id: int,
    data: SubjectUpdate,
    storage: StudyStorage = Depends(get_study_storage),
):
    subject = await storage.update_subject(subject_id, data)
    if subject is None:
        raise NotFoundError("Subject not found")
    return subject


@router.delete("/{subject_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_endpoint_errors("Delete subject", "Failed to delete subject")
async def delete_subject(
    subject_id: int,
    storage: StudyStorage = Depends(get_study_storage),
):
    """
    Delete a subject.

    Its study sessions, todos and playlists are deleted with it.
    """
    if not await storage.delete_subject(subject_id):
        raise NotFoundError("Subject not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
