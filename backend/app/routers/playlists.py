"""
Playlists API Router

Saved video-learning links, each filed under a subject.

Endpoints:
- GET /api/playlists - Playlists with their subject, by name
- POST /api/playlists - Save a playlist
- PUT /api/playlists/{playlist_id} - Partial update
- DELETE /api/playlists/{playlist_id} - Delete a playlist
"""

from fastapi import APIRouter, Depends, Response, status

from app.dependencies import get_study_storage
from app.middleware.error_handling import (
    NotFoundError,
    ValidationError,
    handle_endpoint_errors,
)
from app.models.study import (
    PlaylistCreate,
    PlaylistResponse,
    PlaylistUpdate,
    PlaylistWithSubject,
)
from app.services.storage import StudyStorage, UnknownSubjectError

router = APIRouter(prefix="/api/playlists", tags=["playlists"])


@router.get("", response_model=list[PlaylistWithSubject])
@handle_endpoint_errors("Get playlists", "Failed to fetch playlists")
async def list_playlists(
    storage: StudyStorage = Depends(get_study_storage),
):
    return await storage.list_playlists()


@router.post("", response_model=PlaylistResponse, status_code=status.HTTP_201_CREATED)
@handle_endpoint_errors("Create playlist", "Failed to create playlist")
async def create_playlist(
    data: PlaylistCreate,
    storage: StudyStorage = Depends(get_study_storage),
):
    try:
        return await storage.create_playlist(data)
    except UnknownSubjectError as e:
        raise ValidationError(
            "Invalid playlist data", details={"subject_id": e.subject_id}
        )


@router.put("/{playlist_id}", response_model=PlaylistResponse)
@handle_endpoint_errors("Update playlist", "Failed to update playlist")
async def update_playlist(
    playlist_id: int,
    data: PlaylistUpdate,
    storage: StudyStorage = Depends(get_study_storage),
):
    try:
        playlist = await storage.update_playlist(playlist_id, data)
    except UnknownSubjectError as e:
        raise ValidationError(
            "Invalid playlist data", details={"subject_id": e.subject_id}
        )
    if playlist is None:
        raise NotFoundError("Playlist not found")
    return playlist


@router.delete("/{playlist_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_endpoint_errors("Delete playlist", "Failed to delete playlist")
async def delete_playlist(
    playlist_id: int,
    storage: StudyStorage = Depends(get_study_storage),
):
    if not await storage.delete_playlist(playlist_id):
        raise NotFoundError("Playlist not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
