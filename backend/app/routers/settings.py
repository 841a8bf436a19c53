"""
Settings API Router

Opaque key/value pairs owned by the web client (theme, default goal, ...).

Endpoints:
- GET /api/settings - All settings, by key
- GET /api/settings/{key} - One setting
- POST /api/settings - Create a setting (409 if the key exists)
- PUT /api/settings/{key} - Change a setting's value
"""

from fastapi import APIRouter, Depends, status

from app.dependencies import get_study_storage
from app.middleware.error_handling import (
    ConflictError,
    NotFoundError,
    ValidationError,
    handle_endpoint_errors,
)
from app.models.study import SettingCreate, SettingResponse, SettingUpdate
from app.services.storage import DuplicateSettingError, StudyStorage

router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.get("", response_model=list[SettingResponse])
@handle_endpoint_errors("Get settings", "Failed to fetch settings")
async def list_settings(
    storage: StudyStorage = Depends(get_study_storage),
):
    return await storage.list_settings()


@router.get("/{key}", response_model=SettingResponse)
@handle_endpoint_errors("Get setting", "Failed to fetch setting")
async def get_setting(
    key: str,
    storage: StudyStorage = Depends(get_study_storage),
):
    setting = await storage.get_setting(key)
    if setting is None:
        raise NotFoundError("Setting not found")
    return setting


@router.post("", response_model=SettingResponse, status_code=status.HTTP_201_CREATED)
@handle_endpoint_errors("Create setting", "Failed to create setting")
async def create_setting(
    data: SettingCreate,
    storage: StudyStorage = Depends(get_study_storage),
):
    try:
        return await storage.create_setting(data)
    except DuplicateSettingError as e:
        raise ConflictError(f"Setting '{e.key}' already exists")


@router.put("/{key}", response_model=SettingResponse)
@handle_endpoint_errors("Update setting", "Failed to update setting")
async def update_setting(
    key: str,
    data: SettingUpdate,
    storage: StudyStorage = Depends(get_study_storage),
):
    if not data.value:
        raise ValidationError("Value is required")

    setting = await storage.update_setting(key, data.value)
    if setting is None:
        raise NotFoundError("Setting not found")
    return setting
