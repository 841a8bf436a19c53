"""
Todos API Router

Endpoints:
- GET /api/todos - Todos with their subject (by due date, undated last)
- POST /api/todos - Create a todo
- PUT /api/todos/{todo_id} - Partial update (e.g. mark completed)
- DELETE /api/todos/{todo_id} - Delete a todo
"""

from fastapi import APIRouter, Depends, Response, status

from app.dependencies import get_study_storage
from app.middleware.error_handling import (
    NotFoundError,
    ValidationError,
    handle_endpoint_errors,
)
from app.models.study import TodoCreate, TodoResponse, TodoUpdate, TodoWithSubject
from app.services.storage import StudyStorage, UnknownSubjectError

router = APIRouter(prefix="/api/todos", tags=["todos"])


@router.get("", response_model=list[TodoWithSubject])
@handle_endpoint_errors("Get todos", "Failed to fetch todos")
async def list_todos(
    storage: StudyStorage = Depends(get_study_storage),
):
    return await storage.list_todos()


@router.post("", response_model=TodoResponse, status_code=status.HTTP_201_CREATED)
@handle_endpoint_errors("Create todo", "Failed to create todo")
async def create_todo(
    data: TodoCreate,
    storage: StudyStorage = Depends(get_study_storage),
):
    try:
        return await storage.create_todo(data)
    except UnknownSubjectError as e:
        raise ValidationError("Invalid todo data", details={"subject_id": e.subject_id})


@router.put("/{todo_id}", response_model=TodoResponse)
@handle_endpoint_errors("Update todo", "Failed to update todo")
async def update_todo(
    todo_id: int,
    data: TodoUpdate,
    storage: StudyStorage = Depends(get_study_storage),
):
    try:
        todo = await storage.update_todo(todo_id, data)
    except UnknownSubjectError as e:
        raise ValidationError("Invalid todo data", details={"subject_id": e.subject_id})
    if todo is None:
        raise NotFoundError("Todo not found")
    return todo


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_endpoint_errors("Delete todo", "Failed to delete todo")
async def delete_todo(
    todo_id: int,
    storage: StudyStorage = Depends(get_study_storage),
):
    if not await storage.delete_todo(todo_id):
        raise NotFoundError("Todo not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
