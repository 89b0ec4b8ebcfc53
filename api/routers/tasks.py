"""
Tasks API Router

Provides CRUD endpoints over the authenticated user's tasks.
"""

from fastapi import APIRouter, Depends, status

from api.dependencies import get_current_user_id, get_task_service
from models.task import TaskCreate, TaskResponse, TaskUpdate
from services.task_service import TaskService


router = APIRouter(prefix="/api/tasks", tags=["Tasks"])


@router.get("", response_model=list[TaskResponse])
async def list_tasks(
    user_id: str = Depends(get_current_user_id),
    tasks: TaskService = Depends(get_task_service)
):
    """List all tasks of the current user, newest first."""
    return await tasks.list(user_id)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    data: TaskCreate,
    user_id: str = Depends(get_current_user_id),
    tasks: TaskService = Depends(get_task_service)
):
    """Create a task."""
    return await tasks.create(user_id, data)


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: str,
    user_id: str = Depends(get_current_user_id),
    tasks: TaskService = Depends(get_task_service)
):
    """Get a single task by ID."""
    return await tasks.get(user_id, task_id)


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: str,
    data: TaskUpdate,
    user_id: str = Depends(get_current_user_id),
    tasks: TaskService = Depends(get_task_service)
):
    """Update title, description or completed flag of a task."""
    return await tasks.update(user_id, task_id, data)


@router.delete("/{task_id}")
async def delete_task(
    task_id: str,
    user_id: str = Depends(get_current_user_id),
    tasks: TaskService = Depends(get_task_service)
):
    """Delete a task."""
    return await tasks.delete(user_id, task_id)
