"""
Task Models

Defines schemas for tasks owned by a single user.
"""

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class TaskCreate(BaseModel):
    """Request schema for task creation."""

    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = Field(default=None, description="Task title, required and non-empty")
    description: Optional[str] = Field(default=None, description="Optional free text")


class TaskUpdate(BaseModel):
    """
    Request schema for partial task updates.

    Lists every field a client may change. Anything else in the payload
    (ids, owner, timestamps) is dropped during validation.
    """

    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    description: Optional[str] = None
    completed: Optional[bool] = None


class TaskResponse(BaseModel):
    """Response schema for a task."""

    id: str
    owner_id: str
    title: str
    description: Optional[str] = None
    completed: bool = False
    created_at: datetime
    updated_at: datetime
