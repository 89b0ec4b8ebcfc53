"""Task service: CRUD over the tasks of the authenticated user."""

from config.logging_utils import log_debug
from models.task import TaskCreate, TaskResponse, TaskUpdate
from services.errors import InvalidInputError, NotFoundError
from services.stores import TaskStore

TASK_NOT_FOUND = "Task not found"


class TaskService:
    """
    Scoped CRUD over tasks.

    Every method takes the user id resolved by the auth gate and only ever
    sees that user's tasks.
    """

    def __init__(self, tasks: TaskStore):
        self.tasks = tasks

    async def list(self, user_id: str) -> list[TaskResponse]:
        return await self.tasks.list_for_owner(user_id)

    async def create(self, user_id: str, data: TaskCreate) -> TaskResponse:
        if not data.title:
            raise InvalidInputError("Title required")
        task = await self.tasks.insert(user_id, data.title, data.description)
        log_debug(f"Created task_id={task.id} for user_id={user_id}", prefix="TASKS")
        return task

    async def get(self, user_id: str, task_id: str) -> TaskResponse:
        task = await self.tasks.find_owned(user_id, task_id)
        if task is None:
            raise NotFoundError(TASK_NOT_FOUND)
        return task

    async def update(self, user_id: str, task_id: str, data: TaskUpdate) -> TaskResponse:
        """
        Apply the fields present in `data` to an owned task.

        Raises:
            InvalidInputError: If title is set to empty or completed to null
            NotFoundError: If the task is missing or owned by someone else
        """
        fields = data.model_dump(exclude_unset=True)
        if "title" in fields and not fields["title"]:
            raise InvalidInputError("Title required")
        if "completed" in fields and fields["completed"] is None:
            raise InvalidInputError("Completed must be true or false")

        task = await self.tasks.update_owned(user_id, task_id, fields)
        if task is None:
            raise NotFoundError(TASK_NOT_FOUND)
        log_debug(f"Updated task_id={task_id} fields={sorted(fields)}", prefix="TASKS")
        return task

    async def delete(self, user_id: str, task_id: str) -> dict:
        if not await self.tasks.delete_owned(user_id, task_id):
            raise NotFoundError(TASK_NOT_FOUND)
        log_debug(f"Deleted task_id={task_id} for user_id={user_id}", prefix="TASKS")
        return {"message": "Deleted successfully"}
