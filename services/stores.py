"""MongoDB-backed stores for users and tasks."""

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Optional

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from config.database import Database
from models.user import UserInDB
from models.task import TaskResponse
from services.errors import InternalError

logger = logging.getLogger(f"taskflow.{__name__}")


class EmailAlreadyExists(Exception):
    """Raised when the unique email index rejects an insert."""


def utcnow() -> datetime:
    """Current UTC time, naive and truncated to BSON's millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.replace(tzinfo=None, microsecond=now.microsecond // 1000 * 1000)


def parse_object_id(value: str) -> Optional[ObjectId]:
    """Return an ObjectId for a valid id string, None otherwise."""
    if not ObjectId.is_valid(value):
        return None
    return ObjectId(value)


@contextmanager
def store_errors(operation: str):
    """Convert driver failures into InternalError."""
    try:
        yield
    except PyMongoError as e:
        logger.error(f"[STORE] {operation} failed: {e}")
        raise InternalError(f"{operation} failed") from e


class UserStore:
    """Persists user identity records in the `users` collection."""

    collection_name = "users"

    def __init__(self, database: Database):
        self.database = database

    @property
    def collection(self):
        return self.database.get_collection(self.collection_name)

    async def create_indexes(self) -> None:
        """Create unique index on email field."""
        with store_errors("Creating user indexes"):
            await self.collection.create_index("email", unique=True)

    @staticmethod
    def _to_user(doc: dict) -> UserInDB:
        return UserInDB(
            id=str(doc["_id"]),
            name=doc["name"],
            email=doc["email"],
            password_hash=doc["password_hash"],
            created_at=doc["created_at"]
        )

    async def get_by_email(self, email: str) -> Optional[UserInDB]:
        """Get a user by email."""
        with store_errors("User lookup"):
            doc = await self.collection.find_one({"email": email})
        return self._to_user(doc) if doc else None

    async def get_by_id(self, user_id: str) -> Optional[UserInDB]:
        """Get a user by ID."""
        oid = parse_object_id(user_id)
        if oid is None:
            return None
        with store_errors("User lookup"):
            doc = await self.collection.find_one({"_id": oid})
        return self._to_user(doc) if doc else None

    async def create(self, name: str, email: str, password_hash: str) -> UserInDB:
        """
        Insert a new user.

        Raises:
            EmailAlreadyExists: If another user already has this email
        """
        user_doc = {
            "name": name,
            "email": email,
            "password_hash": password_hash,
            "created_at": utcnow()
        }
        with store_errors("User insert"):
            try:
                result = await self.collection.insert_one(user_doc)
            except DuplicateKeyError as e:
                raise EmailAlreadyExists(email) from e
        user_doc["_id"] = result.inserted_id
        return self._to_user(user_doc)


class TaskStore:
    """
    Persists tasks in the `tasks` collection.

    Every read and write is filtered by both the task id and its owner,
    so a task owned by someone else looks exactly like a missing one.
    """

    collection_name = "tasks"

    def __init__(self, database: Database):
        self.database = database

    @property
    def collection(self):
        return self.database.get_collection(self.collection_name)

    async def create_indexes(self) -> None:
        """Create indexes for the tasks collection."""
        with store_errors("Creating task indexes"):
            await self.collection.create_index([("owner_id", ASCENDING), ("created_at", DESCENDING)])

    @staticmethod
    def _to_task(doc: dict) -> TaskResponse:
        return TaskResponse(
            id=str(doc["_id"]),
            owner_id=doc["owner_id"],
            title=doc["title"],
            description=doc.get("description"),
            completed=doc.get("completed", False),
            created_at=doc["created_at"],
            updated_at=doc["updated_at"]
        )

    async def list_for_owner(self, owner_id: str) -> list[TaskResponse]:
        """List tasks of one owner, newest first."""
        tasks = []
        with store_errors("Task listing"):
            cursor = self.collection.find({"owner_id": owner_id}).sort(
                [("created_at", DESCENDING), ("_id", DESCENDING)]
            )
            async for doc in cursor:
                tasks.append(self._to_task(doc))
        return tasks

    async def insert(self, owner_id: str, title: str, description: Optional[str]) -> TaskResponse:
        """Insert a new, not completed task."""
        now = utcnow()
        task_doc = {
            "owner_id": owner_id,
            "title": title,
            "description": description,
            "completed": False,
            "created_at": now,
            "updated_at": now
        }
        with store_errors("Task insert"):
            result = await self.collection.insert_one(task_doc)
        task_doc["_id"] = result.inserted_id
        return self._to_task(task_doc)

    async def find_owned(self, owner_id: str, task_id: str) -> Optional[TaskResponse]:
        """Get a task by id if it belongs to owner_id."""
        oid = parse_object_id(task_id)
        if oid is None:
            return None
        with store_errors("Task lookup"):
            doc = await self.collection.find_one({"_id": oid, "owner_id": owner_id})
        return self._to_task(doc) if doc else None

    async def update_owned(self, owner_id: str, task_id: str, fields: dict) -> Optional[TaskResponse]:
        """
        Atomically apply `fields` to an owned task and refresh updated_at.

        Returns:
            The updated task, or None when no owned task matches
        """
        oid = parse_object_id(task_id)
        if oid is None:
            return None
        changes = dict(fields)
        changes["updated_at"] = utcnow()
        with store_errors("Task update"):
            doc = await self.collection.find_one_and_update(
                {"_id": oid, "owner_id": owner_id},
                {"$set": changes},
                return_document=ReturnDocument.AFTER
            )
        return self._to_task(doc) if doc else None

    async def delete_owned(self, owner_id: str, task_id: str) -> bool:
        """Atomically delete an owned task. Returns False when nothing matched."""
        oid = parse_object_id(task_id)
        if oid is None:
            return False
        with store_errors("Task delete"):
            doc = await self.collection.find_one_and_delete({"_id": oid, "owner_id": owner_id})
        return doc is not None
