from sqlalchemy.orm import Session
from typing import List

from app.core.exceptions import NotFoundError
from app.models.task import Task
from app.models.user import User
from app.repositories.task_repository import TaskRepository
from app.schemas.task import TaskCreate, TaskUpdate

class TaskService:
    def __init__(self, db: Session):
        self.db = db
        self.task_repo = TaskRepository()

    def list_tasks(self, user: User) -> List[Task]:
        return self.task_repo.get_for_user(self.db, user.id)

    def create_task(self, user: User, data: TaskCreate) -> Task:
        return self.task_repo.create(self.db, Task(user_id=user.id, title=data.title, priority=data.priority))

    def _get_owned(self, user: User, task_id: int) -> Task:
        task = self.task_repo.get_owned(self.db, task_id, user.id)
        if not task:
            raise NotFoundError("Task not found")
        return task

    def update_task(self, user: User, task_id: int, data: TaskUpdate) -> Task:
        task = self._get_owned(user, task_id)
        if data.title is not None:
            title = data.title.strip()
            if title:
                task.title = title
        if data.priority is not None:
            task.priority = data.priority
        if data.done is not None:
            task.done = data.done
        return self.task_repo.update(self.db, task)

    def delete_task(self, user: User, task_id: int) -> None:
        self.task_repo.delete(self.db, self._get_owned(user, task_id))
