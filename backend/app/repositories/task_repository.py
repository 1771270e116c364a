from sqlalchemy.orm import Session
from app.models.task import Task
from typing import List, Optional

class TaskRepository:
    def get_for_user(self, db: Session, user_id: int) -> List[Task]:
        return db.query(Task).filter(Task.user_id == user_id).order_by(Task.created_at.asc(), Task.id.asc()).all()

    def get_owned(self, db: Session, task_id: int, user_id: int) -> Optional[Task]:
        return db.query(Task).filter(Task.id == task_id, Task.user_id == user_id).first()

    def create(self, db: Session, task: Task) -> Task:
        db.add(task)
        db.commit()
        db.refresh(task)
        return task

    def update(self, db: Session, task: Task) -> Task:
        db.commit()
        db.refresh(task)
        return task

    def delete(self, db: Session, task: Task) -> None:
        db.delete(task)
        db.commit()
