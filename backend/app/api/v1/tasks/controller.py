from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from app.core.database import get_db
from app.core.permissions import get_onboarded_user
from app.models.user import User
from app.schemas.task import TaskCreate, TaskUpdate, TaskResponse
from app.services.task_service import TaskService

router = APIRouter()

def get_task_service(db: Session = Depends(get_db)) -> TaskService:
    return TaskService(db)

@router.get("", response_model=List[TaskResponse])
def list_tasks(
    current_user: User = Depends(get_onboarded_user),
    service: TaskService = Depends(get_task_service)
):
    return service.list_tasks(current_user)

@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    data: TaskCreate,
    current_user: User = Depends(get_onboarded_user),
    service: TaskService = Depends(get_task_service)
):
    return service.create_task(current_user, data)

@router.patch("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: int,
    data: TaskUpdate,
    current_user: User = Depends(get_onboarded_user),
    service: TaskService = Depends(get_task_service)
):
    return service.update_task(current_user, task_id, data)

@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: int,
    current_user: User = Depends(get_onboarded_user),
    service: TaskService = Depends(get_task_service)
):
    service.delete_task(current_user, task_id)
