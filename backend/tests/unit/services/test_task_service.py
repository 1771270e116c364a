import pytest

from app.core.exceptions import NotFoundError
from app.schemas.task import TaskCreate, TaskUpdate
from app.services.task_service import TaskService

class TestTaskService:
    @pytest.fixture
    def service(self, db_session):
        return TaskService(db_session)

    def test_create_and_list(self, service, regular_user):
        task = service.create_task(regular_user, TaskCreate(title="  Build MVP  ", priority="high"))
        assert task.title == "Build MVP"
        assert task.done is False
        assert [t.id for t in service.list_tasks(regular_user)] == [task.id]

    def test_update_marks_done(self, service, regular_user):
        task = service.create_task(regular_user, TaskCreate(title="Pitch deck"))
        updated = service.update_task(regular_user, task.id, TaskUpdate(done=True, priority="low"))
        assert updated.done is True
        assert updated.priority == "low"
        assert updated.title == "Pitch deck"

    def test_tasks_are_owner_scoped(self, service, regular_user, admin_user):
        task = service.create_task(regular_user, TaskCreate(title="Mine"))
        assert service.list_tasks(admin_user) == []
        with pytest.raises(NotFoundError):
            service.update_task(admin_user, task.id, TaskUpdate(done=True))
        with pytest.raises(NotFoundError):
            service.delete_task(admin_user, task.id)

    def test_delete(self, service, regular_user):
        task = service.create_task(regular_user, TaskCreate(title="Temp"))
        service.delete_task(regular_user, task.id)
        assert service.list_tasks(regular_user) == []
