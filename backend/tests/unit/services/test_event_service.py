import pytest
from datetime import datetime, timedelta

from app.core.exceptions import ForbiddenError, NotFoundError
from app.models.audit_log import AuditLog
from app.schemas.event import EventCreate
from app.services.event_service import EventService
from app.services.notification_service import NotificationService

def _event(title="Smart India Hackathon", visibility="shared", days=10):
    return EventCreate(title=title, event_date=datetime.utcnow() + timedelta(days=days), visibility=visibility)

class TestEventService:
    @pytest.fixture
    def service(self, db_session):
        return EventService(db_session)

    @pytest.fixture
    def notifications(self, db_session):
        return NotificationService(db_session)

    def test_user_event_starts_unapproved_and_notifies_creator(self, service, notifications, regular_user):
        event = service.create_event(regular_user, _event())

        assert event.approved is False
        assert event.created_by == regular_user.id
        feed = notifications.get_feed(regular_user)
        assert [n.message for n in feed["notifications"]] == [
            'Your event "Smart India Hackathon" has been submitted for approval.'
        ]

    def test_admin_event_is_pre_approved(self, service, notifications, admin_user):
        event = service.create_event(admin_user, _event(title="Kickoff"))
        assert event.approved is True
        assert notifications.get_feed(admin_user)["notifications"] == []

    def test_approve_notifies_creator(self, service, notifications, admin_user, regular_user):
        event = service.create_event(regular_user, _event())

        approved = service.approve_event(event.id, admin_user)

        assert approved.approved is True
        latest = notifications.get_feed(regular_user)["notifications"][0]
        assert latest.message == 'Your event "Smart India Hackathon" has been approved! 🎉'
        assert latest.read is False

    def test_approve_is_audited(self, db_session, service, admin_user, regular_user):
        event = service.create_event(regular_user, _event())
        service.approve_event(event.id, admin_user)
        assert db_session.query(AuditLog).filter(AuditLog.action == "EVENT_APPROVED").count() == 1

    def test_approve_already_approved_does_not_renotify(self, service, notifications, admin_user, regular_user):
        event = service.create_event(regular_user, _event())
        service.approve_event(event.id, admin_user)
        service.approve_event(event.id, admin_user)

        messages = [n.message for n in notifications.get_feed(regular_user)["notifications"]]
        assert sum("approved" in m for m in messages) == 1

    def test_non_admin_cannot_approve(self, db_session, service, notifications, regular_user, make_user):
        other = make_user("other@example.com")
        event = service.create_event(regular_user, _event())

        with pytest.raises(ForbiddenError):
            service.approve_event(event.id, other)

        db_session.expire_all()
        assert service.event_repo.get_by_id(db_session, event.id).approved is False
        assert len(notifications.get_feed(regular_user)["notifications"]) == 1

    def test_approve_unknown_event(self, service, admin_user):
        with pytest.raises(NotFoundError):
            service.approve_event(404, admin_user)

    def test_visibility(self, service, admin_user, regular_user, make_user):
        other = make_user("other@example.com")
        shared_approved = service.create_event(admin_user, _event(title="Shared", days=1))
        private_admin = service.create_event(admin_user, _event(title="Admin private", visibility="private", days=2))
        own_pending = service.create_event(regular_user, _event(title="Mine", days=3))
        others_pending = service.create_event(other, _event(title="Theirs", days=4))

        visible = [e.id for e in service.list_events(regular_user)]
        assert visible == [shared_approved.id, own_pending.id]

        everything = [e.id for e in service.list_events(admin_user)]
        assert everything == [shared_approved.id, private_admin.id, own_pending.id, others_pending.id]

    def test_delete_by_creator(self, service, regular_user):
        event = service.create_event(regular_user, _event())
        service.delete_event(event.id, regular_user)
        assert service.list_events(regular_user) == []

    def test_delete_by_stranger_is_forbidden(self, service, regular_user, make_user):
        other = make_user("other@example.com")
        event = service.create_event(regular_user, _event())
        with pytest.raises(ForbiddenError):
            service.delete_event(event.id, other)

    def test_admin_can_delete_any_event(self, service, admin_user, regular_user):
        event = service.create_event(regular_user, _event())
        service.delete_event(event.id, admin_user)
        with pytest.raises(NotFoundError):
            service.delete_event(event.id, admin_user)
