from app.core.route_guard import COMPLETE_PROFILE_PATH, LOGIN_PATH, RouteDecision
from app.core.session_context import SessionContext, restore_session

class TestSessionContext:
    def test_starts_loading(self):
        context = SessionContext()
        assert context.snapshot().loading is True
        assert context.decide("/dashboard") == RouteDecision.loading()

    def test_restore_applies_state(self):
        context = SessionContext()
        gen = context.begin_restore()
        assert context.apply_restore(gen, 7, profile_completed=True, roles=["admin"]) is True

        snap = context.snapshot()
        assert snap.has_session is True
        assert snap.user_id == 7
        assert snap.roles == frozenset({"admin"})
        assert context.decide("/dashboard/admin") == RouteDecision.render()

    def test_stale_restore_is_dropped(self):
        context = SessionContext()
        old = context.begin_restore()
        new = context.begin_restore()

        assert context.apply_restore(old, 1, profile_completed=True) is False
        assert context.snapshot().loading is True
        assert context.apply_restore(new, 2, profile_completed=False) is True
        assert context.snapshot().user_id == 2

    def test_restore_after_teardown_is_dropped(self):
        context = SessionContext()
        gen = context.begin_restore()
        context.teardown()

        assert context.apply_restore(gen, 1, profile_completed=True, roles=["admin"]) is False
        snap = context.snapshot()
        assert snap.has_session is False
        assert snap.roles == frozenset()
        assert context.decide("/dashboard") == RouteDecision.redirect(LOGIN_PATH)

    def test_profile_completion_is_pushed(self):
        context = SessionContext()
        seen = []
        context.subscribe(seen.append)

        gen = context.begin_restore()
        context.apply_restore(gen, 1, profile_completed=False)
        assert context.decide("/dashboard/tasks") == RouteDecision.redirect(COMPLETE_PROFILE_PATH)

        assert context.set_profile_completed(gen, True) is True
        assert context.decide("/dashboard/tasks") == RouteDecision.render()
        assert [s.profile_completed for s in seen] == [False, False, True]

    def test_set_profile_completed_ignores_stale_generation(self):
        context = SessionContext()
        gen = context.begin_restore()
        context.apply_restore(gen, 1)
        context.teardown()
        assert context.set_profile_completed(gen, True) is False

    def test_unsubscribe(self):
        context = SessionContext()
        seen = []
        unsubscribe = context.subscribe(seen.append)
        unsubscribe()
        context.begin_restore()
        assert seen == []

    def test_failing_listener_does_not_break_others(self):
        context = SessionContext()
        seen = []

        def broken(snapshot):
            raise RuntimeError("boom")

        context.subscribe(broken)
        context.subscribe(seen.append)
        context.begin_restore()
        assert len(seen) == 1

class TestRestoreSession:
    def test_anonymous(self, db_session):
        context = restore_session(db_session, None)
        assert context.snapshot().has_session is False
        assert context.snapshot().loading is False

    def test_reads_profile_and_roles(self, db_session, admin_user):
        context = restore_session(db_session, admin_user)
        snap = context.snapshot()
        assert snap.user_id == admin_user.id
        assert snap.profile_completed is True
        assert snap.roles == frozenset({"admin"})
