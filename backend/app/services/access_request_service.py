from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError
from sqlalchemy.exc import SQLAlchemyError
from typing import List, Optional
from datetime import datetime
import logging

from app.core.audit import AuditService
from app.core.exceptions import (
    ConflictError, ForbiddenError, InvalidTransitionError, NotFoundError,
    ProvisioningError, ValidationError,
)
from app.models.access_request import AccessRequest, AccessRequestStatus
from app.models.user import User
from app.models.user_role import ADMIN_ROLE
from app.repositories.access_request_repository import AccessRequestRepository
from app.repositories.role_repository import RoleRepository
from app.repositories.user_repository import UserRepository
from app.schemas.admin import AccessRequestCreate
from app.services.provisioning_service import AccountProvisioningFailed, ProvisioningService

logger = logging.getLogger(__name__)

class AccessRequestService:
    """
    Access request intake and the admin approval workflow.

    Approval is a two-step saga: the request is first committed as
    ``approved_pending_provisioning``, then the account is provisioned and the
    request finalised as ``approved``. If provisioning fails the status is
    reverted to ``pending``. A request left in the intermediate status (revert
    failed) is retried by approving it again.
    """

    def __init__(self, db: Session, provisioner: Optional[ProvisioningService] = None):
        self.db = db
        self.access_request_repo = AccessRequestRepository()
        self.role_repo = RoleRepository()
        self.user_repo = UserRepository()
        self.provisioner = provisioner or ProvisioningService(db)

    # --- Intake ---

    def submit(self, request_data: AccessRequestCreate) -> AccessRequest:
        email = str(request_data.email).strip().lower()

        if self.user_repo.get_by_email(self.db, email):
            raise ConflictError("An account with this email already exists")

        if self.access_request_repo.get_open_by_email(self.db, email):
            raise ConflictError("An access request for this email is already open")

        request = AccessRequest(
            name=request_data.name,
            email=email,
            reason=request_data.reason,
            status=AccessRequestStatus.PENDING,
        )
        request = self.access_request_repo.create(self.db, request)
        logger.info(f"[ACCESS] Request {request.id} submitted for {email}")
        return request

    def get_access_requests(self, status: Optional[str] = None) -> List[AccessRequest]:
        if status and status not in AccessRequestStatus.ALL:
            raise ValidationError(f"Unknown status '{status}'")
        return self.access_request_repo.get_all(self.db, status=status)

    # --- Decisions ---

    def approve(self, request_id: int, admin: User) -> dict:
        return self.decide(request_id, AccessRequestStatus.APPROVED, admin)

    def reject(self, request_id: int, admin: User) -> dict:
        return self.decide(request_id, AccessRequestStatus.REJECTED, admin)

    def decide(self, request_id: int, outcome: str, admin: User) -> dict:
        if outcome not in AccessRequestStatus.TERMINAL:
            raise ValidationError("Outcome must be 'approved' or 'rejected'")

        # Authorization boundary for the mutation, independent of the route dependency
        if admin is None or not self.role_repo.has_role(self.db, admin.id, ADMIN_ROLE):
            raise ForbiddenError("Admin role required")

        request = self.access_request_repo.get_by_id(self.db, request_id)
        if not request:
            raise NotFoundError("Request not found")

        if outcome == AccessRequestStatus.REJECTED:
            return self._reject(request, admin)
        return self._approve(request, admin)

    def _reject(self, request: AccessRequest, admin: User) -> dict:
        if request.status != AccessRequestStatus.PENDING:
            raise InvalidTransitionError("Request", request.status, AccessRequestStatus.REJECTED)

        request.status = AccessRequestStatus.REJECTED
        request.reviewed_by = admin.id
        request.reviewed_at = datetime.utcnow()
        self._commit(request)

        AuditService.log_action(
            db=self.db,
            action="REQUEST_REJECTED",
            performer=admin,
            target_id=str(request.id),
            target_type="REQUEST",
            old_value=AccessRequestStatus.PENDING,
            new_value=AccessRequestStatus.REJECTED,
        )
        logger.info(f"[ACCESS] Request {request.id} rejected by {admin.email}")
        return {"message": "Request rejected", "request": request}

    def _approve(self, request: AccessRequest, admin: User) -> dict:
        if request.status == AccessRequestStatus.PENDING:
            request.status = AccessRequestStatus.APPROVED_PENDING_PROVISIONING
            request.reviewed_by = admin.id
            request.reviewed_at = datetime.utcnow()
            self._commit(request)
        elif request.status == AccessRequestStatus.APPROVED_PENDING_PROVISIONING:
            logger.warning(f"[ACCESS] Retrying provisioning for request {request.id}")
        else:
            raise InvalidTransitionError("Request", request.status, AccessRequestStatus.APPROVED)

        existing = self.user_repo.get_by_email(self.db, request.email)
        if existing:
            # Provisioned by an earlier attempt or directly by an admin; the
            # credential was handed out then, so none is issued here
            return self._finalise(request, admin, existing, temp_password=None)

        try:
            account = self.provisioner.provision(request.email, request.name)
        except AccountProvisioningFailed as e:
            reverted = self._revert_to_pending(request)
            AuditService.log_action(
                db=self.db,
                action="REQUEST_PROVISIONING_FAILED",
                performer=admin,
                target_id=str(request.id),
                target_type="REQUEST",
                details={"reason": str(e), "reverted": reverted},
            )
            logger.error(
                f"[ACCESS] Provisioning failed for request {request.id}: {e} "
                f"({'reverted to pending' if reverted else 'status left inconsistent'})"
            )
            raise ProvisioningError(str(e), reverted=reverted)

        return self._finalise(request, admin, account.user, account.temp_password)

    def _finalise(self, request: AccessRequest, admin: User, user: User, temp_password: Optional[str]) -> dict:
        request.status = AccessRequestStatus.APPROVED
        request.provisioned_user_id = user.id
        self._commit(request)

        AuditService.log_action(
            db=self.db,
            action="REQUEST_APPROVED",
            performer=admin,
            target_id=str(request.id),
            target_type="REQUEST",
            old_value=AccessRequestStatus.PENDING,
            new_value=AccessRequestStatus.APPROVED,
            details={"user_created_id": str(user.id)},
        )
        logger.info(f"[ACCESS] Request {request.id} approved by {admin.email}; account {user.user_id}")

        return {
            "message": "Request approved and account created" if temp_password else
                       "Request approved; account already existed",
            "request": request,
            "temp_password": temp_password,
            "provisioned_email": user.email,
        }

    def _commit(self, request: AccessRequest) -> None:
        try:
            self.access_request_repo.update(self.db, request)
        except StaleDataError:
            self.db.rollback()
            logger.warning(f"[ACCESS] Concurrent modification of request {request.id}")
            raise ConflictError()

    def _revert_to_pending(self, request: AccessRequest) -> bool:
        try:
            request.status = AccessRequestStatus.PENDING
            request.reviewed_by = None
            request.reviewed_at = None
            self.access_request_repo.update(self.db, request)
            return True
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"[ACCESS] Could not revert request {request.id}: {e}")
            return False
