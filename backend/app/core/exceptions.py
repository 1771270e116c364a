"""
Error taxonomy for the access-control workflows.

Every error is an HTTPException so FastAPI renders it as {"detail": ...}
without a custom handler; services raise them directly.
"""
from typing import Optional
from fastapi import HTTPException, status


class WorkflowError(HTTPException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Request could not be processed"

    def __init__(self, detail: Optional[str] = None, headers: Optional[dict] = None):
        super().__init__(status_code=self.status_code, detail=detail or self.default_detail, headers=headers)


class ValidationError(WorkflowError):
    """Missing or malformed form fields."""
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_detail = "Validation failed"


class AuthError(WorkflowError):
    """Bad credentials or an unusable token."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Not authenticated"

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class ForbiddenError(WorkflowError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Insufficient permissions"


class NotFoundError(WorkflowError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class InvalidTransitionError(WorkflowError):
    """Raised when a status change is not allowed from the current status."""
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, entity: str, current: str, target: str):
        self.current = current
        self.target = target
        super().__init__(f"{entity} is already {current}; cannot move to {target}")


class ConflictError(WorkflowError):
    """Another writer changed the row between our read and our write."""
    status_code = status.HTTP_409_CONFLICT
    default_detail = "The record was modified concurrently. Reload and try again."


class ProvisioningError(WorkflowError):
    """Account creation failed after the request status was touched.

    ``reverted`` tells the caller whether the compensating status revert
    succeeded; when it did not, status and provisioning are inconsistent.
    None means no request status was involved (direct provisioning).
    """
    status_code = status.HTTP_502_BAD_GATEWAY

    def __init__(self, reason: str, reverted: Optional[bool] = None):
        self.reason = reason
        self.reverted = reverted
        if reverted is None:
            detail = f"Account provisioning failed: {reason}"
        elif reverted:
            detail = f"Account provisioning failed: {reason}. Request was reverted to pending."
        else:
            detail = (
                f"Account provisioning failed: {reason}. WARNING: request status and account "
                f"provisioning are now inconsistent; retry the approval."
            )
        super().__init__(detail)


class UpstreamServiceError(WorkflowError):
    """A remote dependency failed or is unreachable. Not retried automatically."""
    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = "Upstream service unavailable"
