from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional

from app.core.database import get_db
from app.core.exceptions import ProvisioningError
from app.core.permissions import get_admin_user
from app.models.user import User
from app.schemas.admin import (
    AccessRequestResponse, AccessDecisionResponse, CredentialReissueRequest,
    ProvisionRequest, ProvisionResponse,
)
from app.services.access_request_service import AccessRequestService
from app.services.provisioning_service import AccountProvisioningFailed, ProvisioningService

router = APIRouter()

def get_access_request_service(db: Session = Depends(get_db)) -> AccessRequestService:
    return AccessRequestService(db)

def get_provisioning_service(db: Session = Depends(get_db)) -> ProvisioningService:
    return ProvisioningService(db)

# --- Access Requests ---

@router.get("/requests", response_model=List[AccessRequestResponse])
def get_requests(
    status: Optional[str] = None,
    admin: User = Depends(get_admin_user),
    service: AccessRequestService = Depends(get_access_request_service)
):
    """Get all access requests (newest first), optionally filtered by status"""
    return service.get_access_requests(status)

@router.post("/requests/{request_id}/approve", response_model=AccessDecisionResponse)
def approve_request(
    request_id: int,
    admin: User = Depends(get_admin_user),
    service: AccessRequestService = Depends(get_access_request_service)
):
    """Approve an access request, create the account and return its temporary password"""
    return service.approve(request_id, admin)

@router.post("/requests/{request_id}/reject", response_model=AccessDecisionResponse)
def reject_request(
    request_id: int,
    admin: User = Depends(get_admin_user),
    service: AccessRequestService = Depends(get_access_request_service)
):
    """Reject an access request"""
    return service.reject(request_id, admin)

# --- Direct provisioning ---

@router.post("/provision", response_model=ProvisionResponse)
def provision_user(
    data: ProvisionRequest,
    admin: User = Depends(get_admin_user),
    service: ProvisioningService = Depends(get_provisioning_service)
):
    """Create an account for an email outside the request flow"""
    try:
        account = service.provision(str(data.email), data.name)
    except AccountProvisioningFailed as e:
        raise ProvisioningError(str(e))
    return ProvisionResponse(
        success=True,
        message=f"User created. Temporary password: {account.temp_password}",
        temp_password=account.temp_password,
    )

@router.post("/reissue-credential", response_model=ProvisionResponse)
def reissue_credential(
    data: CredentialReissueRequest,
    admin: User = Depends(get_admin_user),
    service: ProvisioningService = Depends(get_provisioning_service)
):
    """Issue a new temporary password for an account that lost (or spent) its first one"""
    account = service.reissue(str(data.email), performer=admin)
    return ProvisionResponse(
        success=True,
        message=f"Temporary password reissued: {account.temp_password}",
        temp_password=account.temp_password,
    )
