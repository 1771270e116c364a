from typing import Optional
from app.services.provisioning_service import AccountProvisioningFailed, ProvisionedAccount

class FailingProvisioner:
    """Provisioner whose identity store is unavailable."""
    def __init__(self, reason: str = "Identity store unavailable"):
        self.reason = reason
        self.calls = []

    def provision(self, email: str, name: Optional[str] = None) -> ProvisionedAccount:
        self.calls.append(email)
        raise AccountProvisioningFailed(self.reason)

class RecordingProvisioner:
    """Wraps a real provisioner and records each call."""
    def __init__(self, inner):
        self.inner = inner
        self.calls = []

    def provision(self, email: str, name: Optional[str] = None) -> ProvisionedAccount:
        self.calls.append(email)
        return self.inner.provision(email, name)
