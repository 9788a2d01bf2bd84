"""PingFederate administrative account and role representations.

Accounts are decoded from the ``/administrativeAccounts`` payload. Roles are
never stored server-side as first-class objects: they are derived from the
role lists of all accounts, plus the synthetic ``AUDITOR`` role backed by the
boolean ``auditor`` flag.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

AUDITOR_ROLE = "AUDITOR"

# Wire keys modelled explicitly; anything else is carried in ``extra``.
_KNOWN_FIELDS = (
    "username",
    "emailAddress",
    "phoneNumber",
    "department",
    "description",
    "auditor",
    "active",
    "roles",
)


@dataclass
class PingFederateAccount:
    """One PingFederate admin-console user."""
    username: str
    email: str = ""
    phone_number: str = ""
    department: str = ""
    description: str = ""
    auditor: bool = False
    active: bool = False
    roles: List[str] = field(default_factory=list)
    # encryptedPassword and unmodelled attributes, echoed back on PUT
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "PingFederateAccount":
        """Build an account from an API item."""
        return cls(
            username=payload.get("username") or "",
            email=payload.get("emailAddress") or "",
            phone_number=payload.get("phoneNumber") or "",
            department=payload.get("department") or "",
            description=payload.get("description") or "",
            auditor=bool(payload.get("auditor", False)),
            active=bool(payload.get("active", False)),
            roles=list(payload.get("roles") or []),
            extra={k: v for k, v in payload.items() if k not in _KNOWN_FIELDS},
        )

    def to_api(self) -> Dict[str, Any]:
        """Serialize the full account for a PUT.

        ``emailAddress``, ``phoneNumber`` and ``department`` are omitted when
        empty, matching what the admin API accepts for optional attributes.
        """
        payload: Dict[str, Any] = dict(self.extra)
        payload["username"] = self.username
        if self.email:
            payload["emailAddress"] = self.email
        if self.phone_number:
            payload["phoneNumber"] = self.phone_number
        if self.department:
            payload["department"] = self.department
        payload["description"] = self.description
        payload["auditor"] = self.auditor
        payload["active"] = self.active
        payload["roles"] = list(self.roles)
        return payload


@dataclass(frozen=True)
class PingFederateRole:
    """Administrative role; name and id are the same string."""
    name: str
    id: str

    @classmethod
    def named(cls, name: str) -> "PingFederateRole":
        return cls(name=name, id=name)


@dataclass(frozen=True)
class StructuralRole:
    """A role carried as a string in the account's ``roles`` list."""
    name: str

    def is_held_by(self, account: PingFederateAccount) -> bool:
        return self.name in account.roles

    def assign(self, account: PingFederateAccount) -> bool:
        """Append the role unless already held. Returns True if changed."""
        if self.is_held_by(account):
            return False
        account.roles.append(self.name)
        return True

    def revoke(self, account: PingFederateAccount) -> bool:
        """Drop every occurrence of the role. Returns True if changed."""
        if not self.is_held_by(account):
            return False
        account.roles = [role for role in account.roles if role != self.name]
        return True


@dataclass(frozen=True)
class AuditorRole:
    """The implicit AUDITOR role, backed only by the ``auditor`` flag."""
    name: str = AUDITOR_ROLE

    def is_held_by(self, account: PingFederateAccount) -> bool:
        return account.auditor

    def assign(self, account: PingFederateAccount) -> bool:
        if account.auditor:
            return False
        account.auditor = True
        return True

    def revoke(self, account: PingFederateAccount) -> bool:
        if not account.auditor:
            return False
        account.auditor = False
        return True


RoleKind = Union[StructuralRole, AuditorRole]


def is_auditor(role_id: str) -> bool:
    return role_id == AUDITOR_ROLE


def resolve_role(role_id: str) -> RoleKind:
    """Map a role id to the representation that stores its membership."""
    if is_auditor(role_id):
        return AuditorRole()
    return StructuralRole(role_id)
