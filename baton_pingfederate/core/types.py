"""Resource, entitlement and grant objects exchanged with the sync host.

These mirror the host platform's connector contract: resource types carry a
trait, resources are addressed by ``(resource_type, resource)``, entitlements
hang off a resource, and grants bind a principal to an entitlement.
"""
from __future__ import annotations
import abc
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Tuple

TRAIT_USER = "TRAIT_USER"
TRAIT_ROLE = "TRAIT_ROLE"

STATUS_ENABLED = "STATUS_ENABLED"
STATUS_DISABLED = "STATUS_DISABLED"

PURPOSE_ASSIGNMENT = "PURPOSE_VALUE_ASSIGNMENT"


@dataclass(frozen=True)
class ResourceType:
    id: str
    display_name: str
    traits: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ResourceId:
    resource_type: str
    resource: str


@dataclass
class UserEmail:
    address: str
    is_primary: bool = False


@dataclass
class UserTrait:
    status: str = STATUS_ENABLED
    login: str = ""
    profile: Dict[str, Any] = field(default_factory=dict)
    emails: List[UserEmail] = field(default_factory=list)


@dataclass
class RoleTrait:
    profile: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Resource:
    id: ResourceId
    display_name: str
    user_trait: Optional[UserTrait] = None
    role_trait: Optional[RoleTrait] = None


@dataclass
class Entitlement:
    id: str
    resource: Resource
    slug: str
    display_name: str = ""
    description: str = ""
    purpose: str = PURPOSE_ASSIGNMENT
    grantable_to: List[ResourceType] = field(default_factory=list)


@dataclass
class Grant:
    id: str
    entitlement: Entitlement
    principal: Resource


@dataclass
class ConnectorMetadata:
    display_name: str
    description: str = ""


def to_dict(obj: Any) -> Dict[str, Any]:
    """Plain-dict form of any contract object, for JSON output."""
    return asdict(obj)


# ─────────────────────────────────────────────────────────────────────────────
# Builders
# ─────────────────────────────────────────────────────────────────────────────
def entitlement_id(resource: Resource, slug: str) -> str:
    return f"{resource.id.resource_type}:{resource.id.resource}:{slug}"


def new_user_resource(
    display_name: str,
    resource_type: ResourceType,
    object_id: str,
    trait: UserTrait,
) -> Resource:
    return Resource(
        id=ResourceId(resource_type=resource_type.id, resource=object_id),
        display_name=display_name,
        user_trait=trait,
    )


def new_role_resource(
    display_name: str,
    resource_type: ResourceType,
    object_id: str,
    trait: Optional[RoleTrait] = None,
) -> Resource:
    return Resource(
        id=ResourceId(resource_type=resource_type.id, resource=object_id),
        display_name=display_name,
        role_trait=trait or RoleTrait(),
    )


def new_assignment_entitlement(
    resource: Resource,
    slug: str,
    *,
    grantable_to: List[ResourceType],
    display_name: str = "",
    description: str = "",
) -> Entitlement:
    return Entitlement(
        id=entitlement_id(resource, slug),
        resource=resource,
        slug=slug,
        display_name=display_name,
        description=description,
        purpose=PURPOSE_ASSIGNMENT,
        grantable_to=list(grantable_to),
    )


def new_grant(resource: Resource, slug: str, principal_id: ResourceId) -> Grant:
    """Grant of the ``slug`` entitlement on ``resource`` to ``principal_id``."""
    entitlement = Entitlement(
        id=entitlement_id(resource, slug),
        resource=resource,
        slug=slug,
    )
    principal = Resource(id=principal_id, display_name=principal_id.resource)
    return Grant(
        id=f"{entitlement.id}:{principal_id.resource_type}:{principal_id.resource}",
        entitlement=entitlement,
        principal=principal,
    )


# ─────────────────────────────────────────────────────────────────────────────
# Syncer contract
# ─────────────────────────────────────────────────────────────────────────────
class ResourceSyncer(abc.ABC):
    """One resource type's read (and optionally provisioning) surface.

    List-style methods return ``(items, next_page_token)``. An empty token
    means there are no further pages.
    """

    @abc.abstractmethod
    def resource_type(self) -> ResourceType:
        ...

    @abc.abstractmethod
    def list(
        self, parent_resource_id: Optional[ResourceId] = None, page_token: str = ""
    ) -> Tuple[List[Resource], str]:
        ...

    @abc.abstractmethod
    def entitlements(self, resource: Resource, page_token: str = "") -> Tuple[List[Entitlement], str]:
        ...

    @abc.abstractmethod
    def grants(self, resource: Resource, page_token: str = "") -> Tuple[List[Grant], str]:
        ...
