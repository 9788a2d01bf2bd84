"""Resource types synced from PingFederate."""
from .types import ResourceType, TRAIT_ROLE, TRAIT_USER

RESOURCE_TYPE_ROLE = ResourceType(
    id="role",
    display_name="Role",
    traits=(TRAIT_ROLE,),
)

# Administrative accounts from the admin console.
RESOURCE_TYPE_USER = ResourceType(
    id="user",
    display_name="User",
    traits=(TRAIT_USER,),
)
