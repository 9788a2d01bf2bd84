"""Sync host integration: the user and role syncers and the connector facade."""
from baton_pingfederate.core.resource_types import RESOURCE_TYPE_ROLE, RESOURCE_TYPE_USER

from .connector import PingFederateConnector, fall_back_to_https, new_connector
from .roles import ROLE_ASSIGNMENT_ENTITLEMENT, RoleSyncer
from .users import UserSyncer

__all__ = [
    "PingFederateConnector",
    "fall_back_to_https",
    "new_connector",
    "RESOURCE_TYPE_ROLE",
    "RESOURCE_TYPE_USER",
    "ROLE_ASSIGNMENT_ENTITLEMENT",
    "RoleSyncer",
    "UserSyncer",
]
