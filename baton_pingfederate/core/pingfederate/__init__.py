"""PingFederate Admin API client library.

Architecture:
- client.py: HTTP client with basic auth and the XSRF header
- users.py: administrative account reads and writes
- roles.py: role discovery and assignment (role list + auditor flag)
- models.py: account/role representations
- exceptions.py: Typed exceptions for error handling

Usage:
    from baton_pingfederate.core.pingfederate import PingFederateClient, RoleService

    client = PingFederateClient("https://pingfed:9999", "admin", "secret")
    RoleService(client).add_user_to_role("sam-ng", "ADMINISTRATOR")
"""
from .client import (
    PingFederateClient,
    API_PATH,
    REQUEST_TIMEOUT,
)
from .exceptions import (
    PingFederateError,
    ConfigurationError,
    PingFederateTransportError,
    PingFederateAPIError,
    PingFederateDecodeError,
    InvalidPrincipalError,
)
from .models import (
    AUDITOR_ROLE,
    PingFederateAccount,
    PingFederateRole,
    StructuralRole,
    AuditorRole,
    RoleKind,
    is_auditor,
    resolve_role,
)
from .users import (
    AccountService,
    get_users,
    get_user,
)
from .roles import (
    RoleService,
    get_roles,
    get_role_assignments,
    add_user_to_role,
    remove_user_from_role,
)

__all__ = [
    # Client
    "PingFederateClient",
    "API_PATH",
    "REQUEST_TIMEOUT",

    # Exceptions
    "PingFederateError",
    "ConfigurationError",
    "PingFederateTransportError",
    "PingFederateAPIError",
    "PingFederateDecodeError",
    "InvalidPrincipalError",

    # Models
    "AUDITOR_ROLE",
    "PingFederateAccount",
    "PingFederateRole",
    "StructuralRole",
    "AuditorRole",
    "RoleKind",
    "is_auditor",
    "resolve_role",

    # Services
    "AccountService",
    "RoleService",

    # Standalone functions
    "get_users",
    "get_user",
    "get_roles",
    "get_role_assignments",
    "add_user_to_role",
    "remove_user_from_role",
]
