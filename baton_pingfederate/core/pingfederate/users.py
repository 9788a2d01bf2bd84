"""PingFederate administrative account operations."""
from __future__ import annotations
from typing import List
from urllib.parse import quote

from .client import PingFederateClient
from .exceptions import PingFederateDecodeError
from .models import PingFederateAccount

ACCOUNTS_PATH = "/administrativeAccounts"


def account_path(user_id: str) -> str:
    return f"{ACCOUNTS_PATH}/{quote(user_id, safe='')}"


class AccountService:
    """Service for reading and writing PingFederate admin accounts."""
    
    def __init__(self, client: PingFederateClient):
        """Initialize account service.
        
        Args:
            client: PingFederate client
        """
        self.client = client
    
    def get_users(self) -> List[PingFederateAccount]:
        """Return every administrative account.
        
        The admin API returns the whole collection in one response, so there
        is no paging.
        """
        payload = self.client.get(ACCOUNTS_PATH)
        if not isinstance(payload, dict):
            raise PingFederateDecodeError(ACCOUNTS_PATH, str(payload))
        return [PingFederateAccount.from_api(item) for item in payload.get("items") or []]
    
    def get_user(self, user_id: str) -> PingFederateAccount:
        """Fetch a single account by username."""
        payload = self.client.get(account_path(user_id))
        if not isinstance(payload, dict):
            raise PingFederateDecodeError(account_path(user_id), str(payload))
        return PingFederateAccount.from_api(payload)
    
    def update_user(self, user_id: str, account: PingFederateAccount) -> None:
        """Replace the stored account with ``account`` (full PUT)."""
        self.client.put(account_path(user_id), json=account.to_api())


# ─────────────────────────────────────────────────────────────────────────────
# Standalone functions
# ─────────────────────────────────────────────────────────────────────────────
def get_users(client: PingFederateClient) -> List[PingFederateAccount]:
    """Return every administrative account."""
    return AccountService(client).get_users()


def get_user(client: PingFederateClient, user_id: str) -> PingFederateAccount:
    """Fetch a single account by username."""
    return AccountService(client).get_user(user_id)
