"""Role discovery and read-modify-write assignment against the fake admin API."""
import pytest

from baton_pingfederate.core.pingfederate import (
    AUDITOR_ROLE,
    PingFederateAPIError,
    RoleService,
    add_user_to_role,
    get_role_assignments,
    get_roles,
    remove_user_from_role,
)

from tests.conftest import FakeResponse


def usernames(accounts):
    return [a.username for a in accounts]


def test_get_roles_dedupes_in_first_seen_order_and_appends_auditor(client):
    roles = get_roles(client)
    assert [r.name for r in roles] == [
        "ADMINISTRATOR",
        "CRYPTO_ADMINISTRATOR",
        "USER_ADMINISTRATOR",
        "EXPRESSION_ADMINISTRATOR",
        AUDITOR_ROLE,
    ]
    assert all(r.id == r.name for r in roles)


def test_get_roles_collapses_duplicates_across_accounts(client, pingfed):
    pingfed.accounts["lee-chan"]["roles"] = ["ADMINISTRATOR", "USER_ADMINISTRATOR"]
    names = [r.name for r in get_roles(client)]
    assert names.count("ADMINISTRATOR") == 1


def test_get_roles_includes_auditor_once_without_auditors(client, pingfed):
    for account in pingfed.accounts.values():
        account["auditor"] = False
    names = [r.name for r in get_roles(client)]
    assert names.count(AUDITOR_ROLE) == 1
    assert names[-1] == AUDITOR_ROLE


def test_get_roles_with_no_accounts_still_lists_auditor(client, pingfed):
    pingfed.accounts.clear()
    assert [r.name for r in get_roles(client)] == [AUDITOR_ROLE]


def test_auditor_assignments_follow_flag_not_active(client):
    # kurt-bitner is an inactive auditor with an empty role list
    assert usernames(get_role_assignments(client, AUDITOR_ROLE)) == ["kurt-bitner"]


def test_auditor_assignments_empty_when_nobody_is_auditor(client, pingfed):
    pingfed.accounts["kurt-bitner"]["auditor"] = False
    assert get_role_assignments(client, AUDITOR_ROLE) == []


def test_structural_assignments_exclude_auditor_only_accounts(client):
    holders = usernames(get_role_assignments(client, "ADMINISTRATOR"))
    assert "kurt-bitner" not in holders
    assert holders == ["sam-ng"]


def test_role_match_is_exact(client):
    # USER_ADMINISTRATOR contains ADMINISTRATOR as a substring
    assert usernames(get_role_assignments(client, "ADMINISTRATOR")) == ["sam-ng"]
    assert usernames(get_role_assignments(client, "USER_ADMINISTRATOR")) == ["lee-chan"]
    assert get_role_assignments(client, "ADMIN") == []


def test_add_structural_role_appends_and_leaves_auditor_flag(client, pingfed):
    add_user_to_role(client, "lee-chan", "ADMINISTRATOR")
    stored = pingfed.accounts["lee-chan"]
    assert stored["roles"] == ["USER_ADMINISTRATOR", "EXPRESSION_ADMINISTRATOR", "ADMINISTRATOR"]
    assert stored["auditor"] is False


def test_add_auditor_sets_flag_and_leaves_roles(client, pingfed):
    add_user_to_role(client, "sam-ng", AUDITOR_ROLE)
    stored = pingfed.accounts["sam-ng"]
    assert stored["auditor"] is True
    assert stored["roles"] == ["ADMINISTRATOR", "CRYPTO_ADMINISTRATOR"]
    assert AUDITOR_ROLE not in stored["roles"]


def test_remove_auditor_clears_flag_only(client, pingfed):
    remove_user_from_role(client, "kurt-bitner", AUDITOR_ROLE)
    stored = pingfed.accounts["kurt-bitner"]
    assert stored["auditor"] is False
    assert stored["roles"] == []


def test_remove_structural_role_drops_every_occurrence(client, pingfed):
    pingfed.accounts["sam-ng"]["roles"] = ["ADMINISTRATOR", "CRYPTO_ADMINISTRATOR", "ADMINISTRATOR"]
    remove_user_from_role(client, "sam-ng", "ADMINISTRATOR")
    stored = pingfed.accounts["sam-ng"]
    assert stored["roles"] == ["CRYPTO_ADMINISTRATOR"]
    assert stored["auditor"] is False


def test_read_modify_write_puts_full_account(client, pingfed):
    add_user_to_role(client, "sam-ng", "USER_ADMINISTRATOR")
    gets = pingfed.calls_for("GET")
    puts = pingfed.calls_for("PUT")
    assert gets[0].url.endswith("/administrativeAccounts/sam-ng")
    assert len(puts) == 1
    body = puts[0].json
    assert puts[0].url.endswith("/administrativeAccounts/sam-ng")
    assert body["encryptedPassword"] == "OBF:JWE:sam"
    assert body["emailAddress"] == "sam.ng@example.com"
    assert body["department"] == "Platform"
    assert body["active"] is True


def test_granting_held_role_is_idempotent(client, pingfed):
    # sam-ng already holds ADMINISTRATOR: no duplicate, no write
    add_user_to_role(client, "sam-ng", "ADMINISTRATOR")
    add_user_to_role(client, "sam-ng", "ADMINISTRATOR")
    assert pingfed.accounts["sam-ng"]["roles"] == ["ADMINISTRATOR", "CRYPTO_ADMINISTRATOR"]
    assert pingfed.calls_for("PUT") == []


def test_adding_twice_equals_adding_once(client, pingfed):
    add_user_to_role(client, "kurt-bitner", "ADMINISTRATOR")
    once = list(pingfed.accounts["kurt-bitner"]["roles"])
    add_user_to_role(client, "kurt-bitner", "ADMINISTRATOR")
    assert pingfed.accounts["kurt-bitner"]["roles"] == once == ["ADMINISTRATOR"]


def test_revoking_unheld_role_skips_write(client, pingfed):
    remove_user_from_role(client, "lee-chan", AUDITOR_ROLE)
    remove_user_from_role(client, "lee-chan", "ADMINISTRATOR")
    assert pingfed.calls_for("PUT") == []


@pytest.mark.parametrize("role", ["ADMINISTRATOR", AUDITOR_ROLE])
def test_add_then_remove_restores_account(client, pingfed, role):
    before = dict(pingfed.accounts["lee-chan"])
    service = RoleService(client)
    service.add_user_to_role("lee-chan", role)
    service.remove_user_from_role("lee-chan", role)
    after = pingfed.accounts["lee-chan"]
    assert after["roles"] == before["roles"]
    assert after["auditor"] == before["auditor"]


@pytest.mark.parametrize("role", ["ADMINISTRATOR", AUDITOR_ROLE])
def test_each_call_changes_exactly_one_representation(client, pingfed, role):
    before = dict(pingfed.accounts["lee-chan"])
    add_user_to_role(client, "lee-chan", role)
    after = pingfed.accounts["lee-chan"]
    roles_changed = after["roles"] != before["roles"]
    flag_changed = after["auditor"] != before["auditor"]
    assert roles_changed != flag_changed


def test_failed_put_propagates(client, pingfed):
    service = RoleService(client)
    # GET succeeds, PUT is rejected
    pingfed.fail_next(FakeResponse(pingfed.accounts["lee-chan"]))
    pingfed.fail_next(FakeResponse(text='{"message":"forbidden"}', status_code=403))
    with pytest.raises(PingFederateAPIError) as exc_info:
        service.add_user_to_role("lee-chan", "ADMINISTRATOR")
    assert exc_info.value.status_code == 403


def test_unknown_user_raises_before_write(client, pingfed):
    with pytest.raises(PingFederateAPIError):
        add_user_to_role(client, "ghost", "ADMINISTRATOR")
    assert pingfed.calls_for("PUT") == []


def test_user_ids_are_url_quoted(client, pingfed):
    pingfed.accounts["first last"] = {"username": "first last", "roles": [], "auditor": False}
    add_user_to_role(client, "first last", "ADMINISTRATOR")
    assert pingfed.calls_for("PUT")[0].url.endswith("/administrativeAccounts/first%20last")
