"""Command-line entry point: run a sync or provision roles against PingFederate."""
from __future__ import annotations
import argparse
import json
import logging
import os
import sys
from typing import Any, Dict

from baton_pingfederate import audit
from baton_pingfederate.config.settings import load_settings, parse_log_level
from baton_pingfederate.connector import (
    RESOURCE_TYPE_USER,
    ROLE_ASSIGNMENT_ENTITLEMENT,
    PingFederateConnector,
    RoleSyncer,
)
from baton_pingfederate.core.pingfederate import ConfigurationError, PingFederateError, PingFederateRole
from baton_pingfederate.core.resource_transformer import ResourceTransformer
from baton_pingfederate.core.types import Resource, ResourceId, new_grant, to_dict

logger = logging.getLogger("baton_pingfederate")


def run_sync(connector: PingFederateConnector) -> Dict[str, Any]:
    """Walk every syncer and collect resources, entitlements and grants."""
    result: Dict[str, Any] = {
        "resource_types": [],
        "resources": [],
        "entitlements": [],
        "grants": [],
    }
    for syncer in connector.resource_syncers():
        result["resource_types"].append(to_dict(syncer.resource_type()))
        resources, _ = syncer.list()
        for resource in resources:
            result["resources"].append(to_dict(resource))
            entitlements, _ = syncer.entitlements(resource)
            result["entitlements"].extend(to_dict(e) for e in entitlements)
            grants, _ = syncer.grants(resource)
            result["grants"].extend(to_dict(g) for g in grants)
    return result


def _role_syncer(connector: PingFederateConnector) -> RoleSyncer:
    return next(s for s in connector.resource_syncers() if isinstance(s, RoleSyncer))


def grant_role(connector: PingFederateConnector, username: str, role: str) -> None:
    syncer = _role_syncer(connector)
    role_resource = ResourceTransformer.role_to_resource(PingFederateRole.named(role))
    entitlements, _ = syncer.entitlements(role_resource)
    principal = Resource(
        id=ResourceId(resource_type=RESOURCE_TYPE_USER.id, resource=username),
        display_name=username,
    )
    syncer.grant(principal, entitlements[0])


def revoke_role(connector: PingFederateConnector, username: str, role: str) -> None:
    syncer = _role_syncer(connector)
    role_resource = ResourceTransformer.role_to_resource(PingFederateRole.named(role))
    grant = new_grant(
        role_resource,
        ROLE_ASSIGNMENT_ENTITLEMENT,
        ResourceId(resource_type=RESOURCE_TYPE_USER.id, resource=username),
    )
    syncer.revoke(grant)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="PingFederate connector")
    parser.add_argument("--instance-url", default=None,
                        help="PingFederate domain, ex: https://pingfederateserver.com "
                             "(default: PINGFEDERATE_INSTANCE_URL)")
    parser.add_argument("--username", default=None,
                        help="PingFederate account username (default: PINGFEDERATE_USERNAME)")
    parser.add_argument("--password", default=None,
                        help="PingFederate account password (default: PINGFEDERATE_PASSWORD)")
    parser.add_argument("--timeout", type=float, default=None,
                        help="Request timeout in seconds (default: PINGFEDERATE_REQUEST_TIMEOUT or 5)")
    parser.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL or INFO)")
    parser.add_argument("--operator", default="cli",
                        help="Operator identifier for audit logs (default: cli)")
    parser.add_argument("--no-audit", action="store_true",
                        help="Do not write audit events (default: AUDIT_ENABLED)")

    sub = parser.add_subparsers(dest="cmd")

    ss = sub.add_parser("sync")
    ss.add_argument("--output", "-o", help="Write JSON here instead of stdout")

    sg = sub.add_parser("grant")
    sg.add_argument("--user", required=True)
    sg.add_argument("--role", required=True)

    sr = sub.add_parser("revoke")
    sr.add_argument("--user", required=True)
    sr.add_argument("--role", required=True)

    sub.add_parser("verify-audit")
    return parser


def main(argv=None) -> None:
    """Command-line entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        log_level = parse_log_level(args.log_level if args.log_level is not None else os.environ.get("LOG_LEVEL"))
    except ConfigurationError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not args.cmd:
        parser.print_help()
        return

    if args.cmd == "verify-audit":
        total, valid = audit.verify_audit_log()
        print(f"Audit log: {valid}/{total} events with valid signatures")
        sys.exit(0 if total == valid else 1)

    try:
        config = load_settings(
            instance_url=args.instance_url,
            username=args.username,
            password=args.password,
            request_timeout=args.timeout,
            log_level=log_level,
            audit_enabled=False if args.no_audit else None,
        )
        connector = PingFederateConnector(config)
    except PingFederateError as e:
        parser.error(str(e))

    def record(event_type, username, details, success):
        if config.audit_enabled:
            audit.safe_log_event(
                event_type,
                username,
                operator=args.operator,
                instance_url=connector.instance_url,
                details=details,
                success=success,
            )

    try:
        if args.cmd == "sync":
            try:
                result = run_sync(connector)
            except PingFederateError as e:
                logger.error("[sync] Error: %s", e)
                record("sync", "*", {"error": str(e)}, False)
                sys.exit(1)
            record("sync", "*", {
                "resources": len(result["resources"]),
                "grants": len(result["grants"]),
            }, True)
            output = json.dumps(result, indent=2)
            if args.output:
                with open(args.output, "w", encoding="utf-8") as f:
                    f.write(output + "\n")
            else:
                print(output)
        elif args.cmd in ("grant", "revoke"):
            event_type = "role_grant" if args.cmd == "grant" else "role_revoke"
            action = grant_role if args.cmd == "grant" else revoke_role
            try:
                action(connector, args.user, args.role)
            except PingFederateError as e:
                logger.error("[%s] Error: %s", args.cmd, e)
                record(event_type, args.user, {"role": args.role, "error": str(e)}, False)
                sys.exit(1)
            record(event_type, args.user, {"role": args.role}, True)
    finally:
        connector.close()


if __name__ == "__main__":
    main()
