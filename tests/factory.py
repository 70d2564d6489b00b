# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025 Fly API Client Authors
#

"""
Test data factories for creating mock API payloads in the platform's wire format.
"""

from typing import Any


def user(
    id: str = "user-1",
    name: str = "Test User",
    email: str = "test@example.com",
) -> dict[str, Any]:
    return {"id": id, "name": name, "email": email}


def organization(
    id: str = "org-1",
    slug: str = "personal",
    name: str = "Test Org",
    type: str = "PERSONAL",
) -> dict[str, Any]:
    return {"id": id, "slug": slug, "name": name, "type": type}


def app(
    id: str = "app-1",
    name: str = "test-app",
    org_slug: str = "personal",
    **extra: Any,
) -> dict[str, Any]:
    return {"id": id, "name": name, "organization": {"slug": org_slug}, **extra}


def release(
    id: str = "release-1",
    version: int = 3,
    reason: str = "deploy",
    description: str = "Deploy image",
) -> dict[str, Any]:
    return {
        "id": id,
        "version": version,
        "reason": reason,
        "description": description,
        "user": user(),
        "createdAt": "2024-01-01T00:00:00Z",
    }


def region(
    code: str = "ord",
    name: str = "Chicago, Illinois (US)",
    gateway_available: bool = True,
    **extra: Any,
) -> dict[str, Any]:
    return {"code": code, "name": name, "gatewayAvailable": gateway_available, **extra}


def dns_zone(
    id: str = "zone-1",
    domain: str = "example.com",
    **extra: Any,
) -> dict[str, Any]:
    return {"id": id, "domain": domain, "createdAt": "2024-01-01T00:00:00Z", **extra}


def dns_record(
    id: str = "record-1",
    name: str = "www",
    type: str = "A",
    values: list[str] | None = None,
) -> dict[str, Any]:
    return {
        "id": id,
        "fqdn": f"{name}.example.com",
        "name": name,
        "type": type,
        "ttl": 300,
        "values": values if values is not None else ["192.0.2.1"],
        "isApex": False,
        "isWildcard": False,
        "isSystem": False,
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-01-02T00:00:00Z",
    }


def wireguard_peer(
    name: str = "laptop",
    region: str = "ord",
    peerip: str = "fdaa:0:1:a7b:1::2",
) -> dict[str, Any]:
    return {
        "id": f"peer-{name}",
        "name": name,
        "pubkey": "cHVia2V5",
        "region": region,
        "peerip": peerip,
    }


def build(
    id: str = "build-1",
    status: str = "running",
    in_progress: bool = True,
    **extra: Any,
) -> dict[str, Any]:
    return {
        "id": id,
        "inProgress": in_progress,
        "status": status,
        "user": user(),
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-01-01T00:01:00Z",
        **extra,
    }


def nodes(*items: dict[str, Any]) -> dict[str, Any]:
    """Wrap items in a connection, as the API delivers lists."""
    return {"nodes": list(items)}
