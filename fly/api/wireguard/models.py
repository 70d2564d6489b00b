# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025 Fly API Client Authors
#

from typing import Any

from pydantic import Field

from ..models import FlyModel, GraphQLInput, MaybeList, NodeList, Region


class WireGuardPeer(FlyModel):
    """A WireGuard peer attached to an organization network."""

    id: str | None = Field(None, description="Peer ID")
    name: str = Field(..., description="Peer name, unique within the organization")
    pubkey: str | None = Field(None, description="Peer public key")
    region: str | None = Field(None, description="Gateway region code")
    peerip: str | None = Field(None, description="Private IP assigned to the peer")


class WireGuardPeerStatus(FlyModel):
    """Gateway-side status of a peer."""

    endpoint: str | None = None
    last_handshake: str | None = None
    since_handshake: str | None = None
    rx: int | None = None
    tx: int | None = None
    added: str | None = None
    since_added: str | None = None
    live: bool | None = None
    wg_error: str | None = None


class CreatedWireGuardPeer(FlyModel):
    """Result of adding a peer; what a client needs to configure its tunnel."""

    peerip: str
    endpointip: str
    pubkey: str


class DelegatedWireGuardToken(FlyModel):
    token: str


class DelegatedWireGuardTokenHandle(FlyModel):
    name: str


class AddWireGuardPeerInput(GraphQLInput):
    organization_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    pubkey: str = Field(..., min_length=1)
    region: str | None = None
    nats: bool = False


class DeleteDelegatedWireGuardTokenInput(GraphQLInput):
    organization_id: str = Field(..., min_length=1)
    name: str | None = None
    token: str | None = None


# Operation results


class _PeerStatus(FlyModel):
    gateway_status: WireGuardPeerStatus | None = None


class _OrganizationPeerStatus(FlyModel):
    wireguard_peer: _PeerStatus | None = Field(None, alias="wireGuardPeer")


class WireGuardPeerStatusQuery(FlyModel):
    organization: _OrganizationPeerStatus | None = None


class _OrganizationPeer(FlyModel):
    wireguard_peer: WireGuardPeer | None = Field(None, alias="wireGuardPeer")


class WireGuardPeerQuery(FlyModel):
    organization: _OrganizationPeer | None = None


class _OrganizationPeers(FlyModel):
    wireguard_peers: NodeList[WireGuardPeer] = Field(
        default_factory=list, alias="wireGuardPeers"
    )


class WireGuardPeersQuery(FlyModel):
    organization: _OrganizationPeers | None = None


class AddWireGuardPeerMutation(FlyModel):
    add_wireguard_peer: CreatedWireGuardPeer = Field(..., alias="addWireGuardPeer")


class RemoveWireGuardPeerMutation(FlyModel):
    remove_wireguard_peer: dict[str, Any] | None = Field(None, alias="removeWireGuardPeer")


class CreateDelegatedWireGuardTokenMutation(FlyModel):
    create_delegated_wireguard_token: DelegatedWireGuardToken = Field(
        ..., alias="createDelegatedWireGuardToken"
    )


class DeleteDelegatedWireGuardTokenMutation(FlyModel):
    delete_delegated_wireguard_token: dict[str, Any] | None = Field(
        None, alias="deleteDelegatedWireGuardToken"
    )


class _OrganizationTokens(FlyModel):
    delegated_wireguard_tokens: NodeList[DelegatedWireGuardTokenHandle] = Field(
        default_factory=list, alias="delegatedWireGuardTokens"
    )


class DelegatedWireGuardTokensQuery(FlyModel):
    organization: _OrganizationTokens | None = None


class NearestRegionQuery(FlyModel):
    nearest_region: Region | None = None


class _ValidatePayload(FlyModel):
    invalid_peer_ips: MaybeList[str] = Field(default_factory=list, alias="invalidPeerIps")


class ValidateWireGuardPeersMutation(FlyModel):
    validate_wireguard_peers: _ValidatePayload = Field(..., alias="validateWireGuardPeers")
