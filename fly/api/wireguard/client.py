"""
WireGuard peer and delegated token operations.
"""

import logging

from pydantic import validate_call

from ..errors import NotFoundError
from ..graphql.client import GraphQLClient
from ..models import NonEmptyStr, Region
from .models import (
    AddWireGuardPeerInput,
    AddWireGuardPeerMutation,
    CreatedWireGuardPeer,
    CreateDelegatedWireGuardTokenMutation,
    DelegatedWireGuardToken,
    DelegatedWireGuardTokenHandle,
    DelegatedWireGuardTokensQuery,
    DeleteDelegatedWireGuardTokenInput,
    DeleteDelegatedWireGuardTokenMutation,
    NearestRegionQuery,
    RemoveWireGuardPeerMutation,
    ValidateWireGuardPeersMutation,
    WireGuardPeer,
    WireGuardPeerQuery,
    WireGuardPeersQuery,
    WireGuardPeerStatus,
    WireGuardPeerStatusQuery,
)


logger = logging.getLogger(__name__)


class WireGuardClient:
    """Operations on an organization's WireGuard peers and delegated tokens."""

    def __init__(self, graphql: GraphQLClient):
        self.graphql = graphql

    @validate_call
    async def get_wireguard_peer_status(
        self, organization_slug: NonEmptyStr, name: NonEmptyStr
    ) -> WireGuardPeerStatus | None:
        """
        Get the gateway status of a peer.

        Kept apart from get_wireguard_peer because status is costly to compute
        server-side; only ask for it when it's actually needed.

        Args:
            organization_slug: Slug of the organization
            name: Name of the peer

        Returns:
            Gateway status, or None if the gateway has no status for the peer
        """
        variables = {"slug": organization_slug, "name": name}
        result = await self.graphql.execute(
            self.Q_PEER_STATUS, variables, WireGuardPeerStatusQuery
        )
        if result.organization is None or result.organization.wireguard_peer is None:
            raise NotFoundError(f"WireGuard peer {name} not found in {organization_slug}")
        return result.organization.wireguard_peer.gateway_status

    Q_PEER_STATUS = """
        query ($slug: String!, $name: String!) {
            organization(slug: $slug) {
                wireGuardPeer(name: $name) {
                    gatewayStatus
                }
            }
        }
    """

    @validate_call
    async def get_wireguard_peer(
        self, organization_slug: NonEmptyStr, name: NonEmptyStr
    ) -> WireGuardPeer:
        """Get a peer by name."""
        variables = {"slug": organization_slug, "name": name}
        result = await self.graphql.execute(self.Q_PEER, variables, WireGuardPeerQuery)
        if result.organization is None or result.organization.wireguard_peer is None:
            raise NotFoundError(f"WireGuard peer {name} not found in {organization_slug}")
        return result.organization.wireguard_peer

    Q_PEER = """
        query ($slug: String!, $name: String!) {
            organization(slug: $slug) {
                wireGuardPeer(name: $name) {
                    id
                    name
                    pubkey
                    region
                    peerip
                }
            }
        }
    """

    @validate_call
    async def get_wireguard_peers(self, organization_slug: NonEmptyStr) -> list[WireGuardPeer]:
        """List an organization's peers in server order."""
        result = await self.graphql.execute(
            self.Q_PEERS, {"slug": organization_slug}, WireGuardPeersQuery
        )
        if result.organization is None:
            raise NotFoundError(f"Organization {organization_slug} not found")
        return result.organization.wireguard_peers

    Q_PEERS = """
        query ($slug: String!) {
            organization(slug: $slug) {
                wireGuardPeers {
                    nodes {
                        id
                        name
                        pubkey
                        region
                        peerip
                    }
                }
            }
        }
    """

    @validate_call
    async def create_wireguard_peer(
        self,
        organization_id: NonEmptyStr,
        region: str,
        name: NonEmptyStr,
        pubkey: NonEmptyStr,
        nats: bool | None = None,
    ) -> CreatedWireGuardPeer:
        """
        Add a peer to an organization's network.

        Args:
            organization_id: ID of the organization
            region: Gateway region code; empty lets the platform choose
            name: Name of the new peer
            pubkey: Public key of the peer
            nats: Request delivery via NATS; defaults to the wireguard_via_nats setting

        Returns:
            Addresses and gateway key for configuring the tunnel
        """
        if nats is None:
            nats = self.graphql.settings.wireguard_via_nats
        if nats:
            logger.info("Creating WireGuard peer %s via NATS", name)

        peer_input = AddWireGuardPeerInput(
            organization_id=organization_id,
            name=name,
            pubkey=pubkey,
            region=region or None,
            nats=nats,
        )
        result = await self.graphql.execute(
            self.Q_ADD_PEER, {"input": peer_input.for_graphql()}, AddWireGuardPeerMutation
        )
        return result.add_wireguard_peer

    Q_ADD_PEER = """
        mutation ($input: AddWireGuardPeerInput!) {
            addWireGuardPeer(input: $input) {
                peerip
                endpointip
                pubkey
            }
        }
    """

    @validate_call
    async def remove_wireguard_peer(self, organization_id: NonEmptyStr, name: NonEmptyStr) -> None:
        """Remove a peer from an organization's network."""
        variables = {"input": {"organizationId": organization_id, "name": name}}
        await self.graphql.execute(self.Q_REMOVE_PEER, variables, RemoveWireGuardPeerMutation)

    Q_REMOVE_PEER = """
        mutation ($input: RemoveWireGuardPeerInput!) {
            removeWireGuardPeer(input: $input) {
                organization {
                    id
                }
            }
        }
    """

    @validate_call
    async def create_delegated_wireguard_token(
        self, organization_id: NonEmptyStr, name: NonEmptyStr
    ) -> DelegatedWireGuardToken:
        """Create a token that can manage peers on the organization's behalf."""
        variables = {"input": {"organizationId": organization_id, "name": name}}
        result = await self.graphql.execute(
            self.Q_CREATE_TOKEN, variables, CreateDelegatedWireGuardTokenMutation
        )
        return result.create_delegated_wireguard_token

    Q_CREATE_TOKEN = """
        mutation ($input: CreateDelegatedWireGuardTokenInput!) {
            createDelegatedWireGuardToken(input: $input) {
                token
            }
        }
    """

    @validate_call
    async def delete_delegated_wireguard_token(
        self,
        organization_id: NonEmptyStr,
        name: str | None = None,
        token: str | None = None,
    ) -> None:
        """
        Delete a delegated token, identified by its name or by the token itself.

        Args:
            organization_id: ID of the organization
            name: Name of the token; takes precedence over token
            token: The token value
        """
        if name:
            token_input = DeleteDelegatedWireGuardTokenInput(
                organization_id=organization_id, name=name
            )
        elif token:
            token_input = DeleteDelegatedWireGuardTokenInput(
                organization_id=organization_id, token=token
            )
        else:
            raise ValueError("Either a token name or a token value is required")

        logger.debug("Deleting delegated WireGuard token: %s", token_input.name or "(by value)")
        await self.graphql.execute(
            self.Q_DELETE_TOKEN,
            {"input": token_input.for_graphql()},
            DeleteDelegatedWireGuardTokenMutation,
        )

    Q_DELETE_TOKEN = """
        mutation ($input: DeleteDelegatedWireGuardTokenInput!) {
            deleteDelegatedWireGuardToken(input: $input) {
                token
            }
        }
    """

    @validate_call
    async def get_delegated_wireguard_tokens(
        self, organization_slug: NonEmptyStr
    ) -> list[DelegatedWireGuardTokenHandle]:
        """List the names of an organization's delegated tokens."""
        result = await self.graphql.execute(
            self.Q_TOKENS, {"slug": organization_slug}, DelegatedWireGuardTokensQuery
        )
        if result.organization is None:
            raise NotFoundError(f"Organization {organization_slug} not found")
        return result.organization.delegated_wireguard_tokens

    Q_TOKENS = """
        query ($slug: String!) {
            organization(slug: $slug) {
                delegatedWireGuardTokens {
                    nodes {
                        name
                    }
                }
            }
        }
    """

    async def closest_wireguard_gateway_region(self) -> Region | None:
        """Return the region with a WireGuard gateway closest to the caller, if any."""
        result = await self.graphql.execute(self.Q_NEAREST_GATEWAY, {}, NearestRegionQuery)
        return result.nearest_region

    Q_NEAREST_GATEWAY = """
        query {
            nearestRegion(wireguardGateway: true) {
                code
                name
                gatewayAvailable
            }
        }
    """

    @validate_call
    async def validate_wireguard_peers(self, peer_ips: list[str]) -> list[str]:
        """
        Check peer IPs against the platform's records.

        Args:
            peer_ips: Private IPs of locally configured peers

        Returns:
            The IPs the platform does not recognise
        """
        variables = {"input": {"peerIps": peer_ips}}
        result = await self.graphql.execute(
            self.Q_VALIDATE_PEERS, variables, ValidateWireGuardPeersMutation
        )
        return result.validate_wireguard_peers.invalid_peer_ips

    Q_VALIDATE_PEERS = """
        mutation ($input: ValidateWireGuardPeersInput!) {
            validateWireGuardPeers(input: $input) {
                invalidPeerIps
            }
        }
    """
