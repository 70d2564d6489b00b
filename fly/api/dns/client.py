"""
DNS zone and record operations.
"""

from pydantic import validate_call

from ..errors import NotFoundError
from ..graphql.client import GraphQLClient
from ..models import NonEmptyStr
from .models import (
    CreateDnsZoneInput,
    CreateDnsZoneMutation,
    DeleteDnsZoneMutation,
    DNSRecord,
    DNSRecordsQuery,
    DNSZone,
    DNSZonesQuery,
    ExportDnsZoneMutation,
    FindDNSZoneQuery,
    ImportDnsRecordTypeResult,
    ImportDnsZoneInput,
    ImportDnsZoneMutation,
)


class DNSClient:
    """Operations on DNS zones and records."""

    def __init__(self, graphql: GraphQLClient):
        self.graphql = graphql

    @validate_call
    async def get_dns_zones(self, organization_slug: NonEmptyStr) -> list[DNSZone]:
        """
        List the DNS zones of an organization.

        Args:
            organization_slug: Slug of the organization

        Returns:
            Zones in server order
        """
        result = await self.graphql.execute(
            self.Q_DNS_ZONES, {"slug": organization_slug}, DNSZonesQuery
        )
        if result.organization is None:
            raise NotFoundError(f"Organization {organization_slug} not found")
        return result.organization.dns_zones

    Q_DNS_ZONES = """
        query ($slug: String!) {
            organization(slug: $slug) {
                dnsZones {
                    nodes {
                        id
                        domain
                        createdAt
                    }
                }
            }
        }
    """

    @validate_call
    async def find_dns_zone(self, organization_slug: NonEmptyStr, domain: NonEmptyStr) -> DNSZone:
        """
        Find an organization's zone by domain.

        Args:
            organization_slug: Slug of the organization
            domain: Apex domain of the zone

        Returns:
            The zone, including its organization
        """
        variables = {"slug": organization_slug, "domain": domain}
        result = await self.graphql.execute(self.Q_FIND_DNS_ZONE, variables, FindDNSZoneQuery)
        if result.organization is None or result.organization.dns_zone is None:
            raise NotFoundError(f"DNS zone {domain} not found in {organization_slug}")
        return result.organization.dns_zone

    Q_FIND_DNS_ZONE = """
        query ($slug: String!, $domain: String!) {
            organization(slug: $slug) {
                dnsZone(domain: $domain) {
                    id
                    domain
                    createdAt
                    organization {
                        id
                        slug
                        name
                    }
                }
            }
        }
    """

    @validate_call
    async def create_dns_zone(self, organization_id: NonEmptyStr, domain: NonEmptyStr) -> DNSZone:
        """Create a DNS zone for a domain in an organization."""
        zone_input = CreateDnsZoneInput(organization_id=organization_id, domain=domain)
        result = await self.graphql.execute(
            self.Q_CREATE_DNS_ZONE, {"input": zone_input.for_graphql()}, CreateDnsZoneMutation
        )
        return result.create_dns_zone.zone

    Q_CREATE_DNS_ZONE = """
        mutation ($input: CreateDnsZoneInput!) {
            createDnsZone(input: $input) {
                zone {
                    id
                    domain
                    createdAt
                }
            }
        }
    """

    @validate_call
    async def delete_dns_zone(self, zone_id: NonEmptyStr) -> None:
        """Delete a DNS zone and all its records."""
        await self.graphql.execute(
            self.Q_DELETE_DNS_ZONE, {"input": {"dnsZoneId": zone_id}}, DeleteDnsZoneMutation
        )

    Q_DELETE_DNS_ZONE = """
        mutation ($input: DeleteDnsZoneInput!) {
            deleteDnsZone(input: $input) {
                clientMutationId
            }
        }
    """

    @validate_call
    async def get_dns_records(self, zone_id: NonEmptyStr) -> list[DNSRecord]:
        """
        List the records of a zone.

        Args:
            zone_id: ID of the zone

        Returns:
            Records in server order
        """
        result = await self.graphql.execute(
            self.Q_DNS_RECORDS, {"zoneId": zone_id}, DNSRecordsQuery
        )
        if result.dns_zone is None:
            raise NotFoundError(f"DNS zone {zone_id} not found")
        return result.dns_zone.records

    Q_DNS_RECORDS = """
        query ($zoneId: ID!) {
            dnsZone: node(id: $zoneId) {
                ... on DnsZone {
                    records {
                        nodes {
                            id
                            fqdn
                            name
                            type
                            ttl
                            values
                            isApex
                            isWildcard
                            isSystem
                            createdAt
                            updatedAt
                        }
                    }
                }
            }
        }
    """

    @validate_call
    async def export_dns_records(self, zone_id: NonEmptyStr) -> str:
        """Export a zone's records in zonefile format."""
        result = await self.graphql.execute(
            self.Q_EXPORT_DNS_ZONE, {"input": {"dnsZoneId": zone_id}}, ExportDnsZoneMutation
        )
        return result.export_dns_zone.contents

    Q_EXPORT_DNS_ZONE = """
        mutation ($input: ExportDnsZoneInput!) {
            exportDnsZone(input: $input) {
                contents
            }
        }
    """

    @validate_call
    async def import_dns_records(
        self, zone_id: NonEmptyStr, zonefile: str
    ) -> list[ImportDnsRecordTypeResult]:
        """
        Replace a zone's records with the contents of a zonefile.

        Args:
            zone_id: ID of the zone
            zonefile: Zonefile contents

        Returns:
            Counts of created, updated, deleted and skipped records per type
        """
        import_input = ImportDnsZoneInput(dns_zone_id=zone_id, zonefile=zonefile)
        result = await self.graphql.execute(
            self.Q_IMPORT_DNS_ZONE, {"input": import_input.for_graphql()}, ImportDnsZoneMutation
        )
        return result.import_dns_zone.results

    Q_IMPORT_DNS_ZONE = """
        mutation ($input: ImportDnsZoneInput!) {
            importDnsZone(input: $input) {
                results {
                    created
                    deleted
                    updated
                    skipped
                    type
                }
            }
        }
    """
