# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025 Fly API Client Authors
#

from datetime import datetime

from pydantic import Field

from ..models import FlyModel, GraphQLInput, MaybeList, NodeList, Organization


class DNSZone(FlyModel):
    """A DNS zone hosted by the platform."""

    id: str = Field(..., description="Zone ID")
    domain: str = Field(..., description="Zone apex domain")
    created_at: datetime | None = Field(None, description="When the zone was created")
    organization: Organization | None = Field(None, description="Owning organization")


class DNSRecord(FlyModel):
    """A record within a DNS zone."""

    id: str
    fqdn: str | None = None
    name: str | None = None
    type: str | None = None
    ttl: int | None = None
    values: MaybeList[str] = Field(default_factory=list)
    is_apex: bool | None = None
    is_wildcard: bool | None = None
    is_system: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ImportDnsRecordTypeResult(FlyModel):
    """Per record type counts from a zonefile import."""

    type: str
    created: int = 0
    deleted: int = 0
    updated: int = 0
    skipped: int = 0


class CreateDnsZoneInput(GraphQLInput):
    organization_id: str = Field(..., min_length=1)
    domain: str = Field(..., min_length=1)


class ImportDnsZoneInput(GraphQLInput):
    dns_zone_id: str = Field(..., min_length=1)
    zonefile: str


# Operation results


class _OrganizationZones(FlyModel):
    dns_zones: NodeList[DNSZone] = Field(default_factory=list)


class DNSZonesQuery(FlyModel):
    organization: _OrganizationZones | None = None


class _OrganizationZone(FlyModel):
    dns_zone: DNSZone | None = None


class FindDNSZoneQuery(FlyModel):
    organization: _OrganizationZone | None = None


class _ZonePayload(FlyModel):
    zone: DNSZone


class CreateDnsZoneMutation(FlyModel):
    create_dns_zone: _ZonePayload


class _DeletePayload(FlyModel):
    client_mutation_id: str | None = None


class DeleteDnsZoneMutation(FlyModel):
    delete_dns_zone: _DeletePayload | None = None


class _ZoneRecords(FlyModel):
    records: NodeList[DNSRecord] = Field(default_factory=list)


class DNSRecordsQuery(FlyModel):
    dns_zone: _ZoneRecords | None = None


class _ExportPayload(FlyModel):
    contents: str


class ExportDnsZoneMutation(FlyModel):
    export_dns_zone: _ExportPayload


class _ImportPayload(FlyModel):
    results: MaybeList[ImportDnsRecordTypeResult] = Field(default_factory=list)


class ImportDnsZoneMutation(FlyModel):
    import_dns_zone: _ImportPayload
