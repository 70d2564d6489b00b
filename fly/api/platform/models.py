# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025 Fly API Client Authors
#

from pydantic import Field

from ..models import FlyModel, MaybeList, Region


class VMSize(FlyModel):
    """A machine size and its price."""

    name: str
    cpu_cores: float | None = None
    memory_gb: float | None = None
    memory_mb: int | None = None
    price_month: float | None = None
    price_second: float | None = None


class RegionList(FlyModel):
    """Platform regions, along with the region that served the request."""

    regions: list[Region] = Field(..., description="All regions, in server order")
    request_region: Region | None = Field(
        None, description="Region the request was routed through, if known"
    )


# Operation results


class _Platform(FlyModel):
    request_region: str | None = None
    regions: MaybeList[Region] = Field(default_factory=list)
    vm_sizes: MaybeList[VMSize] = Field(default_factory=list, alias="vmSizes")


class PlatformQuery(FlyModel):
    platform: _Platform
