from ..graphql.client import GraphQLClient
from ..models import Region
from .models import PlatformQuery, RegionList, VMSize


class PlatformClient:
    """Platform-wide metadata: regions and machine sizes."""

    def __init__(self, graphql: GraphQLClient):
        self.graphql = graphql

    async def platform_regions(self) -> RegionList:
        """
        List regions, and identify the one the request was routed through.

        Returns:
            Regions with the request region resolved to one of them, or None
        """
        result = await self.graphql.execute(self.Q_REGIONS, {}, PlatformQuery)
        platform = result.platform

        request_region = None
        if platform.request_region:
            request_region = next(
                (region for region in platform.regions if region.code == platform.request_region),
                None,
            )
        return RegionList(regions=platform.regions, request_region=request_region)

    Q_REGIONS = """
        query {
            platform {
                requestRegion
                regions {
                    name
                    code
                    gatewayAvailable
                }
            }
        }
    """

    async def platform_regions_all(self) -> list[Region]:
        """List regions with their coordinates."""
        result = await self.graphql.execute(self.Q_REGIONS_ALL, {}, PlatformQuery)
        return result.platform.regions

    Q_REGIONS_ALL = """
        query {
            platform {
                regions {
                    name
                    code
                    latitude
                    longitude
                    gatewayAvailable
                }
            }
        }
    """

    async def platform_vm_sizes(self) -> list[VMSize]:
        """List available machine sizes."""
        result = await self.graphql.execute(self.Q_VM_SIZES, {}, PlatformQuery)
        return result.platform.vm_sizes

    Q_VM_SIZES = """
        query {
            platform {
                vmSizes {
                    name
                    cpuCores
                    memoryGb
                    memoryMb
                    priceMonth
                    priceSecond
                }
            }
        }
    """
