"""
VPC Component Resource for Network Infrastructure.

Steps & Architecture:
1. VPC (10.0.0.0/16 by default): Defines the isolated network container.
2. Internet Gateway (IGW): The only door to the internet, used by the public tier.
3. Subnets, one per tier per availability zone (2 AZs by default, /24 each):
   - Public: Web server. Instances get a public IP on launch.
   - Isolated: RDS MySQL. No route in or out of the VPC.
4. Route Tables:
   - Public RT: Contains 0.0.0.0/0 -> IGW.
   - Isolated RT: No routes at all. Relies on the implicit "local" route for traffic inside the VPC.
5. No NAT Gateway: Nothing in the isolated tier can reach the internet, even outbound.

Subnet CIDRs are allocated in order from the start of the VPC range: public subnets first, then isolated.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from tech_health_iac.configs.base import EnvironmentConfig
from tech_health_iac.utils.network import subnet_cidrs
from tech_health_iac.utils.tags import create_tags


@dataclass
class VpcOutputs:
    """Output values from VPC component."""
    vpc_id: pulumi.Output[str]
    public_subnet_ids: list[pulumi.Output[str]]
    isolated_subnet_ids: list[pulumi.Output[str]]
    public_route_table_id: pulumi.Output[str]
    isolated_route_table_id: pulumi.Output[str]
    availability_zones: list[str]


class VpcComponent(pulumi.ComponentResource):
    """
    VPC component with a public and an isolated subnet tier.

    Spans the first `max_azs` available zones. No NAT gateway is created.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        config: EnvironmentConfig,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:Vpc", name, None, opts)
        self.environment = environment

        child_opts = pulumi.ResourceOptions(parent=self)

        self.availability_zones = self._select_availability_zones(config.max_azs)

        cidrs = subnet_cidrs(config.vpc_cidr, config.subnet_cidr_mask, config.subnet_count)
        public_cidrs = cidrs[:config.max_azs]
        isolated_cidrs = cidrs[config.max_azs:]

        # Create VPC
        self.vpc = aws.ec2.Vpc(
            f"{name}-vpc",
            cidr_block=config.vpc_cidr,
            enable_dns_hostnames=True,
            enable_dns_support=True,
            tags=create_tags(environment, f"{name}-vpc"),
            opts=child_opts,
        )

        # Create Internet Gateway
        self.igw = aws.ec2.InternetGateway(
            f"{name}-igw",
            vpc_id=self.vpc.id,
            tags=create_tags(environment, f"{name}-igw"),
            opts=child_opts,
        )

        self.public_subnets: list[aws.ec2.Subnet] = []
        self.isolated_subnets: list[aws.ec2.Subnet] = []

        for index, (az, cidr) in enumerate(zip(self.availability_zones, public_cidrs), start=1):
            subnet_name = f"{name}-public-subnet-{index}"
            self.public_subnets.append(aws.ec2.Subnet(
                subnet_name,
                vpc_id=self.vpc.id,
                cidr_block=cidr,
                availability_zone=az,
                map_public_ip_on_launch=True,
                tags=create_tags(environment, subnet_name, Tier="public"),
                opts=child_opts,
            ))

        for index, (az, cidr) in enumerate(zip(self.availability_zones, isolated_cidrs), start=1):
            subnet_name = f"{name}-isolated-subnet-{index}"
            self.isolated_subnets.append(aws.ec2.Subnet(
                subnet_name,
                vpc_id=self.vpc.id,
                cidr_block=cidr,
                availability_zone=az,
                map_public_ip_on_launch=False,
                tags=create_tags(environment, subnet_name, Tier="isolated"),
                opts=child_opts,
            ))

        # Create route tables
        self._create_route_tables(name, child_opts)

        self.register_outputs({
            "vpc_id": self.vpc.id,
            "public_subnet_ids": [subnet.id for subnet in self.public_subnets],
            "isolated_subnet_ids": [subnet.id for subnet in self.isolated_subnets],
            "public_route_table_id": self.public_rt.id,
            "isolated_route_table_id": self.isolated_rt.id,
        })

    @staticmethod
    def _select_availability_zones(count: int) -> list[str]:
        """Pick the first `count` regular availability zones in the provider's region."""
        # Local Zones and Wavelength Zones sort ahead of regular AZ names
        zones = aws.get_availability_zones(
            state="available",
            filters=[
                aws.GetAvailabilityZonesFilterArgs(
                    name="zone-type",
                    values=["availability-zone"],
                )
            ],
        )
        names = sorted(zones.names)
        if len(names) < count:
            raise pulumi.RunError(
                f"Region offers {len(names)} availability zones, {count} requested"
            )
        selected = names[:count]
        pulumi.log.info(f"Using availability zones: {', '.join(selected)}")
        return selected

    def _create_route_tables(
        self,
        name: str,
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create route tables for public and isolated subnets."""
        # Public route table (Internet Gateway)
        self.public_rt = aws.ec2.RouteTable(
            f"{name}-public-rt",
            vpc_id=self.vpc.id,
            routes=[
                aws.ec2.RouteTableRouteArgs(
                    cidr_block="0.0.0.0/0",
                    gateway_id=self.igw.id,
                ),
            ],
            tags=create_tags(self.environment, f"{name}-public-rt"),
            opts=opts,
        )

        for index, subnet in enumerate(self.public_subnets, start=1):
            aws.ec2.RouteTableAssociation(
                f"{name}-public-rt-assoc-{index}",
                subnet_id=subnet.id,
                route_table_id=self.public_rt.id,
                opts=opts,
            )

        # Isolated route table (VPC-local routing only)
        self.isolated_rt = aws.ec2.RouteTable(
            f"{name}-isolated-rt",
            vpc_id=self.vpc.id,
            routes=[],  # No default route, no NAT
            tags=create_tags(self.environment, f"{name}-isolated-rt"),
            opts=opts,
        )

        for index, subnet in enumerate(self.isolated_subnets, start=1):
            aws.ec2.RouteTableAssociation(
                f"{name}-isolated-rt-assoc-{index}",
                subnet_id=subnet.id,
                route_table_id=self.isolated_rt.id,
                opts=opts,
            )

    def get_outputs(self) -> VpcOutputs:
        """Get VPC output values."""
        return VpcOutputs(
            vpc_id=self.vpc.id,
            public_subnet_ids=[subnet.id for subnet in self.public_subnets],
            isolated_subnet_ids=[subnet.id for subnet in self.isolated_subnets],
            public_route_table_id=self.public_rt.id,
            isolated_route_table_id=self.isolated_rt.id,
            availability_zones=list(self.availability_zones),
        )
