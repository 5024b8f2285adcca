"""
Base configuration dataclass for environment settings.

Provides type-safe configuration structure loaded from Pulumi stack configs.
"""

import ipaddress
from dataclasses import dataclass

import pulumi

from tech_health_iac.configs.constants import ENVIRONMENTS


@dataclass(frozen=True)
class EnvironmentConfig:
    """
    Environment-specific configuration for infrastructure deployment.

    Attributes:
        environment: Deployment environment (dev, staging, prod)
        max_azs: Number of availability zones spanned by the VPC
        vpc_cidr: Address space of the VPC
        subnet_cidr_mask: Prefix length of every public and isolated subnet
        ssh_allowed_cidr: Single /32 source allowed to SSH into the web server
        ec2_instance_type: EC2 instance type for the web server
        rds_instance_class: RDS instance class for MySQL
        rds_engine_version: MySQL engine version
        rds_allocated_storage: RDS storage in GB
        rds_username: Master username (the password is always generated)
        enable_deletion_protection: Enable deletion protection for the database
        multi_az: Enable multi-AZ deployment for RDS
    """
    environment: str
    max_azs: int
    vpc_cidr: str
    subnet_cidr_mask: int
    ssh_allowed_cidr: str
    ec2_instance_type: str
    rds_instance_class: str
    rds_engine_version: str
    rds_allocated_storage: int
    rds_username: str
    enable_deletion_protection: bool
    multi_az: bool

    @property
    def is_production(self) -> bool:
        """Check if this is a production environment."""
        return self.environment == "prod"

    @property
    def subnet_count(self) -> int:
        """Total subnets across both tiers."""
        return 2 * self.max_azs

    def get_tags(self) -> dict[str, str]:
        """Get environment-specific tags."""
        return {
            "Environment": self.environment,
        }

    def validate(self) -> "EnvironmentConfig":
        """
        Reject values the topology cannot be built from.

        Returns:
            The same config, so calls can be chained

        Raises:
            pulumi.RunError: If any value is out of range
        """
        if self.environment not in ENVIRONMENTS:
            raise pulumi.RunError(
                f"Unknown environment '{self.environment}', expected one of {', '.join(ENVIRONMENTS)}"
            )

        # RDS subnet groups need subnets in at least two AZs
        if self.max_azs < 2:
            raise pulumi.RunError(f"max_azs must be at least 2, got {self.max_azs}")

        try:
            vpc_network = ipaddress.IPv4Network(self.vpc_cidr)
        except ValueError as e:
            raise pulumi.RunError(f"Invalid vpc_cidr '{self.vpc_cidr}': {e}") from e

        if not vpc_network.prefixlen < self.subnet_cidr_mask <= 28:
            raise pulumi.RunError(
                f"subnet_cidr_mask must be between /{vpc_network.prefixlen + 1} and /28, "
                f"got /{self.subnet_cidr_mask}"
            )

        available = 2 ** (self.subnet_cidr_mask - vpc_network.prefixlen)
        if available < self.subnet_count:
            raise pulumi.RunError(
                f"{self.vpc_cidr} holds {available} /{self.subnet_cidr_mask} subnets, "
                f"{self.subnet_count} are needed"
            )

        try:
            ssh_network = ipaddress.IPv4Network(self.ssh_allowed_cidr)
        except ValueError as e:
            raise pulumi.RunError(f"Invalid ssh_allowed_cidr '{self.ssh_allowed_cidr}': {e}") from e

        if ssh_network.prefixlen != 32:
            raise pulumi.RunError(
                f"ssh_allowed_cidr must be a single host (/32), got {self.ssh_allowed_cidr}"
            )

        if self.rds_allocated_storage <= 0:
            raise pulumi.RunError(
                f"rds_allocated_storage must be positive, got {self.rds_allocated_storage}"
            )

        return self
