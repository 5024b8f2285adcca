"""
Environment configuration loader.

Loads and validates configuration from Pulumi stack config files.
"""

import pulumi

from tech_health_iac.configs.base import EnvironmentConfig
from tech_health_iac.configs.constants import (
    EC2_INSTANCE_TYPE,
    MAX_AZS,
    RDS_DEFAULTS,
    SSH_ALLOWED_CIDR,
    SUBNET_CIDR_MASK,
    VPC_CIDR,
)


def _get_int(config: pulumi.Config, key: str, default: int) -> int:
    """Read an integer setting, keeping explicit zeros for validation."""
    value = config.get_int(key)
    return default if value is None else value


def get_config() -> EnvironmentConfig:
    """
    Load environment configuration from Pulumi stack config.

    Returns:
        EnvironmentConfig: Validated configuration object

    Raises:
        pulumi.ConfigMissingError: If required config values are missing
        pulumi.RunError: If a value fails validation
    """
    config = pulumi.Config()

    env_config = EnvironmentConfig(
        environment=config.require("environment"),
        max_azs=_get_int(config, "max_azs", MAX_AZS),
        vpc_cidr=config.get("vpc_cidr") or VPC_CIDR,
        subnet_cidr_mask=_get_int(config, "subnet_cidr_mask", SUBNET_CIDR_MASK),
        ssh_allowed_cidr=config.get("ssh_allowed_cidr") or SSH_ALLOWED_CIDR,
        ec2_instance_type=config.get("ec2_instance_type") or EC2_INSTANCE_TYPE,
        rds_instance_class=config.get("rds_instance_class") or str(RDS_DEFAULTS["instance_class"]),
        rds_engine_version=config.get("rds_engine_version") or str(RDS_DEFAULTS["engine_version"]),
        rds_allocated_storage=_get_int(config, "rds_allocated_storage", int(RDS_DEFAULTS["allocated_storage"])),
        rds_username=config.get("rds_username") or str(RDS_DEFAULTS["username"]),
        enable_deletion_protection=config.get_bool("enable_deletion_protection") or False,
        multi_az=config.get_bool("multi_az") or False,
    ).validate()

    pulumi.log.info(
        f"Loaded '{env_config.environment}' config: {env_config.max_azs} AZs, "
        f"EC2 {env_config.ec2_instance_type}, RDS {env_config.rds_instance_class} "
        f"(MySQL {env_config.rds_engine_version})"
    )
    if env_config.is_production and not env_config.enable_deletion_protection:
        pulumi.log.warn("Production database deployed without deletion protection")

    return env_config
