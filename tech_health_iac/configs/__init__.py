"""
Configuration module for Pulumi infrastructure.

Provides type-safe configuration loading from Pulumi stack config files.
"""

from tech_health_iac.configs.base import EnvironmentConfig
from tech_health_iac.configs.environment import get_config
from tech_health_iac.configs.constants import (
    VPC_CIDR,
    PORTS,
    DEFAULT_TAGS,
    MANAGED_POLICY_ARNS,
)

__all__ = [
    "EnvironmentConfig",
    "get_config",
    "VPC_CIDR",
    "PORTS",
    "DEFAULT_TAGS",
    "MANAGED_POLICY_ARNS",
]
