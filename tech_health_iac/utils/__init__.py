"""
Utility functions for Pulumi infrastructure.

Provides naming conventions, tag factories, CIDR allocation and output utilities.
"""

from tech_health_iac.utils.naming import ResourceNamer
from tech_health_iac.utils.network import subnet_cidrs
from tech_health_iac.utils.tags import create_tags
from tech_health_iac.utils.outputs import write_outputs_to_env

__all__ = [
    "ResourceNamer",
    "subnet_cidrs",
    "create_tags",
    "write_outputs_to_env",
]
