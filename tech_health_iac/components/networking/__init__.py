"""
Networking components for VPC infrastructure.

Components:
- VpcComponent: VPC with public and isolated subnets, internet gateway, route tables
- SecurityGroupsComponent: Security groups for the web server and database
"""

from tech_health_iac.components.networking.vpc import VpcComponent, VpcOutputs
from tech_health_iac.components.networking.security_groups import SecurityGroupsComponent, SecurityGroupOutputs

__all__ = [
    "VpcComponent",
    "VpcOutputs",
    "SecurityGroupsComponent",
    "SecurityGroupOutputs",
]
