"""
Security components for IAM.

Components:
- IamRolesComponent: IAM role and instance profile for the EC2 web server
"""

from tech_health_iac.components.security.iam_roles import IamRolesComponent, IamRoleOutputs

__all__ = [
    "IamRolesComponent",
    "IamRoleOutputs",
]
