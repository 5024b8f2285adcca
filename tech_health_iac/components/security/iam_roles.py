"""
IAM roles component for the web server.

Creates:
- EC2 instance role trusted by ec2.amazonaws.com
- Exactly three AWS managed policies (Secrets Manager, CloudWatch agent, SSM), no inline policy
- Instance profile wrapping the role
"""

import json
from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from tech_health_iac.configs.constants import MANAGED_POLICY_ARNS
from tech_health_iac.utils.tags import create_tags


@dataclass
class IamRoleOutputs:
    """Output values from IAM roles component."""
    ec2_role_arn: pulumi.Output[str]
    ec2_role_name: pulumi.Output[str]
    ec2_instance_profile_name: pulumi.Output[str]
    managed_policy_arns: list[str]


class IamRolesComponent(pulumi.ComponentResource):
    """
    IAM role for the EC2 web server.

    Permissions come only from AWS managed policies attached by reference:
    - Service-to-service: EC2 -> Secrets Manager (RDS password)
    - Monitoring: EC2 -> CloudWatch
    - Management: SSM -> EC2
    """

    def __init__(
        self,
        name: str,
        environment: str,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:security:IamRoles", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        # EC2 assume role policy
        ec2_assume_policy = json.dumps({
            "Version": "2012-10-17",
            "Statement": [{
                "Effect": "Allow",
                "Principal": {"Service": "ec2.amazonaws.com"},
                "Action": "sts:AssumeRole",
            }],
        })

        # EC2 Role
        self.ec2_role = aws.iam.Role(
            f"{name}-ec2-role",
            assume_role_policy=ec2_assume_policy,
            description="IAM role for EC2 to access RDS credentials, Cloudwatch logs, and SSM",
            tags=create_tags(environment, f"{name}-ec2-role"),
            opts=child_opts,
        )

        # Attach AWS managed policies
        self.policy_attachments = [
            aws.iam.RolePolicyAttachment(
                f"{name}-ec2-{policy_key}",
                role=self.ec2_role.name,
                policy_arn=policy_arn,
                opts=child_opts,
            )
            for policy_key, policy_arn in MANAGED_POLICY_ARNS.items()
        ]

        # EC2 Instance Profile
        self.ec2_instance_profile = aws.iam.InstanceProfile(
            f"{name}-ec2-profile",
            role=self.ec2_role.name,
            tags=create_tags(environment, f"{name}-ec2-profile"),
            opts=child_opts,
        )

        self.register_outputs({
            "ec2_role_arn": self.ec2_role.arn,
            "ec2_instance_profile_name": self.ec2_instance_profile.name,
        })

    def get_outputs(self) -> IamRoleOutputs:
        """Get IAM role output values."""
        return IamRoleOutputs(
            ec2_role_arn=self.ec2_role.arn,
            ec2_role_name=self.ec2_role.name,
            ec2_instance_profile_name=self.ec2_instance_profile.name,
            managed_policy_arns=list(MANAGED_POLICY_ARNS.values()),
        )
