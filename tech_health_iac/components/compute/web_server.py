"""
EC2 Web Server Component.

Key Components:
1. AMI: Latest Amazon Linux 2 (x86_64, gp2) published by Amazon.
2. Instance Profile: Links the IAM Role to the EC2, granting access to Secrets Manager, CloudWatch and SSM.
3. Placement:
   - subnet_id: Lives in a PUBLIC subnet and receives a public IP.
   - security_group_id: HTTPS from anywhere, SSH from one address.
4. IMDSv2 (http_tokens="required"): Secures metadata service against SSRF attacks.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from tech_health_iac.configs.base import EnvironmentConfig
from tech_health_iac.configs.constants import AMAZON_LINUX_2_AMI_FILTER
from tech_health_iac.utils.tags import create_tags


@dataclass
class WebServerOutputs:
    """Output values from web server component."""
    instance_id: pulumi.Output[str]
    public_ip: pulumi.Output[str]
    private_ip: pulumi.Output[str]


class WebServerComponent(pulumi.ComponentResource):
    """
    EC2 instance serving HTTPS from the public subnet tier.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        config: EnvironmentConfig,
        subnet_id: pulumi.Input[str],
        security_group_id: pulumi.Input[str],
        instance_profile_name: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:compute:WebServer", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        # Get latest Amazon Linux 2 AMI
        ami = aws.ec2.get_ami(
            most_recent=True,
            owners=["amazon"],
            filters=[
                aws.ec2.GetAmiFilterArgs(
                    name="name",
                    values=[AMAZON_LINUX_2_AMI_FILTER],
                ),
                aws.ec2.GetAmiFilterArgs(
                    name="virtualization-type",
                    values=["hvm"],
                ),
            ],
        )
        pulumi.log.info(f"Web server AMI: {ami.id}")

        # EC2 Instance
        self.instance = aws.ec2.Instance(
            f"{name}-instance",
            ami=ami.id,
            instance_type=config.ec2_instance_type,
            subnet_id=subnet_id,
            associate_public_ip_address=True,
            vpc_security_group_ids=[security_group_id],
            iam_instance_profile=instance_profile_name,
            metadata_options=aws.ec2.InstanceMetadataOptionsArgs(
                http_tokens="required",  # IMDSv2
                http_endpoint="enabled",
            ),
            tags=create_tags(environment, f"{name}-instance"),
            opts=child_opts,
        )

        self.register_outputs({
            "instance_id": self.instance.id,
            "public_ip": self.instance.public_ip,
            "private_ip": self.instance.private_ip,
        })

    def get_outputs(self) -> WebServerOutputs:
        """Get EC2 output values."""
        return WebServerOutputs(
            instance_id=self.instance.id,
            public_ip=self.instance.public_ip,
            private_ip=self.instance.private_ip,
        )
