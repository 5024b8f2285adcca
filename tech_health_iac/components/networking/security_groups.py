"""
Security Groups Component for Network Access Control.

Architectural Steps & Flow:
1. Create "Shell" Security Groups:
   - The web server SG and the database SG are created without inline rules so each can be referenced by ID.

2. Web Server Rules:
   - Ingress: HTTPS (443) from anywhere, SSH (22) from a single /32 only.
   - Egress: All outbound traffic.

3. Database Rules:
   - Ingress: MySQL (3306) ONLY from the web server SG (identity-based, never an address range).
   - Egress: None. The provider removes the default allow-all egress rule on creation and nothing re-adds it.

4. Stateful Nature:
   - Security Groups are stateful. Allowing an inbound request automatically allows the reply.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from tech_health_iac.configs.constants import PORTS
from tech_health_iac.utils.tags import create_tags


@dataclass
class SecurityGroupOutputs:
    """Output values from security groups component."""
    web_sg_id: pulumi.Output[str]
    database_sg_id: pulumi.Output[str]


class SecurityGroupsComponent(pulumi.ComponentResource):
    """
    Security groups for the web server and the MySQL database.

    The database accepts connections only from members of the web server SG.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        vpc_id: pulumi.Input[str],
        ssh_allowed_cidr: str,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:SecurityGroups", name, None, opts)
        self.environment = environment

        child_opts = pulumi.ResourceOptions(parent=self)

        # Web server security group
        self.web_sg = aws.ec2.SecurityGroup(
            f"{name}-web-sg",
            description="Security group for EC2 web server",
            vpc_id=vpc_id,
            tags=create_tags(environment, f"{name}-web-sg"),
            opts=child_opts,
        )

        # Database security group
        self.database_sg = aws.ec2.SecurityGroup(
            f"{name}-database-sg",
            description="Security group for RDS MySQL",
            vpc_id=vpc_id,
            tags=create_tags(environment, f"{name}-database-sg"),
            opts=child_opts,
        )

        self._create_rules(name, ssh_allowed_cidr, child_opts)

        self.register_outputs({
            "web_sg_id": self.web_sg.id,
            "database_sg_id": self.database_sg.id,
        })

    def _create_rules(
        self,
        name: str,
        ssh_allowed_cidr: str,
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create security group rules."""
        # Web server: Allow HTTPS from the internet
        aws.vpc.SecurityGroupIngressRule(
            f"{name}-web-ingress-https",
            security_group_id=self.web_sg.id,
            ip_protocol="tcp",
            from_port=PORTS["https"],
            to_port=PORTS["https"],
            cidr_ipv4="0.0.0.0/0",
            description="Allow HTTPS traffic from internet",
            opts=opts,
        )

        # Web server: Allow SSH from a single address
        aws.vpc.SecurityGroupIngressRule(
            f"{name}-web-ingress-ssh",
            security_group_id=self.web_sg.id,
            ip_protocol="tcp",
            from_port=PORTS["ssh"],
            to_port=PORTS["ssh"],
            cidr_ipv4=ssh_allowed_cidr,
            description="Allow SSH from my IP only",
            opts=opts,
        )

        # Web server: Allow all outbound
        aws.vpc.SecurityGroupEgressRule(
            f"{name}-web-egress-all",
            security_group_id=self.web_sg.id,
            ip_protocol="-1",
            cidr_ipv4="0.0.0.0/0",
            description="All outbound traffic",
            opts=opts,
        )

        # Database: Allow MySQL from web server
        aws.vpc.SecurityGroupIngressRule(
            f"{name}-database-ingress-web",
            security_group_id=self.database_sg.id,
            ip_protocol="tcp",
            from_port=PORTS["mysql"],
            to_port=PORTS["mysql"],
            referenced_security_group_id=self.web_sg.id,
            description="Allow MySQL traffic from EC2",
            opts=opts,
        )

    def get_outputs(self) -> SecurityGroupOutputs:
        """Get security group output values."""
        return SecurityGroupOutputs(
            web_sg_id=self.web_sg.id,
            database_sg_id=self.database_sg.id,
        )
