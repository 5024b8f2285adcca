"""
RDS MySQL Component for Relational Database.

Access Control - Who Can Connect:
1. EC2 Web Server (web_sg) → Port 3306 ✅
2. Anyone else → DENIED ❌

How the Connection Works:
1. Routing: The web server in the public subnet uses the implicit LOCAL route to reach RDS in the isolated subnets. Traffic never leaves the VPC.
2. Security Group: database_sg only allows ingress on port 3306 from web_sg (identity-based, not IP-based) and has no egress.
3. Credentials: manage_master_user_password=True means AWS generates the password and stores it in Secrets Manager. Nothing secret appears in this program or its state.

Result: Zero public exposure. No internet path in or out.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from tech_health_iac.configs.base import EnvironmentConfig
from tech_health_iac.configs.constants import NO_SECRET_PLACEHOLDER, PORTS, RDS_DEFAULTS
from tech_health_iac.utils.tags import create_tags


@dataclass
class RdsOutputs:
    """Output values from RDS component."""
    endpoint: pulumi.Output[str]
    address: pulumi.Output[str]
    port: pulumi.Output[int]
    secret_arn: pulumi.Output[str]


def _first_secret_arn(secrets: list | None) -> str:
    if secrets and secrets[0].secret_arn:
        return secrets[0].secret_arn
    return NO_SECRET_PLACEHOLDER


class RdsMysqlComponent(pulumi.ComponentResource):
    """
    RDS MySQL database in the isolated subnet tier.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        config: EnvironmentConfig,
        identifier: str,
        subnet_ids: list[pulumi.Input[str]],
        security_group_id: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:storage:RdsMysql", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        # DB Subnet Group
        self.subnet_group = aws.rds.SubnetGroup(
            f"{name}-subnet-group",
            description="Isolated subnets for RDS MySQL",
            subnet_ids=subnet_ids,
            tags=create_tags(environment, f"{name}-subnet-group"),
            opts=child_opts,
        )

        # RDS Instance
        self.instance = aws.rds.Instance(
            f"{name}-mysql",
            identifier=identifier,
            engine=RDS_DEFAULTS["engine"],
            engine_version=config.rds_engine_version,
            instance_class=config.rds_instance_class,
            allocated_storage=config.rds_allocated_storage,
            storage_encrypted=True,
            port=PORTS["mysql"],
            username=config.rds_username,
            manage_master_user_password=True,  # AWS manages password in Secrets Manager
            db_subnet_group_name=self.subnet_group.name,
            vpc_security_group_ids=[security_group_id],
            publicly_accessible=False,
            multi_az=config.multi_az,
            deletion_protection=config.enable_deletion_protection,
            skip_final_snapshot=not config.is_production,
            final_snapshot_identifier=f"{identifier}-final-snapshot" if config.is_production else None,
            backup_retention_period=7 if config.is_production else 1,
            tags=create_tags(environment, f"{name}-mysql"),
            opts=child_opts,
        )

        self.secret_arn = self.instance.master_user_secrets.apply(_first_secret_arn)

        self.register_outputs({
            "endpoint": self.instance.endpoint,
            "address": self.instance.address,
            "port": self.instance.port,
            "secret_arn": self.secret_arn,
        })

    def get_outputs(self) -> RdsOutputs:
        """Get RDS output values."""
        return RdsOutputs(
            endpoint=self.instance.endpoint,
            address=self.instance.address,
            port=self.instance.port,
            secret_arn=self.secret_arn,
        )
