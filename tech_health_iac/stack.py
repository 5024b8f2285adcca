"""
Stack wiring for Tech Health infrastructure.

Instantiates all component resources in dependency order:
1. VPC → Security Groups
2. IAM Role
3. EC2 Web Server, RDS MySQL
"""

from dataclasses import dataclass

import pulumi

from tech_health_iac.configs.base import EnvironmentConfig
from tech_health_iac.utils.naming import ResourceNamer

from tech_health_iac.components.networking.vpc import VpcComponent
from tech_health_iac.components.networking.security_groups import SecurityGroupsComponent
from tech_health_iac.components.security.iam_roles import IamRolesComponent
from tech_health_iac.components.compute.web_server import WebServerComponent
from tech_health_iac.components.storage.rds_mysql import RdsMysqlComponent


@dataclass
class StackOutputs:
    """Components of the stack and the values it exports."""
    vpc: VpcComponent
    security_groups: SecurityGroupsComponent
    iam_roles: IamRolesComponent
    web_server: WebServerComponent
    database: RdsMysqlComponent
    ec2_public_ip: pulumi.Output[str]
    rds_endpoint: pulumi.Output[str]
    database_secret_arn: pulumi.Output[str]

    def as_exports(self) -> dict[str, pulumi.Output[str]]:
        """Export name to value, in the order they are exported."""
        return {
            "ec2_public_ip": self.ec2_public_ip,
            "rds_endpoint": self.rds_endpoint,
            "database_secret_arn": self.database_secret_arn,
        }


def create_stack(config: EnvironmentConfig, namer: ResourceNamer) -> StackOutputs:
    """
    Declare the full Tech Health topology.

    Args:
        config: Validated environment configuration
        namer: ResourceNamer instance

    Returns:
        StackOutputs with every component and the three exported values
    """
    base_name = namer.name("")

    # --- Layer 1: Networking Foundation ---
    vpc = VpcComponent(
        name=base_name,
        environment=config.environment,
        config=config,
    )
    vpc_outputs = vpc.get_outputs()

    security_groups = SecurityGroupsComponent(
        name=base_name,
        environment=config.environment,
        vpc_id=vpc_outputs.vpc_id,
        ssh_allowed_cidr=config.ssh_allowed_cidr,
    )
    sg_outputs = security_groups.get_outputs()

    # --- Layer 2: IAM Role ---
    iam_roles = IamRolesComponent(
        name=base_name,
        environment=config.environment,
    )
    iam_outputs = iam_roles.get_outputs()

    # --- Layer 3: Compute & Database ---
    web_server = WebServerComponent(
        name=namer.name("web"),
        environment=config.environment,
        config=config,
        subnet_id=vpc_outputs.public_subnet_ids[0],
        security_group_id=sg_outputs.web_sg_id,
        instance_profile_name=iam_outputs.ec2_instance_profile_name,
    )
    web_outputs = web_server.get_outputs()

    database = RdsMysqlComponent(
        name=namer.name("db"),
        environment=config.environment,
        config=config,
        identifier=namer.db_identifier("mysql"),
        subnet_ids=vpc_outputs.isolated_subnet_ids,
        security_group_id=sg_outputs.database_sg_id,
    )
    db_outputs = database.get_outputs()

    return StackOutputs(
        vpc=vpc,
        security_groups=security_groups,
        iam_roles=iam_roles,
        web_server=web_server,
        database=database,
        ec2_public_ip=web_outputs.public_ip,
        rds_endpoint=db_outputs.endpoint,
        database_secret_arn=db_outputs.secret_arn,
    )
