"""
Pulumi program entry point for Tech Health infrastructure.

Loads stack configuration, declares the topology (see stack.py) and exports:
- ec2_public_ip: Public IP address of the EC2 web server
- rds_endpoint: RDS MySQL endpoint (host:port)
- database_secret_arn: ARN of the generated database secret in Secrets Manager
"""

import pulumi

from tech_health_iac.configs.environment import get_config
from tech_health_iac.stack import create_stack
from tech_health_iac.utils.naming import ResourceNamer
from tech_health_iac.utils.outputs import write_outputs_to_env


def main() -> None:
    """Deploy Tech Health infrastructure."""
    # Load configuration
    config = get_config()
    namer = ResourceNamer(project="tech-health", environment=config.environment)

    stack = create_stack(config, namer)
    outputs = stack.as_exports()

    # Write outputs to .env file for local development
    write_outputs_to_env(outputs, "infrastructure.env")

    # Export to Pulumi stack
    for key, value in outputs.items():
        pulumi.export(key, value)


# Pulumi runs this file as __main__
if __name__ == "__main__":
    main()
