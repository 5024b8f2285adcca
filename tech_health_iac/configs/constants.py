"""
Infrastructure constants for Tech Health.

Contains CIDR blocks, ports, managed policies and default configurations.
"""

from typing import Final

# VPC Configuration
VPC_CIDR: Final[str] = "10.0.0.0/16"
MAX_AZS: Final[int] = 2
SUBNET_CIDR_MASK: Final[int] = 24

# The isolated tier must never reach the internet
NAT_GATEWAYS: Final[int] = 0

# Single SSH source for the web server
SSH_ALLOWED_CIDR: Final[str] = "108.248.219.126/32"

# Deployable environments
ENVIRONMENTS: Final[tuple[str, ...]] = ("dev", "staging", "prod")

# EC2 defaults
EC2_INSTANCE_TYPE: Final[str] = "t2.micro"
AMAZON_LINUX_2_AMI_FILTER: Final[str] = "amzn2-ami-hvm-*-x86_64-gp2"

# RDS defaults
RDS_DEFAULTS: Final[dict[str, str | int]] = {
    "instance_class": "db.t3.micro",
    "engine": "mysql",
    "engine_version": "8.0",
    "allocated_storage": 100,
    "username": "admin",
}

# Port configurations
PORTS: Final[dict[str, int]] = {
    "https": 443,
    "ssh": 22,
    "mysql": 3306,
}

# AWS managed policies attached to the web server role
MANAGED_POLICY_ARNS: Final[dict[str, str]] = {
    "secrets": "arn:aws:iam::aws:policy/SecretsManagerReadWrite",
    "cloudwatch-agent": "arn:aws:iam::aws:policy/CloudWatchAgentServerPolicy",
    "ssm-core": "arn:aws:iam::aws:policy/AmazonSSMManagedInstanceCore",
}

# Exported when RDS reports no managed master user secret
NO_SECRET_PLACEHOLDER: Final[str] = "No secret created"

# Default tags applied to all resources
DEFAULT_TAGS: Final[dict[str, str]] = {
    "Project": "tech-health",
    "ManagedBy": "pulumi",
}
