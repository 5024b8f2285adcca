"""
Pulumi component resources for Tech Health infrastructure.

Each submodule provides reusable ComponentResource classes:
- networking: VPC, subnets, security groups
- security: IAM role and instance profile
- compute: EC2 web server
- storage: RDS MySQL
"""
