"""
Pulumi infrastructure-as-code for the Tech Health web application.

This package defines AWS infrastructure including:
- VPC with a public and an isolated subnet tier across two AZs, no NAT gateway
- Security groups for the web server and the database
- IAM role with Secrets Manager, CloudWatch agent and SSM managed policies
- EC2 web server in the public tier
- RDS MySQL with a generated master password in the isolated tier
"""
