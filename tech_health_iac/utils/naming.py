"""
Resource naming conventions for consistent AWS resource names.

Follows pattern: {project}-{environment}-{resource}
"""

from dataclasses import dataclass


@dataclass
class ResourceNamer:
    """
    Generates consistent resource names for AWS resources.

    Attributes:
        project: Project identifier
        environment: Deployment environment (dev, staging, prod)
    """
    project: str
    environment: str

    def name(self, resource: str) -> str:
        """
        Generate a resource name.

        Args:
            resource: Resource identifier (e.g., 'vpc', 'web'). An empty
                identifier yields the bare project-environment prefix.

        Returns:
            Formatted resource name
        """
        if not resource:
            return f"{self.project}-{self.environment}"
        return f"{self.project}-{self.environment}-{resource}"

    def db_identifier(self, resource: str) -> str:
        """
        Generate an RDS instance identifier.

        RDS identifiers must be lowercase and cannot contain consecutive hyphens.

        Args:
            resource: Resource identifier

        Returns:
            Identifier accepted by RDS
        """
        identifier = self.name(resource).lower()
        while "--" in identifier:
            identifier = identifier.replace("--", "-")
        return identifier.strip("-")
