"""
Storage components.

Components:
- RdsMysqlComponent: RDS MySQL in the isolated subnet tier
"""

from tech_health_iac.components.storage.rds_mysql import RdsMysqlComponent, RdsOutputs

__all__ = [
    "RdsMysqlComponent",
    "RdsOutputs",
]
