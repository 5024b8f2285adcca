"""
Compute components.

Components:
- WebServerComponent: EC2 web server in the public subnet tier
"""

from tech_health_iac.components.compute.web_server import WebServerComponent, WebServerOutputs

__all__ = [
    "WebServerComponent",
    "WebServerOutputs",
]
