"""Pytest fixtures for infrastructure tests."""

import sys
from pathlib import Path

import pulumi
import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent

# Make the package importable without an editable install
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pulumi_mocks import FakeConfig, TopologyMocks, deploy  # noqa: E402


@pytest.fixture
def iac_project_root():
    """Return the package root directory."""
    return PROJECT_ROOT / "tech_health_iac"


@pytest.fixture
def python_files_in_iac(iac_project_root):
    """Return all Python files in the package."""
    return [f for f in iac_project_root.rglob("*.py") if "__pycache__" not in str(f)]


@pytest.fixture
def mocks():
    """Fresh Pulumi mocks, installed for the current test."""
    topology_mocks = TopologyMocks()
    pulumi.runtime.set_mocks(topology_mocks, project="tech-health", stack="test", preview=False)
    return topology_mocks


@pytest.fixture
def dev_config():
    """Dev configuration matching the stack config defaults."""
    from tech_health_iac.configs.base import EnvironmentConfig

    return EnvironmentConfig(
        environment="dev",
        max_azs=2,
        vpc_cidr="10.0.0.0/16",
        subnet_cidr_mask=24,
        ssh_allowed_cidr="108.248.219.126/32",
        ec2_instance_type="t2.micro",
        rds_instance_class="db.t3.micro",
        rds_engine_version="8.0",
        rds_allocated_storage=100,
        rds_username="admin",
        enable_deletion_protection=False,
        multi_az=False,
    )


@pytest.fixture
def namer():
    from tech_health_iac.utils.naming import ResourceNamer

    return ResourceNamer(project="tech-health", environment="dev")


@pytest.fixture
def deployment(dev_config, namer):
    """The dev stack evaluated under recording mocks."""
    return deploy(TopologyMocks(), dev_config, namer)


@pytest.fixture
def stack_config(monkeypatch, mocks):
    """Install a fake stack config for get_config to read."""
    values: dict[str, str] = {}
    monkeypatch.setattr(pulumi, "Config", lambda *args, **kwargs: FakeConfig(values))
    return values
