"""
Test suite for infrastructure package syntax and structure validation.

Validates:
1. All Python modules have valid syntax
2. All imports can be resolved correctly
3. Component classes inherit from pulumi.ComponentResource
4. Output dataclasses are properly defined
5. Modules are documented
"""

import ast
from dataclasses import is_dataclass
from pathlib import Path

import pulumi

PACKAGE_DIR = Path(__file__).parent.parent.parent / "tech_health_iac"


class TestIacSyntaxValidation:
    """Validate Python syntax in all package modules."""

    def test_all_iac_files_have_valid_syntax(self, python_files_in_iac):
        """All Python files in the package should parse without syntax errors."""
        errors = []

        for py_file in python_files_in_iac:
            try:
                ast.parse(py_file.read_text())
            except SyntaxError as e:
                errors.append(f"{py_file}: {e.msg} (line {e.lineno})")

        assert not errors, "Syntax errors found:\n" + "\n".join(errors)

    def test_iac_module_count(self, python_files_in_iac):
        """Verify expected module structure."""
        # 4 config + 5 utils + main, stack, diagram, package init
        # + 5 component inits + 5 component modules
        assert len(python_files_in_iac) >= 23, (
            f"Expected at least 23 Python files, found {len(python_files_in_iac)}"
        )


class TestIacImports:
    """Validate that all package imports are correctly structured."""

    def test_all_components_importable(self):
        """All component classes should be importable and subclass ComponentResource."""
        from tech_health_iac.components.networking.vpc import VpcComponent
        from tech_health_iac.components.networking.security_groups import SecurityGroupsComponent
        from tech_health_iac.components.security.iam_roles import IamRolesComponent
        from tech_health_iac.components.compute.web_server import WebServerComponent
        from tech_health_iac.components.storage.rds_mysql import RdsMysqlComponent

        assert all(
            issubclass(cls, pulumi.ComponentResource)
            for cls in [
                VpcComponent,
                SecurityGroupsComponent,
                IamRolesComponent,
                WebServerComponent,
                RdsMysqlComponent,
            ]
        )

    def test_package_reexports(self):
        """Subpackages should re-export their components."""
        from tech_health_iac.components import networking, security, compute, storage

        assert {"VpcComponent", "SecurityGroupsComponent"}.issubset(networking.__all__)
        assert "IamRolesComponent" in security.__all__
        assert "WebServerComponent" in compute.__all__
        assert "RdsMysqlComponent" in storage.__all__

    def test_config_modules_importable(self):
        """Configuration modules should be importable."""
        from tech_health_iac.configs.base import EnvironmentConfig
        from tech_health_iac.configs.constants import (
            DEFAULT_TAGS,
            MANAGED_POLICY_ARNS,
            NAT_GATEWAYS,
            PORTS,
            VPC_CIDR,
        )
        from tech_health_iac.configs.environment import get_config

        assert is_dataclass(EnvironmentConfig)
        assert isinstance(DEFAULT_TAGS, dict)
        assert isinstance(VPC_CIDR, str)
        assert NAT_GATEWAYS == 0
        assert PORTS == {"https": 443, "ssh": 22, "mysql": 3306}
        assert len(MANAGED_POLICY_ARNS) == 3
        assert callable(get_config)

    def test_utility_modules_importable(self):
        """Utility modules should be importable."""
        from tech_health_iac.utils import (
            ResourceNamer,
            create_tags,
            subnet_cidrs,
            write_outputs_to_env,
        )

        assert ResourceNamer is not None
        assert callable(create_tags)
        assert callable(subnet_cidrs)
        assert callable(write_outputs_to_env)

    def test_main_entry_point_has_main_function(self):
        """Main entry point should define a documented main function."""
        from tech_health_iac import __main__ as program

        assert callable(program.main)
        assert program.main.__doc__


class TestIacComponentStructure:
    """Validate output dataclasses."""

    def test_output_dataclasses_are_dataclasses(self):
        from tech_health_iac.components.networking.vpc import VpcOutputs
        from tech_health_iac.components.networking.security_groups import SecurityGroupOutputs
        from tech_health_iac.components.security.iam_roles import IamRoleOutputs
        from tech_health_iac.components.compute.web_server import WebServerOutputs
        from tech_health_iac.components.storage.rds_mysql import RdsOutputs
        from tech_health_iac.stack import StackOutputs

        for cls in [
            VpcOutputs,
            SecurityGroupOutputs,
            IamRoleOutputs,
            WebServerOutputs,
            RdsOutputs,
            StackOutputs,
        ]:
            assert is_dataclass(cls), f"{cls.__name__} should be a dataclass"


class TestIacModuleDocumentation:
    """Validate that modules have proper documentation."""

    def test_main_module_has_docstring(self):
        tree = ast.parse((PACKAGE_DIR / "__main__.py").read_text())

        docstring = ast.get_docstring(tree)
        assert docstring is not None
        assert len(docstring.strip()) > 0

    def test_component_modules_have_docstrings(self):
        from tech_health_iac.components.networking import vpc, security_groups
        from tech_health_iac.components.security import iam_roles
        from tech_health_iac.components.compute import web_server
        from tech_health_iac.components.storage import rds_mysql

        for module in [vpc, security_groups, iam_roles, web_server, rds_mysql]:
            assert module.__doc__, f"{module.__name__} is missing a module docstring"
