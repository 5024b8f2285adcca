"""
Pulumi mocks that record the resource graph declared by the stack.

Resources are recorded with their resolved inputs so tests can validate the
topology without calling AWS.
"""

from dataclasses import dataclass, field

import pulumi

MOCK_AZS = ["us-east-1a", "us-east-1b", "us-east-1c"]
MOCK_LOCAL_ZONES = ["us-east-1-bos-1a", "us-east-1-chi-1a"]
MOCK_AMI_ID = "ami-0abcdef1234567890"
MOCK_PUBLIC_IP = "203.0.113.10"
MOCK_DB_ADDRESS = "tech-health-dev-mysql.abc123.us-east-1.rds.amazonaws.com"
MOCK_SECRET_ARN = "arn:aws:secretsmanager:us-east-1:123456789012:secret:rds!db-abc123"


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


@dataclass
class RecordedResource:
    """A resource registration captured by the mocks."""
    typ: str
    name: str
    inputs: dict = field(default_factory=dict)

    @property
    def id(self) -> str:
        return f"{self.name}_id"

    def get(self, prop: str, default=None):
        """Read an input by its Python name, whichever casing the SDK sent."""
        if prop in self.inputs:
            return self.inputs[prop]
        return self.inputs.get(_camel(prop), default)


class TopologyMocks(pulumi.runtime.Mocks):
    """
    Records every resource registration and fakes the provider-computed outputs.

    Args:
        with_master_secret: Report a managed master user secret for RDS instances
        zones: Zone name to zone type, as the region reports them
    """

    def __init__(
        self,
        with_master_secret: bool = True,
        zones: dict[str, str] | None = None,
    ) -> None:
        self.with_master_secret = with_master_secret
        self.zones = zones if zones is not None else dict.fromkeys(MOCK_AZS, "availability-zone")
        self.resources: list[RecordedResource] = []
        self.calls: list[tuple[str, dict]] = []

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        self.resources.append(RecordedResource(args.typ, args.name, dict(args.inputs)))

        outputs = dict(args.inputs)
        outputs.setdefault("name", args.name)
        outputs.setdefault("arn", f"arn:aws:mock:::{args.name}")

        if args.typ == "aws:ec2/instance:Instance":
            outputs.update(publicIp=MOCK_PUBLIC_IP, privateIp="10.0.0.10")
        elif args.typ == "aws:rds/instance:Instance":
            outputs.update(
                address=MOCK_DB_ADDRESS,
                endpoint=f"{MOCK_DB_ADDRESS}:3306",
            )
            if self.with_master_secret:
                outputs["masterUserSecrets"] = [{
                    "kmsKeyId": "alias/aws/secretsmanager",
                    "secretArn": MOCK_SECRET_ARN,
                    "secretStatus": "active",
                }]

        return [f"{args.name}_id", outputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        self.calls.append((args.token, dict(args.args)))
        if args.token == "aws:index/getAvailabilityZones:getAvailabilityZones":
            names = self._filter_zones(args.args.get("filters") or [])
            return {
                "id": "us-east-1",
                "names": names,
                "zoneIds": [f"use1-az{i}" for i in range(1, len(names) + 1)],
            }
        if args.token == "aws:ec2/getAmi:getAmi":
            return {
                "id": MOCK_AMI_ID,
                "architecture": "x86_64",
                "name": "amzn2-ami-hvm-2.0.20240131.0-x86_64-gp2",
            }
        return {}

    def _filter_zones(self, filters: list[dict]) -> list[str]:
        names = list(self.zones)
        for zone_filter in filters:
            if zone_filter.get("name") == "zone-type":
                names = [n for n in names if self.zones[n] in zone_filter.get("values", [])]
        return names

    def of_type(self, typ: str) -> list[RecordedResource]:
        return [r for r in self.resources if r.typ == typ]

    def by_name(self, name: str) -> RecordedResource:
        matches = [r for r in self.resources if r.name == name]
        assert len(matches) == 1, f"Expected one resource named {name}, found {len(matches)}"
        return matches[0]


@dataclass
class Deployment:
    """Result of evaluating the stack under mocks."""
    stack: object
    exports: dict
    mocks: TopologyMocks


def deploy(mocks: TopologyMocks, config, namer) -> Deployment:
    """Evaluate the stack under the given mocks and wait for every output."""
    from tech_health_iac.stack import create_stack

    pulumi.runtime.set_mocks(mocks, project="tech-health", stack="test", preview=False)
    holder: dict = {"exports": {}}

    @pulumi.runtime.test
    def _evaluate():
        holder["stack"] = create_stack(config, namer)
        return pulumi.Output.all(**holder["stack"].as_exports()).apply(holder["exports"].update)

    _evaluate()
    return Deployment(stack=holder["stack"], exports=holder["exports"], mocks=mocks)




class FakeConfig:
    """Stands in for pulumi.Config with a plain dict of raw values."""

    def __init__(self, values: dict[str, str]) -> None:
        self.values = values

    def get(self, key):
        return self.values.get(key)

    def require(self, key):
        return self.values[key]

    def get_int(self, key):
        value = self.values.get(key)
        return int(value) if value is not None else None

    def get_bool(self, key):
        value = self.values.get(key)
        return value == "true" if value is not None else None
