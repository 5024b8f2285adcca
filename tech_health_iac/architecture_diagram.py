"""
Tech Health Architecture Diagram.

Draws the stack topology: VPC tiers, security groups, IAM role, EC2 and RDS.

Dependencies:
    pip install diagrams  (plus the Graphviz `dot` binary)

Usage:
    python -m tech_health_iac.architecture_diagram
    # Outputs: tech_health_architecture.png
"""

from diagrams import Diagram, Cluster, Edge
from diagrams.aws.compute import EC2
from diagrams.aws.database import RDS
from diagrams.aws.general import Users
from diagrams.aws.management import Cloudwatch, SystemsManager
from diagrams.aws.network import InternetGateway, PrivateSubnet, PublicSubnet
from diagrams.aws.security import IAMRole, SecretsManager

from tech_health_iac.configs.constants import (
    EC2_INSTANCE_TYPE,
    MAX_AZS,
    PORTS,
    RDS_DEFAULTS,
    SSH_ALLOWED_CIDR,
    SUBNET_CIDR_MASK,
    VPC_CIDR,
)

graph_attr = {
    "fontsize": "14",
    "bgcolor": "white",
    "pad": "0.5",
    "splines": "ortho",
    "nodesep": "0.8",
    "ranksep": "1.2",
}

node_attr = {
    "fontsize": "11",
}

edge_attr = {
    "fontsize": "9",
}


def render_diagram(
    filename: str = "tech_health_architecture",
    outformat: str = "png",
    show: bool = False,
) -> str:
    """
    Render the architecture diagram.

    Args:
        filename: Output path without extension
        outformat: Graphviz output format
        show: Open the rendered file when done

    Returns:
        Path of the rendered file
    """
    with Diagram(
        "Tech Health Architecture\n(Public Web Tier, Isolated Database Tier, No NAT)",
        filename=filename,
        outformat=outformat,
        show=show,
        direction="TB",
        graph_attr=graph_attr,
        node_attr=node_attr,
        edge_attr=edge_attr,
    ):
        users = Users("Users\n(Internet)")
        admin = Users(f"Admin\n{SSH_ALLOWED_CIDR}")

        with Cluster("AWS Managed Services"):
            secrets = SecretsManager("Secrets Manager\nGenerated RDS Password")
            cloudwatch = Cloudwatch("CloudWatch\nAgent Metrics & Logs")
            ssm = SystemsManager("Systems Manager\nSession Manager")

        ec2_role = IAMRole(
            "EC2 Role\nSecretsManagerReadWrite\nCloudWatchAgentServerPolicy\nAmazonSSMManagedInstanceCore"
        )

        with Cluster(f"VPC: {VPC_CIDR}\n{MAX_AZS} AZs | NO NAT Gateway"):
            igw = InternetGateway("Internet Gateway")

            with Cluster(f"Public Tier (/{SUBNET_CIDR_MASK} per AZ)\nweb-sg: 443 any, 22 admin"):
                PublicSubnet("Public Subnets")
                web = EC2(f"Web Server\n{EC2_INSTANCE_TYPE}\nAmazon Linux 2")

            with Cluster(f"Isolated Tier (/{SUBNET_CIDR_MASK} per AZ)\ndatabase-sg: {PORTS['mysql']} from web-sg only"):
                PrivateSubnet("Isolated Subnets\nNo Routes Out")
                db = RDS(
                    f"RDS MySQL {RDS_DEFAULTS['engine_version']}\n{RDS_DEFAULTS['instance_class']}"
                )

        users >> Edge(label=f"HTTPS :{PORTS['https']}", color="orange", style="bold") >> igw
        admin >> Edge(label=f"SSH :{PORTS['ssh']}", color="red", style="dashed") >> igw
        igw >> web
        web >> Edge(label=f"MySQL :{PORTS['mysql']}\nSG reference", color="darkgreen") >> db

        web - Edge(label="assumes", style="dotted") - ec2_role
        ec2_role >> Edge(label="read/write", color="purple") >> secrets
        ec2_role >> Edge(label="metrics", color="gray") >> cloudwatch
        ssm >> Edge(label="manages", color="gray") >> web
        db >> Edge(label="master secret", style="dotted") >> secrets

    return f"{filename}.{outformat}"


if __name__ == "__main__":
    print(f"Rendered {render_diagram()}")
