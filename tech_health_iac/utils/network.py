"""
CIDR helpers for carving subnet tiers out of the VPC address space.
"""

import ipaddress

import pulumi


def subnet_cidrs(vpc_cidr: str, mask: int, count: int) -> list[str]:
    """
    Allocate consecutive subnet CIDR blocks from the start of the VPC range.

    Args:
        vpc_cidr: VPC address space (e.g. '10.0.0.0/16')
        mask: Prefix length of each subnet
        count: Number of subnets to allocate

    Returns:
        CIDR strings in allocation order

    Raises:
        pulumi.RunError: If the VPC cannot hold `count` subnets of that size
    """
    network = ipaddress.IPv4Network(vpc_cidr)
    if mask <= network.prefixlen:
        raise pulumi.RunError(f"Subnet mask /{mask} does not fit inside {vpc_cidr}")

    blocks = []
    for subnet in network.subnets(new_prefix=mask):
        if len(blocks) == count:
            break
        blocks.append(str(subnet))

    if len(blocks) < count:
        raise pulumi.RunError(
            f"{vpc_cidr} only holds {len(blocks)} /{mask} subnets, {count} requested"
        )
    return blocks
