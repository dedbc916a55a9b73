"""
Dotted-quad rendering of 32-bit IPv4 addresses.
"""


def format_address(address: int) -> str:
    """
    Render a 32-bit address as four dot-separated decimal octets.

    Args:
        address: Integer address, most-significant octet first

    Returns:
        Dotted-quad text such as "10.0.0.1"
    """
    return "{}.{}.{}.{}".format(
        (address >> 24) & 0xFF,
        (address >> 16) & 0xFF,
        (address >> 8) & 0xFF,
        address & 0xFF,
    )
