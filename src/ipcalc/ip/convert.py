"""
Conversions between IPv4 text forms and AddressRange values.

All input validation happens here, so the arithmetic in core and
summarize only ever sees well-formed 32-bit values.
"""

from netaddr import IPAddress, IPNetwork, AddrFormatError, INET_PTON

from ipcalc.ip.core import (
    ALL_ONES,
    AddressFormatError,
    AddressRange,
    int_to_dotted_decimal,
    mask_to_prefix,
)


def dotted_decimal_to_int(text: str) -> int:
    """Convert a dotted decimal string such as "10.20.30.40" to a 32-bit integer."""
    try:
        return int(IPAddress(text, 4, flags=INET_PTON))
    except (AddrFormatError, ValueError) as e:
        raise AddressFormatError(f"Invalid dotted decimal address {text!r}") from e


def prefix_to_mask(prefix: int | str) -> int:
    """Convert a CIDR prefix length (without the "/") to a bitmask."""
    # netaddr would also take a dotted netmask after the "/"
    if isinstance(prefix, str) and not (prefix.isascii() and prefix.isdigit()):
        raise AddressFormatError(f"Invalid CIDR prefix {prefix!r}")
    try:
        return int(IPNetwork(f"0.0.0.0/{prefix}", 4).netmask)
    except AddrFormatError as e:
        raise AddressFormatError(f"CIDR prefix must be between 0 and 32, got {prefix}") from e


def cidr_to_range(cidr: str) -> AddressRange:
    """Parse "a.b.c.d/len" into an AddressRange.

    A string without "/" is taken as a single host (/32).
    """
    parts = cidr.strip().split("/")
    if len(parts) > 2:
        raise AddressFormatError(f"Too many '/' in CIDR {cidr!r}")

    address = dotted_decimal_to_int(parts[0])
    mask = prefix_to_mask(parts[1]) if len(parts) == 2 else ALL_ONES
    return AddressRange(address=address, mask=mask)


def addr_and_mask_to_range(text: str) -> AddressRange:
    """Parse "10.20.30.40 255.255.255.0" into an AddressRange."""
    parts = text.strip().split(" ")
    if len(parts) != 2:
        raise AddressFormatError("Address and mask must be separated with a single space")

    return AddressRange(
        address=dotted_decimal_to_int(parts[0]),
        mask=dotted_decimal_to_int(parts[1]),
    )


def parse_network(text: str) -> AddressRange:
    """Parse either CIDR or "address mask" notation."""
    if " " in text.strip():
        return addr_and_mask_to_range(text)
    return cidr_to_range(text)


__all__ = [
    "dotted_decimal_to_int",
    "int_to_dotted_decimal",
    "prefix_to_mask",
    "mask_to_prefix",
    "cidr_to_range",
    "addr_and_mask_to_range",
    "parse_network",
]
