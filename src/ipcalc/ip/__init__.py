"""
IPv4 Subnet Arithmetic Module

Provides the AddressRange value type, range summarization into CIDR
blocks, network overlap, and conversions to and from IPv4 text.
"""

from ipcalc.ip.core import (
    ALL_ONES,
    AddressRange,
    IPCalcError,
    InvalidRangeError,
    DiscontiguousMaskError,
    InternalInvariantError,
    AddressFormatError,
)
from ipcalc.ip.ranges import summarize, overlap
from ipcalc.ip.convert import (
    dotted_decimal_to_int,
    int_to_dotted_decimal,
    prefix_to_mask,
    mask_to_prefix,
    cidr_to_range,
    addr_and_mask_to_range,
    parse_network,
)

__all__ = [
    "ALL_ONES",
    "AddressRange",
    "IPCalcError",
    "InvalidRangeError",
    "DiscontiguousMaskError",
    "InternalInvariantError",
    "AddressFormatError",
    "summarize",
    "overlap",
    "dotted_decimal_to_int",
    "int_to_dotted_decimal",
    "prefix_to_mask",
    "mask_to_prefix",
    "cidr_to_range",
    "addr_and_mask_to_range",
    "parse_network",
]
