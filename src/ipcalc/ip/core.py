"""
Core IPv4 address/mask value type.
"""

from dataclasses import dataclass
from typing import Final

from netaddr import IPAddress


# 255.255.255.255
ALL_ONES: Final = 0xFFFFFFFF


class IPCalcError(Exception):
    """Base exception for IPCalc errors."""
    pass


class InvalidRangeError(IPCalcError, ValueError):
    """Range bounds given out of order."""
    pass


class DiscontiguousMaskError(IPCalcError, ValueError):
    """Mask cannot be written as a CIDR prefix length."""
    pass


class InternalInvariantError(IPCalcError):
    """A computed block broke an invariant that should always hold."""
    pass


class AddressFormatError(IPCalcError, ValueError):
    """Malformed address, mask or CIDR text."""
    pass


def int_to_dotted_decimal(value: int) -> str:
    """Render a 32-bit integer as dotted decimal ("10.0.0.1")."""
    return str(IPAddress(value, 4))


def mask_is_contiguous(mask: int) -> bool:
    """True if the 1-bits of mask form a single high-order run."""
    host_bits = ~mask & ALL_ONES
    # host part must be of the form 0...01...1
    return host_bits & (host_bits + 1) == 0


def mask_to_prefix(mask: int) -> int:
    """Convert a contiguous mask to its prefix length (0-32)."""
    if not mask_is_contiguous(mask):
        raise DiscontiguousMaskError(
            f"Cannot represent discontiguous subnet mask {int_to_dotted_decimal(mask)} "
            "in CIDR notation"
        )
    return IPAddress(mask, 4).netmask_bits()


@dataclass(frozen=True, order=True)
class AddressRange:
    """An IPv4 address paired with a network mask.

    Network and broadcast addresses are derived from address and mask on
    every access. Instances are immutable; a resized network is a new value.
    """
    address: int
    mask: int

    def __post_init__(self):
        for name in ("address", "mask"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= ALL_ONES:
                raise ValueError(f"{name} must be an unsigned 32-bit integer, got {value!r}")

    def network(self) -> int:
        """Lowest address in the block."""
        return self.address & self.mask

    def broadcast(self) -> int:
        """Highest address in the block."""
        return (self.address | ~self.mask) & ALL_ONES

    def is_in(self, other: "AddressRange") -> bool:
        """True if all of self falls within the bounds of other."""
        return self.address >= other.address and self.broadcast() <= other.broadcast()

    def is_contiguous(self) -> bool:
        return mask_is_contiguous(self.mask)

    @property
    def prefix_length(self) -> int:
        return mask_to_prefix(self.mask)

    @property
    def num_addresses(self) -> int:
        return self.broadcast() - self.network() + 1

    def to_cidr(self) -> str:
        """Render as "a.b.c.d/len".

        Raises:
            DiscontiguousMaskError: if the mask has no prefix-length form
        """
        return f"{int_to_dotted_decimal(self.address)}/{self.prefix_length}"

    def __str__(self) -> str:
        if self.is_contiguous():
            return self.to_cidr()
        return f"{int_to_dotted_decimal(self.address)} {int_to_dotted_decimal(self.mask)}"
