"""
Range summarization and network overlap.
"""

import logging

from ipcalc.ip.core import (
    ALL_ONES,
    AddressRange,
    IPCalcError,
    InternalInvariantError,
    InvalidRangeError,
)
from ipcalc.logging_config import track_error


logger = logging.getLogger(__name__)

HIGH_BIT = 0x80000000


def _aligned_block(start: int, stop: int) -> AddressRange:
    """Largest CIDR block that begins at start and ends at or before stop."""
    # Smallest mask under which start and stop share a network
    shared_bits = start ^ stop
    mask = 0
    for bits in range(33):
        if shared_bits >> bits == 0:
            mask = ALL_ONES - ((1 << bits) - 1)
            break

    block = AddressRange(address=start, mask=mask)
    while block.network() != start or block.broadcast() > stop:
        block = AddressRange(address=start, mask=HIGH_BIT + (block.mask >> 1))
    return block


def summarize(start: int, stop: int) -> list[AddressRange]:
    """Summarize an inclusive range of addresses into the fewest CIDR blocks.

    Blocks are returned in ascending address order, do not overlap, and
    together cover exactly [start, stop].

    Args:
        start: First address of the range
        stop: Last address of the range

    Returns:
        List of aligned AddressRange blocks

    Raises:
        InvalidRangeError: if start > stop
        InternalInvariantError: if a block would extend past stop
    """
    if start > stop:
        raise InvalidRangeError(f"Arguments out of order: {start} > {stop}")

    blocks = []
    while True:
        logger.debug("Summarizing %d to %d", start, stop)
        if start == stop:
            blocks.append(AddressRange(address=start, mask=ALL_ONES))
            return blocks

        block = _aligned_block(start, stop)
        blocks.append(block)

        broadcast = block.broadcast()
        if broadcast == stop:
            return blocks
        if broadcast > stop:
            track_error(
                "internal_invariant",
                "Summarized block extends past end of range",
                context={"start": start, "stop": stop, "mask": block.mask},
            )
            raise InternalInvariantError(
                f"Block {block} overshoots range end {stop}"
            )

        start = broadcast + 1


def overlap(n1: AddressRange, n2: AddressRange) -> list[AddressRange]:
    """Return the CIDR blocks shared by networks n1 and n2.

    An empty list means the networks do not overlap.
    """
    if n1 == n2:
        return [n1]

    # Larger block sorts first on a tie
    lo, hi = sorted((n1, n2), key=lambda n: (n.address, n.mask))

    start = hi.address
    stop = min(lo.broadcast(), hi.broadcast())

    if stop < start or start > lo.broadcast():
        return []

    try:
        return summarize(start, stop)
    except IPCalcError as e:
        logger.warning("Treating %s and %s as disjoint: %s", n1, n2, e)
        return []
