"""
Block splitting and joining.

A block is an immutable ``bytes`` object of exactly ``BLOCK_SIZE`` bytes.
``group`` is the only place arbitrary buffers are turned into blocks; it
refuses anything that is not already block aligned.
"""

from collections import Counter

from . import BLOCK_SIZE
from .errors import BlockLengthError


def group(data: bytes, block_size: int = BLOCK_SIZE) -> list[bytes]:
    """
    Split block-aligned data into consecutive blocks.

    Args:
        data: Bytes whose length is a multiple of ``block_size``

    Returns:
        List of ``block_size``-byte blocks, in order

    Raises:
        BlockLengthError: If ``len(data)`` is not a multiple of ``block_size``
    """
    if len(data) % block_size != 0:
        raise BlockLengthError(len(data), block_size)
    return [bytes(data[i:i + block_size]) for i in range(0, len(data), block_size)]


def ungroup(blocks: list[bytes]) -> bytes:
    """
    Concatenate blocks back into one byte string.
    """
    return b"".join(blocks)


def chunks(data: bytes, size: int = BLOCK_SIZE) -> list[bytes]:
    """
    Split data into pieces of ``size`` bytes; the last one may be shorter.
    """
    return [bytes(data[i:i + size]) for i in range(0, len(data), size)]


def xor_bytes(a: bytes, b: bytes) -> bytes:
    """
    XOR two byte sequences of equal length.
    """
    if len(a) != len(b):
        raise ValueError(f"Length mismatch: {len(a)} vs {len(b)}")
    return bytes(x ^ y for x, y in zip(a, b))


def repeated_blocks(data: bytes, block_size: int = BLOCK_SIZE) -> dict[bytes, int]:
    """
    Find blocks that occur more than once.

    Only whole blocks are considered; a trailing partial block is ignored.

    Returns:
        Mapping of repeated block -> number of occurrences
    """
    whole = len(data) - len(data) % block_size
    counts = Counter(group(data[:whole], block_size))
    return {block: n for block, n in counts.items() if n > 1}


def format_blocks(data: bytes, block_size: int = BLOCK_SIZE) -> str:
    """
    Format data as one hex line per block.

    Returns multi-line string like:
      [0] 3ad77bb40d7a3660a89ecaf32466ef97
      [1] f5d3d58503b9699de785895a96fdbaaf
    """
    lines = []
    for i, piece in enumerate(chunks(data, block_size)):
        lines.append(f"  [{i}] {piece.hex()}")
    return "\n".join(lines)
