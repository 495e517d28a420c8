"""
Padding that makes any byte string a whole number of blocks.

Scheme (PKCS#7 style):
  p = block_size - (len(data) % block_size), so 1 <= p <= block_size
  append p copies of the byte value p

When the data is already block aligned a full extra block of ``block_size``
bytes is appended, so the last byte of padded data is always a pad length.

Removal has two policies:
  lenient (default)  only the final byte is inspected; if it is 0, larger
                     than the block size or larger than the buffer, the
                     buffer is returned unchanged
  strict             every pad byte must equal p, otherwise PaddingError

The lenient policy cannot tell "never padded" from "tampered padding" apart
and may return data that still ends in pad bytes.
"""

from . import BLOCK_SIZE
from .errors import PaddingError


def pad(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """
    Append between 1 and ``block_size`` pad bytes.

    Args:
        data: Arbitrary bytes, possibly empty

    Returns:
        Padded bytes whose length is a positive multiple of ``block_size``
    """
    pad_len = block_size - (len(data) % block_size)
    return bytes(data) + bytes([pad_len]) * pad_len


def padding_length(data: bytes, block_size: int = BLOCK_SIZE, strict: bool = False) -> int:
    """
    Return the pad length announced by the trailing byte.

    Raises:
        PaddingError: If the trailing byte is not a usable pad length, or
            (strict only) the pad bytes disagree with it
    """
    if not data:
        raise PaddingError("Cannot remove padding from empty data")

    pad_len = data[-1]
    if pad_len < 1 or pad_len > block_size:
        raise PaddingError(f"Invalid padding length {pad_len} for block size {block_size}")
    if pad_len > len(data):
        raise PaddingError(f"Padding length {pad_len} exceeds data length {len(data)}")

    if strict:
        if len(data) % block_size != 0:
            raise PaddingError(
                f"Padded data must be a multiple of {block_size} bytes, got {len(data)}"
            )
        if data[-pad_len:] != bytes([pad_len]) * pad_len:
            raise PaddingError("Invalid padding bytes")

    return pad_len


def unpad(data: bytes, block_size: int = BLOCK_SIZE, strict: bool = False) -> bytes:
    """
    Remove padding added by :func:`pad`.

    Args:
        data: Padded bytes
        strict: Raise instead of returning ``data`` unchanged on bad padding

    Returns:
        The original bytes
    """
    try:
        pad_len = padding_length(data, block_size, strict=strict)
    except PaddingError:
        if strict:
            raise
        return bytes(data)
    return bytes(data[:-pad_len])
