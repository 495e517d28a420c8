"""Exceptions raised by the modes of operation.

All of them subclass ``ValueError`` so callers catching ``ValueError`` for bad
input keep working.
"""


class ModeError(ValueError):
    """Base class for structural errors in mode input."""


class BlockLengthError(ModeError):
    """Data handed to the block layer is not a whole number of blocks."""

    def __init__(self, length: int, block_size: int = 16):
        self.length = length
        self.block_size = block_size
        super().__init__(
            f"Data length must be a multiple of {block_size} bytes, got {length}"
        )


class TruncatedCiphertextError(ModeError):
    """Ciphertext is shorter than the IV / nonce header of its mode."""

    def __init__(self, length: int, minimum: int, header: str):
        self.length = length
        self.minimum = minimum
        self.header = header
        super().__init__(
            f"Ciphertext too short for {header}: need at least {minimum} bytes, got {length}"
        )


class PaddingError(ModeError):
    """Trailing padding cannot be removed unambiguously."""
