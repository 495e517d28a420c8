"""Electronic Codebook (ECB) mode.

WARNING: ECB is NOT secure. Every block is encrypted on its own under the same
key, so equal plaintext blocks give equal ciphertext blocks and the structure
of the message shows through. It is here to demonstrate exactly that.

Ciphertext layout: ``block_1 || ... || block_n`` with
``n = len(plaintext) // 16 + 1``.
"""

from __future__ import annotations

from ..blocking import group, ungroup
from ..errors import BlockLengthError
from ..interfaces import BaseMode
from ..padding import pad, unpad


class ECBMode(BaseMode):
    """Each padded block encrypted independently. Insecure."""

    name = "ecb"
    description = "Electronic Codebook: independent blocks (INSECURE, leaks repeated blocks)"
    secure = False

    def encrypt(self, plaintext: bytes, key: bytes) -> bytes:
        self.validate_key(key)
        blocks = group(pad(plaintext, self.block_size), self.block_size)
        return ungroup([self.cipher.encrypt_block(key, b) for b in blocks])

    def decrypt(self, ciphertext: bytes, key: bytes) -> bytes:
        self.validate_key(key)
        if not ciphertext:
            raise BlockLengthError(0, self.block_size)
        blocks = group(ciphertext, self.block_size)
        padded = ungroup([self.cipher.decrypt_block(key, b) for b in blocks])
        return unpad(padded, self.block_size, strict=self.config.strict_padding)

    def ciphertext_length(self, plaintext_length: int) -> int:
        return (plaintext_length // self.block_size + 1) * self.block_size
