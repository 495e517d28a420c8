"""Cipher Block Chaining (CBC) mode.

Each padded plaintext block is XORed with the previous ciphertext block before
encryption; the first block is XORed with a fresh random IV, which is sent as
the first ciphertext block.

Ciphertext layout: ``IV (16 bytes) || block_1 || ... || block_n``.

Flipping bits in ciphertext block i garbles plaintext block i completely and
flips the same bits in plaintext block i + 1; nothing else changes.

A key must never be used for two encryptions with the same IV. The
RandomSource draws a fresh IV per call, but nothing here checks that it
differs from earlier ones.
"""

from __future__ import annotations

from ..blocking import group, ungroup, xor_bytes
from ..errors import TruncatedCiphertextError
from ..interfaces import BaseMode
from ..padding import pad, unpad


class CBCMode(BaseMode):
    """Chained blocks with a random IV prepended."""

    name = "cbc"
    description = "Cipher Block Chaining: random IV, sequential encryption"

    def encrypt(self, plaintext: bytes, key: bytes) -> bytes:
        self.validate_key(key)
        blocks = group(pad(plaintext, self.block_size), self.block_size)
        iv = self.rng.new_iv()
        return self.encrypt_with_iv(blocks, key, iv)

    def encrypt_with_iv(self, blocks: list[bytes], key: bytes, iv: bytes) -> bytes:
        """Chain already padded ``blocks`` starting from ``iv``.

        Returns:
            ``iv`` followed by the ciphertext blocks
        """
        if len(iv) != self.block_size:
            raise ValueError(f"IV must be {self.block_size} bytes, got {len(iv)}")

        previous = iv
        output = [iv]
        for block in blocks:
            previous = self.cipher.encrypt_block(key, xor_bytes(block, previous))
            output.append(previous)
        return ungroup(output)

    def decrypt(self, ciphertext: bytes, key: bytes) -> bytes:
        self.validate_key(key)
        if len(ciphertext) < self.block_size:
            raise TruncatedCiphertextError(len(ciphertext), self.block_size, "IV")

        blocks = group(ciphertext, self.block_size)
        iv, body = blocks[0], blocks[1:]
        if not body:
            return b""

        # Each block needs only itself and its predecessor, both known up front
        previous = [iv] + body[:-1]
        plain_blocks = [
            xor_bytes(self.cipher.decrypt_block(key, c), p)
            for c, p in zip(body, previous)
        ]
        return unpad(ungroup(plain_blocks), self.block_size, strict=self.config.strict_padding)

    def ciphertext_length(self, plaintext_length: int) -> int:
        return (plaintext_length // self.block_size + 2) * self.block_size
