"""Counter (CTR) mode.

For chunk i (0-based) the counter block is ``nonce || i`` with i as a 64-bit
little-endian integer. The block cipher encrypts the counter block and the
result is XORed with the chunk; the last chunk uses only as many keystream
bytes as it needs. No padding.

Ciphertext layout: ``nonce (8 bytes) || chunk_1 || ... || chunk_m``, exactly
``8 + len(plaintext)`` bytes.

Decryption runs the block cipher forward too, so encrypt and decrypt are the
same transform. Any chunk can be decrypted on its own given its index.

A (key, nonce) pair must never be used for two different plaintexts: the
keystream would repeat and XORing the two ciphertexts reveals the XOR of the
plaintexts. Nonces are random, not tracked.
"""

from __future__ import annotations

from ..blocking import chunks, xor_bytes
from ..errors import TruncatedCiphertextError
from ..interfaces import BaseMode
from .. import NONCE_SIZE

MAX_COUNTER = 2**64 - 1


class CTRMode(BaseMode):
    """Keystream from encrypted nonce || counter blocks."""

    name = "ctr"
    description = "Counter: random nonce, keystream XOR, no padding, random access"

    nonce_size = NONCE_SIZE

    def counter_block(self, nonce: bytes, index: int) -> bytes:
        """Build the counter block for chunk ``index``."""
        if len(nonce) != self.nonce_size:
            raise ValueError(f"Nonce must be {self.nonce_size} bytes, got {len(nonce)}")
        if not 0 <= index <= MAX_COUNTER:
            raise ValueError(f"Counter index out of range: {index}")
        counter_size = self.block_size - self.nonce_size
        return nonce + index.to_bytes(counter_size, "little")

    def keystream_block(self, key: bytes, nonce: bytes, index: int) -> bytes:
        """Keystream for chunk ``index``."""
        return self.cipher.encrypt_block(key, self.counter_block(nonce, index))

    def _apply(self, data: bytes, key: bytes, nonce: bytes) -> bytes:
        output = []
        for i, chunk in enumerate(chunks(data, self.block_size)):
            keystream = self.keystream_block(key, nonce, i)
            output.append(xor_bytes(chunk, keystream[:len(chunk)]))
        return b"".join(output)

    def encrypt(self, plaintext: bytes, key: bytes) -> bytes:
        self.validate_key(key)
        nonce = self.rng.new_nonce()
        return nonce + self._apply(plaintext, key, nonce)

    def decrypt(self, ciphertext: bytes, key: bytes) -> bytes:
        self.validate_key(key)
        nonce, body = self._split(ciphertext)
        return self._apply(body, key, nonce)

    def decrypt_chunk(self, ciphertext: bytes, key: bytes, index: int) -> bytes:
        """Decrypt only chunk ``index`` of ``ciphertext``.

        Raises:
            IndexError: If the ciphertext has no chunk ``index``
        """
        self.validate_key(key)
        nonce, body = self._split(ciphertext)
        start = index * self.block_size
        if index < 0 or start >= len(body):
            raise IndexError(f"Chunk index {index} out of range")
        chunk = body[start:start + self.block_size]
        keystream = self.keystream_block(key, nonce, index)
        return xor_bytes(chunk, keystream[:len(chunk)])

    def _split(self, ciphertext: bytes) -> tuple[bytes, bytes]:
        if len(ciphertext) < self.nonce_size:
            raise TruncatedCiphertextError(len(ciphertext), self.nonce_size, "nonce")
        return bytes(ciphertext[:self.nonce_size]), bytes(ciphertext[self.nonce_size:])

    def ciphertext_length(self, plaintext_length: int) -> int:
        return self.nonce_size + plaintext_length
