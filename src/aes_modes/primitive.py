"""Single-block cipher primitive used by every mode.

The modes only need "encrypt one block / decrypt one block under a key".
AES-128 from PyCryptodome is the production primitive; anything implementing
:class:`BlockCipher` can be injected instead.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from Crypto.Cipher import AES


class BlockCipher(ABC):
    """Abstract single-block cipher.

    Implementations must satisfy ``decrypt_block(k, encrypt_block(k, b)) == b``
    for every block ``b`` and key ``k`` of the declared sizes.
    """

    name: str = "base"
    block_size: int = 16
    key_size: int = 16

    @abstractmethod
    def encrypt_block(self, key: bytes, block: bytes) -> bytes:
        """Encrypt exactly one block.

        Args:
            key: ``key_size``-byte key
            block: ``block_size``-byte plaintext block

        Returns:
            ``block_size``-byte ciphertext block
        """
        raise NotImplementedError

    @abstractmethod
    def decrypt_block(self, key: bytes, block: bytes) -> bytes:
        """Decrypt exactly one block (inverse of :meth:`encrypt_block`)."""
        raise NotImplementedError

    def validate_inputs(self, key: bytes, block: bytes) -> None:
        """Validate key and block sizes."""
        if len(key) != self.key_size:
            raise ValueError(f"Key must be {self.key_size} bytes, got {len(key)}")
        if len(block) != self.block_size:
            raise ValueError(f"Block must be {self.block_size} bytes, got {len(block)}")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class AES128(BlockCipher):
    """AES-128 on a single block, backed by PyCryptodome."""

    name = "aes128"

    def encrypt_block(self, key: bytes, block: bytes) -> bytes:
        self.validate_inputs(key, block)
        return AES.new(key, AES.MODE_ECB).encrypt(block)

    def decrypt_block(self, key: bytes, block: bytes) -> bytes:
        self.validate_inputs(key, block)
        return AES.new(key, AES.MODE_ECB).decrypt(block)


def aes128_encrypt(key: bytes, block: bytes) -> bytes:
    """Encrypt a single 16-byte block with AES-128."""
    return AES128().encrypt_block(key, block)


def aes128_decrypt(key: bytes, block: bytes) -> bytes:
    """Decrypt a single 16-byte block with AES-128."""
    return AES128().decrypt_block(key, block)
