"""Core interfaces and configuration for the modes of operation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .primitive import AES128, BlockCipher
from .randomness import RandomSource

MODE_NAMES = ("ecb", "cbc", "ctr")


@dataclass
class ModeConfig:
    """Configuration shared by all modes.

    Passed to mode constructors and filled from CLI options.
    """

    # Mode of operation name
    mode: str = "cbc"

    # Raise PaddingError on inconsistent padding instead of returning
    # the buffer unchanged
    strict_padding: bool = False

    # Seed for a reproducible RandomSource (tests and demos only)
    seed: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        self.mode = self.mode.lower()
        if self.mode not in MODE_NAMES:
            raise ValueError(f"Unknown mode: {self.mode}")

    def create_rng(self) -> RandomSource:
        """Random source matching ``seed``."""
        return RandomSource(seed=self.seed)


class BaseMode(ABC):
    """Abstract base class for modes of operation.

    A mode turns a single-block cipher into a transform over byte strings of
    any length. Instances hold no per-message state, so one instance can
    encrypt any number of messages.
    """

    # Class attributes to be overridden by subclasses
    name: str = "base"
    description: str = "Base mode (abstract)"
    secure: bool = True

    def __init__(
        self,
        cipher: BlockCipher | None = None,
        rng: RandomSource | None = None,
        config: ModeConfig | None = None,
    ):
        self.cipher = cipher or AES128()
        self.config = config or ModeConfig(mode=self.name)
        if self.config.mode != self.name:
            raise ValueError(
                f"Config is for mode {self.config.mode!r}, not {self.name!r}"
            )
        self.rng = rng or self.config.create_rng()

    @property
    def block_size(self) -> int:
        return self.cipher.block_size

    @abstractmethod
    def encrypt(self, plaintext: bytes, key: bytes) -> bytes:
        """Encrypt a byte string of any length.

        Args:
            plaintext: Bytes to encrypt, possibly empty
            key: Key for the block cipher

        Returns:
            Ciphertext in the mode's wire layout
        """
        raise NotImplementedError

    @abstractmethod
    def decrypt(self, ciphertext: bytes, key: bytes) -> bytes:
        """Decrypt ciphertext produced by :meth:`encrypt`."""
        raise NotImplementedError

    @abstractmethod
    def ciphertext_length(self, plaintext_length: int) -> int:
        """Length of the ciphertext produced for a plaintext of this length."""
        raise NotImplementedError

    def validate_key(self, key: bytes) -> None:
        """Validate key size."""
        if len(key) != self.cipher.key_size:
            raise ValueError(f"Key must be {self.cipher.key_size} bytes, got {len(key)}")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, cipher={self.cipher.name!r})"
