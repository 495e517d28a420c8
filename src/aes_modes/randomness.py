"""Random IV / nonce source with usage accounting."""

from __future__ import annotations

import secrets
from typing import Any

from . import BLOCK_SIZE, NONCE_SIZE

CATEGORIES = ("iv", "nonce", "other")


class RandomSource:
    """Supplies IVs and nonces to the chained and counter modes.

    Unseeded sources draw from :mod:`secrets`. A seeded source is
    reproducible, which is what tests need, and must never encrypt real data.

    Neither variant remembers earlier output: keeping (key, IV) and
    (key, nonce) pairs unique is the caller's job.
    """

    def __init__(self, seed: int | None = None):
        """Initialize random source.

        Args:
            seed: Optional seed for deterministic output
        """
        self._seed = seed
        self._rng = self._create_rng(seed)

        # Tracking
        self._bytes_used: dict[str, int] = {}
        self._draws: dict[str, int] = {}
        self.reset()

    def _create_rng(self, seed: int | None) -> _SeededRNG | None:
        """Create the seeded generator, or None to use secrets."""
        if seed is None:
            return None
        return _SeededRNG(seed)

    def reset(self) -> None:
        """Reset usage counters (and rewind a seeded generator)."""
        self._bytes_used = {k: 0 for k in CATEGORIES}
        self._draws = {k: 0 for k in CATEGORIES}
        if self._seed is not None:
            self._rng = self._create_rng(self._seed)

    @property
    def seeded(self) -> bool:
        """True when output is reproducible (not suitable for real keys)."""
        return self._seed is not None

    @property
    def total_bytes(self) -> int:
        """Total random bytes handed out."""
        return sum(self._bytes_used.values())

    @property
    def bytes_breakdown(self) -> dict[str, int]:
        """Get bytes breakdown by category."""
        return self._bytes_used.copy()

    @property
    def draws_breakdown(self) -> dict[str, int]:
        """Get number of draws by category."""
        return self._draws.copy()

    def get_bytes(self, count: int, category: str = "other") -> bytes:
        """Get random bytes and track usage.

        Args:
            count: Number of bytes to generate
            category: Category for tracking

        Returns:
            Random bytes
        """
        if category not in self._bytes_used:
            category = "other"

        self._bytes_used[category] += count
        self._draws[category] += 1

        if self._rng is None:
            return secrets.token_bytes(count)
        return self._rng.get_bytes(count)

    def new_iv(self) -> bytes:
        """Fresh one-block initialization vector for CBC."""
        return self.get_bytes(BLOCK_SIZE, "iv")

    def new_nonce(self) -> bytes:
        """Fresh half-block nonce for CTR."""
        return self.get_bytes(NONCE_SIZE, "nonce")

    def get_summary(self) -> dict[str, Any]:
        """Get summary of randomness usage."""
        return {
            "seed": self._seed,
            "total_bytes": self.total_bytes,
            "bytes_breakdown": self.bytes_breakdown,
            "draws_breakdown": self.draws_breakdown,
        }


class FixedRandomSource(RandomSource):
    """Random source returning caller-chosen IV / nonce values.

    Used to reproduce known-answer ciphertexts. Every call returns the same
    value, which is exactly the reuse the modes warn about.
    """

    def __init__(self, iv: bytes | None = None, nonce: bytes | None = None):
        if iv is not None and len(iv) != BLOCK_SIZE:
            raise ValueError(f"IV must be {BLOCK_SIZE} bytes, got {len(iv)}")
        if nonce is not None and len(nonce) != NONCE_SIZE:
            raise ValueError(f"Nonce must be {NONCE_SIZE} bytes, got {len(nonce)}")
        self._iv = iv
        self._nonce = nonce
        super().__init__(seed=0)

    def new_iv(self) -> bytes:
        if self._iv is None:
            raise ValueError("FixedRandomSource has no IV configured")
        self._bytes_used["iv"] += BLOCK_SIZE
        self._draws["iv"] += 1
        return self._iv

    def new_nonce(self) -> bytes:
        if self._nonce is None:
            raise ValueError("FixedRandomSource has no nonce configured")
        self._bytes_used["nonce"] += NONCE_SIZE
        self._draws["nonce"] += 1
        return self._nonce


class _SeededRNG:
    """Simple seeded PRNG for reproducibility.

    Uses a linear congruential generator (LCG) for simplicity.
    NOT cryptographically secure - for testing/reproducibility only.
    """

    def __init__(self, seed: int):
        self._state = seed & 0xFFFFFFFFFFFFFFFF
        self._a = 6364136223846793005
        self._c = 1442695040888963407
        self._m = 2**64

    def _next(self) -> int:
        """Generate next random value."""
        self._state = (self._a * self._state + self._c) % self._m
        return self._state

    def get_bytes(self, count: int) -> bytes:
        """Generate random bytes."""
        result = bytearray(count)
        for i in range(count):
            # High byte: the low bits of a power-of-two LCG have short periods
            result[i] = self._next() >> 56
        return bytes(result)
