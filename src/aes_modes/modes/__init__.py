"""Modes of operation."""

from __future__ import annotations

from ..interfaces import BaseMode, ModeConfig
from ..primitive import BlockCipher
from ..randomness import RandomSource
from .ecb import ECBMode
from .cbc import CBCMode
from .ctr import CTRMode

# Registry of available modes
MODES: dict[str, type[BaseMode]] = {
    "ecb": ECBMode,
    "cbc": CBCMode,
    "ctr": CTRMode,
}


def get_mode(name: str) -> type[BaseMode]:
    """Get mode class by name.

    Args:
        name: Mode name (case-insensitive)

    Returns:
        Mode class

    Raises:
        KeyError: If mode not found
    """
    key = name.lower()
    if key not in MODES:
        available = ", ".join(MODES.keys())
        raise KeyError(f"Unknown mode '{name}'. Available: {available}")
    return MODES[key]


def list_modes() -> list[dict[str, str | bool]]:
    """List all available modes with descriptions.

    Returns:
        List of dicts with 'name', 'description' and 'secure' keys
    """
    result = []
    for name, cls in MODES.items():
        result.append({
            "name": name,
            "description": cls.description,
            "secure": cls.secure,
        })
    return result


def create_mode(
    config: ModeConfig,
    cipher: BlockCipher | None = None,
    rng: RandomSource | None = None,
) -> BaseMode:
    """Instantiate the mode named by ``config``."""
    return get_mode(config.mode)(cipher=cipher, rng=rng, config=config)


def encrypt(mode: str, plaintext: bytes, key: bytes) -> bytes:
    """Encrypt ``plaintext`` with AES-128 in the named mode."""
    return create_mode(ModeConfig(mode=mode)).encrypt(plaintext, key)


def decrypt(mode: str, ciphertext: bytes, key: bytes) -> bytes:
    """Decrypt ``ciphertext`` with AES-128 in the named mode."""
    return create_mode(ModeConfig(mode=mode)).decrypt(ciphertext, key)


__all__ = [
    "MODES",
    "get_mode",
    "list_modes",
    "create_mode",
    "encrypt",
    "decrypt",
    "ECBMode",
    "CBCMode",
    "CTRMode",
]
