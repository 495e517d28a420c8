"""Block cipher modes of operation (ECB, CBC, CTR) over AES-128.

ECB is included to show why it must not be used. CBC and CTR are only as
secure as the uniqueness of their IVs / nonces under a key, which this
package draws at random but does not track.
"""

__version__ = "0.1.0"

BLOCK_SIZE = 16
KEY_SIZE = 16
NONCE_SIZE = 8

from .errors import ModeError, BlockLengthError, TruncatedCiphertextError, PaddingError
from .primitive import BlockCipher, AES128
from .padding import pad, unpad
from .blocking import group, ungroup
from .randomness import RandomSource, FixedRandomSource
from .interfaces import ModeConfig, BaseMode
from .modes import ECBMode, CBCMode, CTRMode, get_mode, encrypt, decrypt

__all__ = [
    "BLOCK_SIZE",
    "KEY_SIZE",
    "NONCE_SIZE",
    "ModeError",
    "BlockLengthError",
    "TruncatedCiphertextError",
    "PaddingError",
    "BlockCipher",
    "AES128",
    "pad",
    "unpad",
    "group",
    "ungroup",
    "RandomSource",
    "FixedRandomSource",
    "ModeConfig",
    "BaseMode",
    "ECBMode",
    "CBCMode",
    "CTRMode",
    "get_mode",
    "encrypt",
    "decrypt",
]
