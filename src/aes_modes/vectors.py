"""Known-answer vectors and golden checks against PyCryptodome."""

from __future__ import annotations

from Crypto.Cipher import AES
from Crypto.Util import Counter

# FIPS-197 Appendix C.1 plus common single-block vectors for AES-128
FIPS_197_TEST_VECTORS = [
    {
        "key": bytes.fromhex("000102030405060708090a0b0c0d0e0f"),
        "plaintext": bytes.fromhex("00112233445566778899aabbccddeeff"),
        "ciphertext": bytes.fromhex("69c4e0d86a7b0430d8cdb78070b4c55a"),
    },
    {
        "key": bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c"),
        "plaintext": bytes.fromhex("3243f6a8885a308d313198a2e0370734"),
        "ciphertext": bytes.fromhex("3925841d02dc09fbdc118597196a0b32"),
    },
    {
        "key": bytes.fromhex("00000000000000000000000000000000"),
        "plaintext": bytes.fromhex("00000000000000000000000000000000"),
        "ciphertext": bytes.fromhex("66e94bd4ef8a2c3b884cfa59ca342b2e"),
    },
    {
        "key": bytes.fromhex("ffffffffffffffffffffffffffffffff"),
        "plaintext": bytes.fromhex("ffffffffffffffffffffffffffffffff"),
        "ciphertext": bytes.fromhex("bcbf217cb280cf30b2517052193ab979"),
    },
]

# NIST SP 800-38A, F.1.1 / F.2.1 (AES-128). The vectors carry no padding,
# so only the first four output blocks are comparable.
SP800_38A_KEY = bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c")
SP800_38A_PLAINTEXT = bytes.fromhex(
    "6bc1bee22e409f96e93d7e117393172a"
    "ae2d8a571e03ac9c9eb76fac45af8e51"
    "30c81c46a35ce411e5fbc1191a0a52ef"
    "f69f2445df4f9b17ad2b417be66c3710"
)
SP800_38A_ECB_CIPHERTEXT = bytes.fromhex(
    "3ad77bb40d7a3660a89ecaf32466ef97"
    "f5d3d58503b9699de785895a96fdbaaf"
    "43b1cd7f598ece23881b00e3ed030688"
    "7b0c785e27e8ad3f8223207104725dd4"
)
SP800_38A_CBC_IV = bytes.fromhex("000102030405060708090a0b0c0d0e0f")
SP800_38A_CBC_CIPHERTEXT = bytes.fromhex(
    "7649abac8119b246cee98e9b12e9197d"
    "5086cb9b507219ee95db113a917678b2"
    "73bed6b8e3c1743b7116e69e22229516"
    "3ff1caa1681fac09120eca307586e1a7"
)


def golden_ctr_body(key: bytes, nonce: bytes, plaintext: bytes) -> bytes:
    """CTR body (without nonce) computed by PyCryptodome.

    Uses a 64-bit little-endian counter starting at 0 behind the 8-byte
    nonce, the same counter block layout as :class:`aes_modes.modes.CTRMode`.
    """
    counter = Counter.new(64, prefix=nonce, initial_value=0, little_endian=True)
    return AES.new(key, AES.MODE_CTR, counter=counter).encrypt(plaintext)


def golden_cbc_body(key: bytes, iv: bytes, padded: bytes) -> bytes:
    """CBC body (without IV) computed by PyCryptodome on padded data."""
    return AES.new(key, AES.MODE_CBC, iv=iv).encrypt(padded)


def validate_against_golden(expected: bytes, candidate: bytes) -> tuple[bool, str]:
    """Compare a candidate output with the golden one.

    Returns:
        Tuple of (is_correct, error_detail)
    """
    if candidate == expected:
        return True, ""
    return False, (
        f"Mismatch: expected {expected.hex()}, "
        f"got {candidate.hex()}"
    )
