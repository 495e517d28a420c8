"""Tests for the AES-128 block primitive."""

import secrets

import pytest
from Crypto.Cipher import AES

from aes_modes.primitive import AES128, BlockCipher, aes128_encrypt, aes128_decrypt
from aes_modes.vectors import FIPS_197_TEST_VECTORS


class TestAES128:
    """Tests for the PyCryptodome-backed primitive."""

    @pytest.fixture
    def cipher(self) -> AES128:
        return AES128()

    def test_fips_197_appendix_c1(self, cipher: AES128) -> None:
        """Test FIPS-197 Appendix C.1 AES-128 test vector."""
        key = bytes.fromhex("000102030405060708090a0b0c0d0e0f")
        plaintext = bytes.fromhex("00112233445566778899aabbccddeeff")
        expected = bytes.fromhex("69c4e0d86a7b0430d8cdb78070b4c55a")

        assert cipher.encrypt_block(key, plaintext) == expected
        assert cipher.decrypt_block(key, expected) == plaintext

    @pytest.mark.parametrize("vec", FIPS_197_TEST_VECTORS)
    def test_fips_197_all_vectors(self, cipher: AES128, vec: dict) -> None:
        """Test all known single-block vectors in both directions."""
        assert cipher.encrypt_block(vec["key"], vec["plaintext"]) == vec["ciphertext"]
        assert cipher.decrypt_block(vec["key"], vec["ciphertext"]) == vec["plaintext"]

    def test_invalid_key_length(self, cipher: AES128) -> None:
        """Test that invalid key length raises ValueError."""
        with pytest.raises(ValueError, match="Key must be 16 bytes"):
            cipher.encrypt_block(bytes(15), bytes(16))

        with pytest.raises(ValueError, match="Key must be 16 bytes"):
            cipher.decrypt_block(bytes(17), bytes(16))

    def test_invalid_block_length(self, cipher: AES128) -> None:
        """Test that invalid block length raises ValueError."""
        with pytest.raises(ValueError, match="Block must be 16 bytes"):
            cipher.encrypt_block(bytes(16), bytes(15))

        with pytest.raises(ValueError, match="Block must be 16 bytes"):
            cipher.decrypt_block(bytes(16), bytes(32))

    def test_random_blocks_invert(self, cipher: AES128) -> None:
        """Decrypt undoes encrypt for random keys and blocks."""
        for _ in range(50):
            key = secrets.token_bytes(16)
            block = secrets.token_bytes(16)
            assert cipher.decrypt_block(key, cipher.encrypt_block(key, block)) == block

    def test_module_helpers_match_pycryptodome(self) -> None:
        """Verify the helper functions match direct PyCryptodome usage."""
        key = bytes(range(16))
        block = bytes(range(16, 32))

        expected = AES.new(key, AES.MODE_ECB).encrypt(block)
        assert aes128_encrypt(key, block) == expected
        assert aes128_decrypt(key, expected) == block

    def test_is_block_cipher(self, cipher: AES128) -> None:
        assert isinstance(cipher, BlockCipher)
        assert cipher.block_size == 16
        assert cipher.key_size == 16
        assert "aes128" in repr(cipher)


class TestBlockCipherInterface:
    """Tests for the abstract interface."""

    def test_cannot_instantiate_abstract(self) -> None:
        with pytest.raises(TypeError):
            BlockCipher()
