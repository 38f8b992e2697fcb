"""Tests for Caesar cipher engine."""

import pytest

from mpags_cipher.core.exceptions import InvalidKeyError
from mpags_cipher.models.schemas import CipherMode
from mpags_cipher.services.engines.monoalphabetic.caesar import CaesarEngine


class TestCaesarEngine:
    """Test suite for Caesar cipher engine."""

    @pytest.fixture
    def sample_plaintext(self):
        return "HELLOWORLD"

    @pytest.fixture
    def long_plaintext(self):
        return (
            "CRYPTOGRAPHYISTHESTUDYOFSECURECOMMUNICATIONINTHEPRESENCE"
            "OFADVERSARIESLONGBEFORECOMPUTERSEXISTEDPEOPLEINVENTEDCIPHERS"
        )

    def test_encrypt_decrypt_roundtrip(self, sample_plaintext):
        """Test that encrypt followed by decrypt returns original."""
        for shift in range(26):
            engine = CaesarEngine(str(shift))
            ciphertext = engine.encrypt(sample_plaintext)
            assert engine.decrypt(ciphertext) == sample_plaintext

    def test_encrypt_shift_3(self):
        """Test specific encryption with shift 3."""
        engine = CaesarEngine("3")
        assert engine.transform("HELLO", CipherMode.ENCRYPT) == "KHOOR"

    def test_decrypt_shift_3(self):
        """Test specific decryption with shift 3."""
        engine = CaesarEngine("3")
        assert engine.transform("KHOOR", CipherMode.DECRYPT) == "HELLO"

    def test_encrypt_shift_7(self):
        """Test specific encryption with shift 7."""
        assert CaesarEngine("7").encrypt("HELLO") == "OLSSV"

    def test_wraps_around_alphabet(self):
        """Shifts past Z continue from A and back."""
        engine = CaesarEngine("3")
        assert engine.encrypt("XYZ") == "ABC"
        assert engine.decrypt("ABC") == "XYZ"

    def test_letter_key(self):
        """A single letter names its alphabet position as the shift."""
        assert CaesarEngine("D").shift == 3
        assert CaesarEngine("d").shift == 3
        assert CaesarEngine("A").shift == 0
        assert CaesarEngine("Z").shift == 25
        assert CaesarEngine("D").encrypt("HELLO") == "KHOOR"

    def test_null_key_is_identity(self, long_plaintext):
        """An empty key leaves the text unchanged."""
        engine = CaesarEngine("")
        assert engine.shift == 0
        assert engine.encrypt(long_plaintext) == long_plaintext
        assert engine.decrypt(long_plaintext) == long_plaintext

    def test_non_alphabet_passes_through(self):
        """Characters outside A-Z are left as they are."""
        assert CaesarEngine("1").encrypt("A-B C") == "B-C D"

    def test_same_output_on_repeated_calls(self, long_plaintext):
        """Engine keeps no state between calls."""
        engine = CaesarEngine("11")
        assert engine.encrypt(long_plaintext) == engine.encrypt(long_plaintext)

    @pytest.mark.parametrize("key", ["26", "100", "-1", "abc", "3.5", "1 2", "²"])
    def test_invalid_keys_rejected(self, key):
        """Out-of-range or non-numeric keys fail at construction."""
        with pytest.raises(InvalidKeyError) as exc_info:
            CaesarEngine(key)

        assert exc_info.value.details["cipher_type"] == "caesar"
        assert exc_info.value.reason

    def test_explain(self):
        """Test explanation generation."""
        explanation = CaesarEngine("7").explain()

        assert "7" in explanation
        assert "shift" in explanation.lower()
