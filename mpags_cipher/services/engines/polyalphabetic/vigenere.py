import string
from typing import ClassVar

from mpags_cipher.core.exceptions import InvalidKeyError
from mpags_cipher.models.schemas import CipherFamily, CipherMode, CipherType
from mpags_cipher.services.engines.base import CipherEngine
from mpags_cipher.services.engines.registry import EngineRegistry


@EngineRegistry.register
class VigenereEngine(CipherEngine):
    """
    Vigenère cipher engine.

    A polyalphabetic substitution cipher that uses a keyword to determine
    the shift for each letter. Each letter of the keyword represents a
    different Caesar shift applied in sequence.

    The key position is counted over the whole text, so a Vigenère stage
    cannot be split into independently processed chunks.
    """

    name = "Vigenère Cipher"
    cipher_type = CipherType.VIGENERE
    cipher_family = CipherFamily.POLYALPHABETIC
    description = (
        "A polyalphabetic cipher where each letter is shifted by a different amount "
        "based on a repeating keyword. More secure than Caesar but vulnerable to "
        "Kasiski examination and frequency analysis per key position."
    )

    ALPHABET: ClassVar[str] = string.ascii_uppercase

    def __init__(self, key: str = ""):
        super().__init__(key)
        self.keyword = self._parse_key(key)
        self.shifts = [self.ALPHABET.index(c) for c in self.keyword]

    def transform(self, text: str, mode: CipherMode) -> str:
        """Shift the i-th letter by the i-th key letter (cycling)."""
        sign = 1 if mode == CipherMode.ENCRYPT else -1
        size = len(self.ALPHABET)
        period = len(self.shifts)

        result = []
        key_idx = 0

        for char in text:
            idx = self.ALPHABET.find(char)
            if idx < 0:
                result.append(char)
                continue

            shift = self.shifts[key_idx % period]
            result.append(self.ALPHABET[(idx + sign * shift) % size])
            key_idx += 1

        return "".join(result)

    def explain(self) -> str:
        """Generate human-readable explanation."""
        shift_desc = ", ".join(
            f"{letter}={shift}" for letter, shift in zip(self.keyword, self.shifts)
        )

        return (
            f"Vigenère cipher with keyword '{self.keyword}' (length {len(self.keyword)}). "
            f"Letter shifts: {shift_desc}."
        )

    def _parse_key(self, key: str) -> str:
        """Parse key to an upper-case keyword."""
        keyword = key.strip().upper()

        if not keyword:
            raise InvalidKeyError(self.cipher_type.value, key, "key must not be empty")

        if not all(c in self.ALPHABET for c in keyword):
            raise InvalidKeyError(
                self.cipher_type.value, key, "key must contain only letters A-Z"
            )

        return keyword
