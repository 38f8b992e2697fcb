import string
from typing import ClassVar

from mpags_cipher.core.exceptions import InvalidKeyError
from mpags_cipher.models.schemas import CipherFamily, CipherMode, CipherType
from mpags_cipher.services.engines.base import CipherEngine
from mpags_cipher.services.engines.registry import EngineRegistry


@EngineRegistry.register
class CaesarEngine(CipherEngine):
    """
    Caesar cipher engine.

    The Caesar cipher is a simple substitution cipher that shifts each letter
    by a fixed amount. The key is either a shift in [0, 26) or a single
    letter naming the shift (A=0 ... Z=25). An empty key is the null key,
    which leaves the text unchanged.
    """

    name = "Caesar Cipher"
    cipher_type = CipherType.CAESAR
    cipher_family = CipherFamily.MONOALPHABETIC
    description = (
        "A substitution cipher where each letter is shifted by a fixed amount. "
        "Named after Julius Caesar who used it for military communications."
    )

    # Each output character depends only on the input character at the
    # same position, so the text can be split anywhere.
    chunk_local = True

    ALPHABET: ClassVar[str] = string.ascii_uppercase

    def __init__(self, key: str = ""):
        super().__init__(key)
        self.shift = self._parse_key(key)
        self._tables = {
            CipherMode.ENCRYPT: self._build_table(self.shift),
            CipherMode.DECRYPT: self._build_table(-self.shift),
        }

    def transform(self, text: str, mode: CipherMode) -> str:
        """Shift every letter forward (encrypt) or back (decrypt)."""
        # Characters outside the alphabet are left as they are
        return text.translate(self._tables[mode])

    def explain(self) -> str:
        """Generate human-readable explanation."""
        return (
            f"Caesar cipher with shift of {self.shift}. "
            f"Each letter is moved {self.shift} positions along the alphabet."
        )

    def _parse_key(self, key: str) -> int:
        """Parse key to integer shift value."""
        key = key.strip()
        if not key:
            return 0

        if len(key) == 1 and key.upper() in self.ALPHABET:
            return self.ALPHABET.index(key.upper())

        if not (key.isascii() and key.isdigit()):
            raise InvalidKeyError(
                self.cipher_type.value, key,
                "must be a number from 0 to 25 or a single letter",
            )

        shift = int(key)
        if shift >= len(self.ALPHABET):
            raise InvalidKeyError(
                self.cipher_type.value, key,
                f"shift must be less than {len(self.ALPHABET)}",
            )

        return shift

    def _build_table(self, shift: int) -> dict[int, int]:
        """Build a str.translate table for the given shift."""
        size = len(self.ALPHABET)
        return str.maketrans(
            self.ALPHABET,
            "".join(self.ALPHABET[(i + shift) % size] for i in range(size)),
        )
