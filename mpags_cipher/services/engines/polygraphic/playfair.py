from typing import ClassVar

from mpags_cipher.core.exceptions import InvalidKeyError
from mpags_cipher.models.schemas import CipherFamily, CipherMode, CipherType
from mpags_cipher.services.engines.base import CipherEngine
from mpags_cipher.services.engines.registry import EngineRegistry


@EngineRegistry.register
class PlayfairEngine(CipherEngine):
    """
    Playfair cipher engine.

    The Playfair cipher encrypts digraphs (pairs of letters) using a 5x5 key square.
    The alphabet is reduced to 25 letters (I and J are combined).

    Rules for encryption:
    1. Same row: replace each letter with the one to its right
    2. Same column: replace each letter with the one below
    3. Rectangle: swap corners horizontally

    Double letters are separated by an 'X' (e.g., "BALLOON" -> "BA LX LO ON"),
    or by a 'Q' when the doubled letter is itself 'X'. An odd-length text
    is padded with a trailing 'Z' ('X' if it already ends in 'Z').
    """

    name = "Playfair Cipher"
    cipher_type = CipherType.PLAYFAIR
    cipher_family = CipherFamily.POLYGRAPHIC
    description = (
        "A digraph substitution cipher using a 5x5 key square. "
        "Pairs of letters are encrypted together based on their positions "
        "in the square. I and J are treated as the same letter."
    )

    ALPHABET: ClassVar[str] = "ABCDEFGHIKLMNOPQRSTUVWXYZ"  # 25 letters, I=J
    SIZE: ClassVar[int] = 5

    def __init__(self, key: str = ""):
        super().__init__(key)
        self.keyword = self._parse_key(key)
        self.grid = self._build_key_square(self.keyword)
        self._positions = {
            letter: (row, col)
            for row, letters in enumerate(self.grid)
            for col, letter in enumerate(letters)
        }

    def transform(self, text: str, mode: CipherMode) -> str:
        """Apply the row, column and rectangle rules to every digraph."""
        step = 1 if mode == CipherMode.ENCRYPT else -1
        size = self.SIZE

        result = []
        for a, b in self._prepare_digraphs(text):
            row_a, col_a = self._positions[a]
            row_b, col_b = self._positions[b]

            if row_a == row_b:
                result.append(self.grid[row_a][(col_a + step) % size])
                result.append(self.grid[row_b][(col_b + step) % size])
            elif col_a == col_b:
                result.append(self.grid[(row_a + step) % size][col_a])
                result.append(self.grid[(row_b + step) % size][col_b])
            else:
                # Rectangle: swap columns
                result.append(self.grid[row_a][col_b])
                result.append(self.grid[row_b][col_a])

        return "".join(result)

    def explain(self) -> str:
        """Generate human-readable explanation."""
        square = "\n".join(" ".join(row) for row in self.grid)

        return (
            f"Playfair cipher with keyword '{self.keyword}'. "
            f"5x5 key square:\n{square}"
        )

    def _parse_key(self, key: str) -> str:
        """Parse key to upper-case letters with J merged into I."""
        if not all(c == " " or (c.isascii() and c.isalpha()) for c in key):
            raise InvalidKeyError(
                self.cipher_type.value, key, "key must contain only letters and spaces"
            )
        return key.replace(" ", "").upper().replace("J", "I")

    def _build_key_square(self, keyword: str) -> list[list[str]]:
        """Build the 5x5 key square from a keyword."""
        # Remove duplicates while preserving order, then add remaining letters
        key_letters = list(dict.fromkeys(keyword + self.ALPHABET))

        return [
            key_letters[row * self.SIZE:(row + 1) * self.SIZE]
            for row in range(self.SIZE)
        ]

    def _prepare_digraphs(self, text: str) -> list[tuple[str, str]]:
        """
        Split text into Playfair digraphs.

        - Convert to uppercase
        - Replace J with I
        - Insert X (or Q) between double letters
        - Pad with Z (or X) if odd length
        """
        text = text.upper().replace("J", "I")
        text = "".join(c for c in text if c in self._positions)

        result = []
        i = 0
        while i < len(text):
            first = text[i]
            if i + 1 >= len(text):
                result.append((first, "X" if first == "Z" else "Z"))
                i += 1
            elif text[i + 1] == first:
                result.append((first, "Q" if first == "X" else "X"))
                i += 1
            else:
                result.append((first, text[i + 1]))
                i += 2

        return result
