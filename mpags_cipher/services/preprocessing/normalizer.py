import string
from collections import Counter
from dataclasses import dataclass, field
from typing import ClassVar

DIGIT_WORDS: dict[str, str] = {
    "0": "ZERO",
    "1": "ONE",
    "2": "TWO",
    "3": "THREE",
    "4": "FOUR",
    "5": "FIVE",
    "6": "SIX",
    "7": "SEVEN",
    "8": "EIGHT",
    "9": "NINE",
}


def transform_char(char: str) -> str:
    """
    Normalize a single input character.

    Letters are upper-cased, digits are spelled out in English and
    anything else is dropped (empty string).
    """
    if char in string.ascii_letters:
        return char.upper()
    return DIGIT_WORDS.get(char, "")


@dataclass
class NormalizedText:
    """Result of text normalization."""

    text: str
    original: str
    removed_chars: dict[str, int] = field(default_factory=dict)


class TextNormalizer:
    """
    Normalizes raw input text into the cipher alphabet (A-Z).

    Handles:
    - Case conversion
    - Digit transliteration (7 -> SEVEN)
    - Removal of whitespace, punctuation and non-ASCII letters
    """

    ALPHABET: ClassVar[str] = string.ascii_uppercase

    def normalize(self, text: str) -> str:
        """
        Normalize text for encryption or decryption.

        Args:
            text: Raw input text

        Returns:
            Normalized text string
        """
        return "".join(transform_char(char) for char in text)

    def normalize_full(self, text: str) -> NormalizedText:
        """
        Normalize text and return detailed result.

        Args:
            text: Raw input text

        Returns:
            NormalizedText with counts of the characters that were dropped
        """
        removed = Counter(char for char in text if not transform_char(char))

        return NormalizedText(
            text=self.normalize(text),
            original=text,
            removed_chars=dict(removed),
        )
