"""Polyalphabetic cipher engines."""

from mpags_cipher.services.engines.polyalphabetic.vigenere import VigenereEngine

__all__ = [
    "VigenereEngine",
]
