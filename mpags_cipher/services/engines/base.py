from abc import ABC, abstractmethod

from mpags_cipher.models.schemas import CipherFamily, CipherMode, CipherType


class CipherEngine(ABC):
    """
    Abstract base class for all cipher engines.

    An engine is constructed from a raw key string. Construction is the
    only place a key is validated: a key that cannot produce a valid
    cipher state raises InvalidKeyError from __init__, so every engine
    instance that exists can transform any normalized text.

    Each cipher implementation must provide:
    - transform(): Encrypt or decrypt a normalized text
    - explain(): Describe the key state in human-readable form

    Engines keep no state between calls; transforming the same text twice
    with the same mode gives the same output.
    """

    # Cipher metadata
    name: str
    cipher_type: CipherType
    cipher_family: CipherFamily
    description: str

    # Whether transform() may be applied to contiguous chunks of a text
    # independently and the results concatenated.
    chunk_local: bool = False

    def __init__(self, key: str = ""):
        self.raw_key = key

    @abstractmethod
    def transform(self, text: str, mode: CipherMode) -> str:
        """
        Apply the cipher to a normalized text.

        Args:
            text: Upper-case letters produced by the normalizer
            mode: Whether to encrypt or decrypt

        Returns:
            The transformed text
        """
        pass

    @abstractmethod
    def explain(self) -> str:
        """
        Generate human-readable description of the key state.

        Returns:
            Explanation string
        """
        pass

    def encrypt(self, plaintext: str) -> str:
        """Encrypt plaintext with this engine's key."""
        return self.transform(plaintext, CipherMode.ENCRYPT)

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt ciphertext with this engine's key."""
        return self.transform(ciphertext, CipherMode.DECRYPT)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.raw_key!r})"
