import logging
from typing import Type

from mpags_cipher.core.exceptions import UnknownCipherError
from mpags_cipher.models.schemas import CipherInfo, CipherType
from mpags_cipher.services.engines.base import CipherEngine

logger = logging.getLogger(__name__)


class EngineRegistry:
    """
    Registry and factory for cipher engines.

    Manages available cipher engines and builds keyed instances of them.
    """

    _engines: dict[CipherType, Type[CipherEngine]] = {}

    @classmethod
    def register(cls, engine_class: Type[CipherEngine]) -> Type[CipherEngine]:
        """
        Register a cipher engine class.

        Can be used as a decorator:
            @EngineRegistry.register
            class CaesarEngine(CipherEngine):
                ...

        Args:
            engine_class: The engine class to register

        Returns:
            The engine class (for decorator usage)
        """
        cls._engines[engine_class.cipher_type] = engine_class
        return engine_class

    @classmethod
    def resolve_type(cls, cipher_type: CipherType | str) -> CipherType:
        """
        Turn a cipher name into a registered cipher type.

        Raises:
            UnknownCipherError: If the name is not a registered cipher
        """
        if not isinstance(cipher_type, CipherType):
            try:
                cipher_type = CipherType(str(cipher_type).strip().lower())
            except ValueError:
                raise UnknownCipherError(str(cipher_type)) from None

        if cipher_type not in cls._engines:
            raise UnknownCipherError(cipher_type.value)

        return cipher_type

    def make_cipher(self, cipher_type: CipherType | str, key: str = "") -> CipherEngine:
        """
        Construct a cipher of the given kind from a raw key.

        Args:
            cipher_type: The type (or name) of cipher
            key: Raw key string, validated by the engine

        Returns:
            Engine instance ready to transform text

        Raises:
            UnknownCipherError: If the cipher is not registered
            InvalidKeyError: If the key is not valid for the cipher
        """
        resolved = self.resolve_type(cipher_type)
        engine = self._engines[resolved](key)
        logger.debug("Constructed %r", engine)
        return engine

    def describe(self) -> list[CipherInfo]:
        """Describe every registered engine."""
        return [
            CipherInfo(
                cipher_type=engine_class.cipher_type,
                cipher_family=engine_class.cipher_family,
                name=engine_class.name,
                description=engine_class.description,
            )
            for engine_class in self._engines.values()
        ]


# Import engines to trigger registration
def _load_engines() -> None:
    """Load all engine modules to trigger registration."""
    from mpags_cipher.services.engines.monoalphabetic import caesar  # noqa: F401
    from mpags_cipher.services.engines.polyalphabetic import vigenere  # noqa: F401
    from mpags_cipher.services.engines.polygraphic import playfair  # noqa: F401


# Load engines when module is imported
_load_engines()
