from typing import Any


class CipherError(Exception):
    """Base exception for all cipher errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidKeyError(CipherError):
    """Raised when a key cannot be turned into a valid cipher state."""

    def __init__(self, cipher_type: str, key: str, reason: str):
        super().__init__(
            f"{cipher_type} key {key!r} is invalid: {reason}",
            {"cipher_type": cipher_type, "key": key, "reason": reason},
        )
        self.reason = reason


class UnknownCipherError(CipherError):
    """Raised when requested cipher is not registered."""

    def __init__(self, cipher_name: str):
        super().__init__(
            f"Cipher '{cipher_name}' not found",
            {"cipher_name": cipher_name},
        )


class PipelineConfigError(CipherError):
    """Raised when the requested pipeline cannot be assembled."""

    pass


class TextTooLongError(PipelineConfigError):
    """Raised when input text exceeds maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Text length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )


class TimeoutExceededError(CipherError):
    """Raised when a parallel stage does not finish within its deadline."""

    def __init__(self, stage: str, timeout: float):
        super().__init__(
            f"Stage '{stage}' timed out after {timeout}s",
            {"stage": stage, "timeout": timeout},
        )
