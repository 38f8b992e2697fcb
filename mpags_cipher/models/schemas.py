from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


# ============================================================================
# Enums
# ============================================================================


class CipherFamily(str, Enum):
    """Supported cipher families."""

    MONOALPHABETIC = "monoalphabetic"
    POLYALPHABETIC = "polyalphabetic"
    POLYGRAPHIC = "polygraphic"


class CipherType(str, Enum):
    """Specific cipher types."""

    CAESAR = "caesar"
    PLAYFAIR = "playfair"
    VIGENERE = "vigenere"


class CipherMode(str, Enum):
    """Direction in which every stage of a pipeline is applied."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


# ============================================================================
# Pipeline Schemas
# ============================================================================


class CipherSpec(BaseModel):
    """One stage of a pipeline: a cipher kind and its raw key."""

    cipher_type: CipherType
    key: str = ""


class CipherInfo(BaseModel):
    """Description of a registered cipher."""

    cipher_type: CipherType
    cipher_family: CipherFamily
    name: str
    description: str


# ============================================================================
# Request Schemas
# ============================================================================


class TransformRequest(BaseModel):
    """Request schema for /encrypt and /decrypt endpoints."""

    text: str = Field(min_length=1)
    ciphers: list[CipherSpec] = Field(
        default_factory=lambda: [CipherSpec(cipher_type=CipherType.CAESAR)],
        min_length=1,
    )


# ============================================================================
# Response Schemas
# ============================================================================


class TransformResponse(BaseModel):
    """Response schema for /encrypt and /decrypt endpoints."""

    text: str
    mode: CipherMode
    ciphers: list[CipherSpec]
    normalized_length: int
    stages: list[str]


class CipherListResponse(BaseModel):
    """Response schema for /ciphers endpoint."""

    items: list[CipherInfo]
    total: int


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
