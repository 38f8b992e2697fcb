from fastapi import APIRouter, HTTPException, status

from mpags_cipher.core.exceptions import UnknownCipherError
from mpags_cipher.dependencies import RegistryDep
from mpags_cipher.models.schemas import CipherInfo, CipherListResponse, ErrorResponse

router = APIRouter()


@router.get(
    "",
    response_model=CipherListResponse,
    summary="List ciphers",
    description="List every cipher that can be used as a pipeline stage.",
)
async def list_ciphers(registry: RegistryDep) -> CipherListResponse:
    """List registered ciphers."""
    items = registry.describe()
    return CipherListResponse(items=items, total=len(items))


@router.get(
    "/{cipher_name}",
    response_model=CipherInfo,
    responses={
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Describe cipher",
)
async def get_cipher(cipher_name: str, registry: RegistryDep) -> CipherInfo:
    """Describe a single registered cipher."""
    try:
        cipher_type = registry.resolve_type(cipher_name)
    except UnknownCipherError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

    for info in registry.describe():
        if info.cipher_type == cipher_type:
            return info

    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Cipher '{cipher_name}' not found",
    )
