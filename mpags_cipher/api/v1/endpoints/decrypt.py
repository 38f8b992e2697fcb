from fastapi import APIRouter, HTTPException, status

from mpags_cipher.core.exceptions import (
    InvalidKeyError,
    PipelineConfigError,
    TimeoutExceededError,
    UnknownCipherError,
)
from mpags_cipher.dependencies import SettingsDep
from mpags_cipher.models.schemas import CipherMode, ErrorResponse, TransformRequest, TransformResponse
from mpags_cipher.services.pipeline.executor import process_text

router = APIRouter()


@router.post(
    "",
    response_model=TransformResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input or key"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
        504: {"model": ErrorResponse, "description": "Parallel stage timed out"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt ciphertext by undoing a sequence of classical ciphers, last cipher first.",
)
def decrypt_ciphertext(
    request: TransformRequest,
    settings: SettingsDep,
) -> TransformResponse:
    """
    Decrypt ciphertext with a pipeline of ciphers.

    The text is normalized (upper-cased, digits spelled out, everything
    else dropped) before the first cipher sees it.
    """
    try:
        result = process_text(request.text, request.ciphers, CipherMode.DECRYPT, settings)
    except UnknownCipherError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except (InvalidKeyError, PipelineConfigError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except TimeoutExceededError as e:
        raise HTTPException(status_code=status.HTTP_504_GATEWAY_TIMEOUT, detail=e.message)

    return TransformResponse(
        text=result.text,
        mode=result.mode,
        ciphers=request.ciphers,
        normalized_length=result.input_length,
        stages=[stage.cipher_type for stage in result.stages],
    )
