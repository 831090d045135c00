# backend/translator/routers/translate.py
from fastapi import APIRouter, Depends, Request, status
from pydantic import ValidationError
import httpx

from ..config import Settings, get_settings
from ..deepl import DeepLClient, TranslationError
from ..schemas import ErrorResponse, TranslationRequest, TranslationResponse
from ..logger import logger

router = APIRouter(prefix="/api/translate", tags=["translate"])


async def get_http_client(settings: Settings = Depends(get_settings)):
    async with httpx.AsyncClient(timeout=settings.deepl_timeout, follow_redirects=True) as client:
        yield client


@router.post(
    "",
    response_model=TranslationResponse,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        456: {"model": ErrorResponse, "description": "DeepL quota exceeded"},
        500: {"model": ErrorResponse},
    },
)
async def translate_text(
        request: Request,
        settings: Settings = Depends(get_settings),
        http: httpx.AsyncClient = Depends(get_http_client),
):
    """
    Переводит текст через DeepL. Ключ API остается на сервере.
    """
    if not settings.is_configured:
        logger.error("DEEPL_API_KEY or DEEPL_API_URL is not set.")
        raise TranslationError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Server configuration error: API key or URL not set.",
        )

    try:
        body = TranslationRequest.model_validate(await request.json())
    except (ValueError, ValidationError):
        raise TranslationError(
            status.HTTP_400_BAD_REQUEST,
            "Bad request: 'text' and 'targetLang' are required.",
        )

    logger.info(f"Translating text to '{body.target_lang}': '{body.text[:30]}...'")
    client = DeepLClient(http, settings.deepl_api_url, settings.deepl_api_key)
    translation = await client.translate(body.text, body.target_lang)
    logger.info(f"Translation successful. Result: '{translation[:30]}...'")

    return TranslationResponse(translation=translation)
