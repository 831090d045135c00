# backend/translator/deepl.py
from typing import Any, Dict

import httpx

from .logger import logger
from .schemas import DeepLRequest, DeepLResponse

INTERNAL_ERROR_MESSAGE = "Internal server error."


class TranslationError(Exception):
    """Ошибка, которую прокси отдает клиенту как {"message": ...} с указанным статусом."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def upstream_error_message(status_code: int, error_data: Dict[str, Any]) -> str:
    """Переводит статус ответа DeepL в понятное пользователю сообщение."""
    if status_code == 403:
        return "Authentication failed. Check your DeepL API key."
    if status_code == 400:
        return f"Bad request. Check parameters. {error_data.get('message') or ''}"
    if status_code == 429:
        return "Too many requests. Please wait."
    if status_code == 456:
        return "Quota exceeded. Check your DeepL plan limits."
    return "Translation failed."


def _error_body(response: httpx.Response) -> Dict[str, Any]:
    try:
        data = response.json()
    except ValueError:
        return {"message": response.text} if response.text else {}
    return data if isinstance(data, dict) else {}


class DeepLClient:
    def __init__(self, http: httpx.AsyncClient, api_url: str, api_key: str):
        self.http = http
        self.api_url = api_url
        self.api_key = api_key

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"DeepL-Auth-Key {self.api_key}",
            "Content-Type": "application/json",
        }

    async def translate(self, text: str, target_lang: str) -> str:
        """
        Отправляет один текст в DeepL и возвращает первый перевод.

        DeepL ожидает массив строк, поэтому текст оборачивается в список из
        одного элемента. Неуспешный ответ DeepL превращается в TranslationError
        с тем же статусом, любая другая ошибка - в 500.
        """
        payload = DeepLRequest(text=[text], target_lang=target_lang)

        try:
            response = await self.http.post(
                self.api_url,
                headers=self.headers,
                json=payload.model_dump(),
            )

            if not response.is_success:
                error_data = _error_body(response)
                logger.error(f"DeepL API Error: {response.status_code} {error_data}")
                raise TranslationError(
                    response.status_code,
                    upstream_error_message(response.status_code, error_data),
                )

            data = DeepLResponse.model_validate(response.json())
        except TranslationError:
            raise
        except Exception as e:
            logger.error(f"Internal Server Error: {e}", exc_info=True)
            raise TranslationError(500, INTERNAL_ERROR_MESSAGE) from e

        return data.translations[0].text
