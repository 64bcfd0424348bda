"""MyMemory Translation Service - Implements translation via the MyMemory web API."""

import json
import logging
from typing import Any, Dict, Optional

import httpx

from quick_translate.core import ErrorKind, TranslationRequest
from quick_translate.services.translation.translation_service import TranslationResult, TranslationService

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://api.mymemory.translated.net/get"
DEFAULT_TIMEOUT = 15.0


def decode_translation_response(body: bytes) -> TranslationResult:
    """
    Interpret a MyMemory response body.

    The expected shape is {"responseData": {"translatedText": str | null}}.
    """
    if not body or not body.strip():
        return TranslationResult.failure(ErrorKind.EMPTY_RESPONSE, "No data received")

    try:
        payload = json.loads(body)
    except ValueError as e:
        return TranslationResult.failure(ErrorKind.DECODE_ERROR, f"Failed to decode response: {e}")

    if not isinstance(payload, dict):
        return TranslationResult.failure(
            ErrorKind.DECODE_ERROR, "Failed to decode response: expected a JSON object"
        )

    response_data = payload.get("responseData")
    if not isinstance(response_data, dict):
        return TranslationResult.failure(
            ErrorKind.DECODE_ERROR, "Failed to decode response: missing responseData object"
        )

    translated_text = response_data.get("translatedText")
    if translated_text is None:
        return TranslationResult.failure(ErrorKind.TRANSLATION_UNAVAILABLE, "Translation failed")
    if not isinstance(translated_text, str):
        return TranslationResult.failure(
            ErrorKind.DECODE_ERROR, "Failed to decode response: translatedText is not a string"
        )

    # MyMemory reports quota and invalid language pair errors in-band
    status = payload.get("responseStatus")
    if status is not None and str(status) != "200":
        details = payload.get("responseDetails") or translated_text
        return TranslationResult.failure(
            ErrorKind.TRANSLATION_UNAVAILABLE, f"Translation failed: {details}"
        )

    return TranslationResult.success(translated_text)


class MyMemoryTranslationService(TranslationService):
    """
    Translation service using the keyless MyMemory API.

    Anonymous use is rate limited; a contact email or API key raises the quota.
    """

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float = DEFAULT_TIMEOUT,
        contact_email: Optional[str] = None,
        api_key: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.endpoint = endpoint
        self.timeout = timeout
        self.contact_email = contact_email
        self.api_key = api_key
        self._transport = transport

    def build_params(self, request: TranslationRequest) -> Dict[str, Any]:
        """Build the query string parameters for a request."""
        params = {"q": request.source_text, "langpair": request.langpair}
        if self.contact_email:
            params["de"] = self.contact_email
        if self.api_key:
            params["key"] = self.api_key
        return params

    def translate(self, request: TranslationRequest) -> TranslationResult:
        """
        Translate text with a single GET request, following redirects.

        The timeout applies to each phase of the request (connect, write,
        each read, pool wait), not to the request as a whole.

        Args:
            request: Text and language pair to translate.

        Returns:
            TranslationResult with translated text or error kind and message.
        """
        logger.info("Requesting translation %s (%d chars)", request.langpair, len(request.source_text))

        try:
            with httpx.Client(
                timeout=self.timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = client.get(
                    self.endpoint,
                    params=self.build_params(request),
                    headers={"Accept": "application/json"},
                )
                response.raise_for_status()
        except httpx.TimeoutException as e:
            logger.warning("Translation request timed out: %s", e)
            return TranslationResult.failure(
                ErrorKind.TIMEOUT, f"Request timed out after {self.timeout:g} seconds"
            )
        except httpx.HTTPStatusError as e:
            logger.warning("Translation endpoint returned HTTP %d", e.response.status_code)
            return TranslationResult.failure(
                ErrorKind.NETWORK_ERROR,
                f"Network error: server returned HTTP {e.response.status_code}",
            )
        except httpx.HTTPError as e:
            logger.warning("Translation request failed: %s", e)
            return TranslationResult.failure(ErrorKind.NETWORK_ERROR, f"Network error: {e}")

        return decode_translation_response(response.content)
