"""DeepL adapter.

Implements TranslatorPort against the DeepL v2 translate endpoint.

API Documentation: https://developers.deepl.com/docs/api-reference/translate
"""

import logging

import httpx
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from domain.model.vocabulary import Vocabulary

logger = logging.getLogger(__name__)

DEEPL_FREE_API_URL = "https://api-free.deepl.com/v2/translate"
API_TIMEOUT_SECONDS = 5.0
SOURCE_LANG = "EN"
TARGET_LANG = "DE"


class DeepLTranslator:
    """Translator that sends single headwords to DeepL."""

    def __init__(self, api_key: str, api_url: str = DEEPL_FREE_API_URL, timeout: float = API_TIMEOUT_SECONDS):
        self.api_key = api_key
        self.api_url = api_url
        self.timeout = timeout

    def translate(self, vocab: Vocabulary) -> Vocabulary | None:
        """Translate ``vocab.headword``.

        Returns:
            The same entry with ``translation`` set, or None on error / empty result.
        """
        headers = {"Authorization": f"DeepL-Auth-Key {self.api_key}"}
        data = {"text": vocab.headword, "source_lang": SOURCE_LANG, "target_lang": TARGET_LANG}

        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = _post_with_retry(client, self.api_url, headers, data)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "DeepL API HTTP error",
                extra={"headword": vocab.headword, "status_code": e.response.status_code},
            )
            return None
        except httpx.RequestError as e:
            logger.warning(
                "DeepL API request error",
                extra={"headword": vocab.headword, "error_type": type(e).__name__},
            )
            return None
        except ValueError as e:
            logger.warning(
                "DeepL API returned invalid JSON",
                extra={"headword": vocab.headword, "error": str(e)},
            )
            return None

        gloss = _read_translation(payload)
        # DeepL echoes untranslatable input back unchanged.
        # Compared case-sensitively: "Hotel" is the German for "hotel".
        if not gloss or gloss == vocab.headword:
            logger.debug("DeepL returned no translation", extra={"headword": vocab.headword})
            return None

        vocab.translation = gloss
        logger.debug("DeepL translation successful", extra={"headword": vocab.headword, "translation": gloss})
        return vocab


# ── HTTP helpers ─────────────────────────────────────────────


@retry(
    retry=retry_if_exception_type((httpx.TimeoutException, httpx.ConnectError)),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=4),
    reraise=True,
)
def _post_with_retry(client: httpx.Client, url: str, headers: dict, data: dict) -> httpx.Response:
    """POST with automatic retry on transient failures."""
    return client.post(url, headers=headers, data=data)


def _read_translation(payload) -> str:
    if not isinstance(payload, dict):
        return ""
    translations = payload.get("translations") or []
    if not translations or not isinstance(translations[0], dict):
        return ""
    return (translations[0].get("text") or "").strip()
