"""LiteLLM adapter — implements TranslatorPort with a provider-agnostic LLM call."""

import logging

import litellm
from litellm import completion

from domain.model.vocabulary import Vocabulary

# Suppress LiteLLM's verbose logging (proxy server warnings, etc.)
litellm.suppress_debug_info = True
logging.getLogger("LiteLLM").setLevel(logging.CRITICAL)

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "openai/gpt-4.1-mini"
NO_TRANSLATION = "-"

SYSTEM_PROMPT = (
    "You are an English-German dictionary. "
    "Reply with the most common German translation of the given English word, "
    "nothing else. Nouns carry their article (der/die/das). "
    f"If the input is not an English word, reply with {NO_TRANSLATION}"
)


def build_messages(headword: str) -> list[dict[str, str]]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": headword},
    ]


def clean_gloss(content: str) -> str:
    """Reduce a model reply to a bare gloss (first line, no quotes or final period)."""
    lines = content.strip().splitlines()
    if not lines:
        return ""
    gloss = lines[0].strip()
    previous = None
    # replies may wrap the period inside or outside the quotes
    while gloss != previous:
        previous = gloss
        gloss = gloss.rstrip('.').strip().strip('"\'“”„').strip()
    return "" if gloss == NO_TRANSLATION else gloss


class LiteLLMTranslator:
    """Translator that asks an LLM for a one-word German gloss."""

    def __init__(self, model: str = DEFAULT_MODEL, timeout: float = 30.0):
        self.model = model
        self.timeout = timeout

    def translate(self, vocab: Vocabulary) -> Vocabulary | None:
        """Translate ``vocab.headword``; provider failures count as a miss."""
        try:
            response = completion(
                model=self.model,
                messages=build_messages(vocab.headword),
                timeout=self.timeout,
                temperature=0,
                max_tokens=20,
            )
        except litellm.Timeout:
            logger.warning("LLM translation timed out", extra={"headword": vocab.headword, "model": self.model})
            return None
        except (litellm.AuthenticationError, litellm.RateLimitError) as e:
            logger.error(
                "LLM provider rejected translation request",
                extra={"headword": vocab.headword, "model": self.model, "error_type": type(e).__name__},
            )
            return None
        except litellm.APIError as e:
            logger.warning(
                "LLM translation failed",
                extra={"headword": vocab.headword, "model": self.model, "error": str(e)[:200]},
            )
            return None
        except Exception as e:
            logger.error(
                "Unexpected error calling LLM",
                extra={"headword": vocab.headword, "model": self.model, "error": str(e)},
                exc_info=True,
            )
            return None

        content = ""
        if response.choices:
            message = response.choices[0].message
            if message and message.content:
                content = message.content

        gloss = clean_gloss(content)
        if not gloss:
            logger.debug("LLM returned no translation", extra={"headword": vocab.headword})
            return None

        vocab.translation = gloss
        logger.debug("LLM translation successful", extra={"headword": vocab.headword, "translation": gloss})
        return vocab
