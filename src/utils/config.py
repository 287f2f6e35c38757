"""Environment-driven settings.

Read once at import time; call ``load_dotenv()`` before importing this
module so values from a .env file are picked up.
"""

import os


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return int(value)


IGNORE_FILE_PATH = os.getenv('IGNORE_FILE_PATH', 'var/ignore.txt')
FILTER_IGNORED_WORDS = _env_bool('FILTER_IGNORED_WORDS', True)

# 0 disables the cap and retries until a translation is found
TRANSLATION_MAX_ATTEMPTS = _env_int('TRANSLATION_MAX_ATTEMPTS', 20)

TRANSLATOR_BACKEND = os.getenv('TRANSLATOR_BACKEND', 'litellm').strip().lower()
TRANSLATION_MODEL = os.getenv('TRANSLATION_MODEL', 'openai/gpt-4.1-mini')
DEEPL_API_KEY = os.getenv('DEEPL_API_KEY')
DEEPL_API_URL = os.getenv('DEEPL_API_URL', 'https://api-free.deepl.com/v2/translate')

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()


def max_translation_attempts() -> int | None:
    """Configured retry cap for random translated draws, None when unbounded."""
    return TRANSLATION_MAX_ATTEMPTS if TRANSLATION_MAX_ATTEMPTS > 0 else None
