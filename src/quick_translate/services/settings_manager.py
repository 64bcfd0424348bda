"""Settings Manager - Handles endpoint, credentials and default language configuration."""

import logging
import os
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

from quick_translate.core import (
    DEFAULT_SOURCE_LANGUAGE,
    DEFAULT_TARGET_LANGUAGE,
    is_supported_language,
)
from quick_translate.services.translation.mymemory_translation_service import (
    DEFAULT_ENDPOINT,
    DEFAULT_TIMEOUT,
)

logger = logging.getLogger(__name__)


class SettingsManager:
    """
    Manages application settings.

    Reads values from a .env file in the project root, falling back to the
    process environment and then to built-in defaults.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_endpoint(self) -> str:
        """Get the translation endpoint URL."""
        return self._get("QUICK_TRANSLATE_ENDPOINT") or DEFAULT_ENDPOINT

    def get_timeout(self) -> float:
        """Get the request timeout in seconds."""
        raw = self._get("QUICK_TRANSLATE_TIMEOUT")
        if raw is None:
            return DEFAULT_TIMEOUT
        try:
            timeout = float(raw)
        except ValueError:
            logger.warning("Ignoring invalid QUICK_TRANSLATE_TIMEOUT=%r", raw)
            return DEFAULT_TIMEOUT
        if timeout <= 0:
            logger.warning("Ignoring non-positive QUICK_TRANSLATE_TIMEOUT=%r", raw)
            return DEFAULT_TIMEOUT
        return timeout

    def get_contact_email(self) -> Optional[str]:
        """Get the optional MyMemory contact email."""
        return self._get("MYMEMORY_EMAIL")

    def get_api_key(self) -> Optional[str]:
        """Get the optional MyMemory API key."""
        return self._get("MYMEMORY_API_KEY")

    def get_default_languages(self) -> Tuple[str, str]:
        """Get the initial (source, target) language pair."""
        return (
            self._get_language("QUICK_TRANSLATE_SOURCE_LANG", DEFAULT_SOURCE_LANGUAGE),
            self._get_language("QUICK_TRANSLATE_TARGET_LANG", DEFAULT_TARGET_LANGUAGE),
        )

    def get_log_level(self) -> str:
        """Get the logging level name."""
        return (self._get("LOG_LEVEL") or "INFO").upper()

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

    def _get_language(self, name: str, default: str) -> str:
        code = self._get(name)
        if code is None:
            return default
        code = code.lower()
        if not is_supported_language(code):
            logger.warning("Ignoring unsupported %s=%r", name, code)
            return default
        return code

    @staticmethod
    def _get(name: str) -> Optional[str]:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None
