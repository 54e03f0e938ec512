from __future__ import annotations

from typing import Optional

from google import genai  # type: ignore
from google.genai import types  # type: ignore

from ..core.config import settings

_GENAI_CLIENT: Optional[genai.Client] = None


def get_genai_client() -> Optional[genai.Client]:
    """Return a process-wide Gemini client with a hard HTTP timeout.

    Returns ``None`` when no API key is configured; callers must fall back.
    """
    global _GENAI_CLIENT
    api_key = (settings.GOOGLE_GENAI_API_KEY or "").strip()
    if not api_key:
        return None
    if _GENAI_CLIENT is None:
        _GENAI_CLIENT = genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(
                # Milliseconds; a slow model raises and the caller falls back.
                timeout=int(settings.GENAI_TIMEOUT_SECONDS * 1000),
            ),
        )
    return _GENAI_CLIENT


def reset_genai_client() -> None:
    global _GENAI_CLIENT
    _GENAI_CLIENT = None
