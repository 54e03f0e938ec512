from pathlib import Path
from dotenv import load_dotenv
import pytest

# Load environment variables for tests
load_dotenv(Path(__file__).resolve().parents[1] / '.env.test')

from studio_quotes.core.config import settings  # noqa: E402
from studio_quotes.services import genai_client  # noqa: E402


@pytest.fixture(autouse=True)
def no_genai_key(monkeypatch):
    """Run every test without a Gemini key unless a test opts in."""
    monkeypatch.setattr(settings, "GOOGLE_GENAI_API_KEY", "")
    genai_client.reset_genai_client()
    yield
    genai_client.reset_genai_client()
