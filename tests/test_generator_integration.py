"""Integration tests for ReplyGenerator with the real Gemini API."""

import os

import pytest
from dotenv import load_dotenv

from src.generator import GenerationRequest, ReplyGenerator, ReplyMode

# Load environment variables
load_dotenv()

requires_api_key = pytest.mark.skipif(
    not os.getenv("GEMINI_API_KEY"),
    reason="GEMINI_API_KEY not set",
)


@pytest.mark.integration
class TestGeminiIntegration:
    """Tests that require actual Gemini API access."""

    @pytest.fixture
    def generator(self):
        """Create a ReplyGenerator with a real Gemini connection."""
        return ReplyGenerator()

    @pytest.fixture
    def meeting_request(self):
        return GenerationRequest(
            subject="Design review moved to Thursday",
            body="""Hi team,

The design review planned for Tuesday is moved to Thursday 2pm because
the client needs more time to gather feedback. Please confirm you can attend.

Thanks,
Priya""",
            tone="friendly",
        )

    @requires_api_key
    def test_generate_replies(self, generator, meeting_request):
        result = generator.generate_replies(meeting_request)

        assert result.summary
        assert len(result.summary) <= 200
        assert len(result.replies) == 3
        assert all(reply.strip() for reply in result.replies)

    @requires_api_key
    def test_regenerate(self, generator, meeting_request):
        result = generator.generate_replies(meeting_request, regenerate=True)
        assert len(result.replies) == 3

    @requires_api_key
    def test_generate_single_reply_in_other_language(self, generator):
        request = GenerationRequest(
            subject="Factura pendiente",
            body="Hola, ¿podrías confirmar si recibiste la factura de marzo?",
            language="es",
            mode=ReplyMode.SINGLE,
        )
        result = generator.generate(request)

        assert result.summary
        assert result.reply

    @requires_api_key
    def test_check_connection(self, generator):
        result = generator.check_connection()
        assert result.reply
