"""Tests for LLMProvider."""

from unittest.mock import AsyncMock, Mock, patch

import pytest

from chatbridge.responder import LLMProvider


class TestLLMProviderInit:
    """Tests for LLMProvider initialization."""

    def test_init_with_api_key(self, monkeypatch):
        """Test initialization with API key."""
        monkeypatch.setenv("ANTHROPIC_API_KEY", "test_key")

        with patch("chatbridge.responder.llm_provider.anthropic.AsyncAnthropic"):
            provider = LLMProvider()
            assert provider is not None

    def test_init_without_api_key(self, monkeypatch):
        """Test initialization without API key raises error."""
        monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)

        with patch("chatbridge.responder.llm_provider.anthropic.AsyncAnthropic"):
            with pytest.raises(ValueError):
                LLMProvider()


class TestLLMProviderComplete:
    """Tests for LLMProvider.complete() method."""

    @pytest.mark.asyncio
    async def test_complete_returns_response(self, monkeypatch):
        """Test that complete() returns LLM response."""
        monkeypatch.setenv("ANTHROPIC_API_KEY", "test_key")

        mock_client = Mock()
        mock_response = Mock()
        mock_response.content = [Mock(text="Test response")]
        mock_client.messages.create = AsyncMock(return_value=mock_response)

        with patch(
            "chatbridge.responder.llm_provider.anthropic.AsyncAnthropic",
            return_value=mock_client,
        ):
            provider = LLMProvider(model="test-model")
            response = await provider.complete(
                messages=[{"role": "user", "content": "Hello"}],
                system="Be brief",
                max_tokens=256,
            )

            assert response == "Test response"
            call_args = mock_client.messages.create.call_args
            assert call_args.kwargs["model"] == "test-model"
            assert call_args.kwargs["system"] == "Be brief"
            assert call_args.kwargs["max_tokens"] == 256

    @pytest.mark.asyncio
    async def test_complete_omits_empty_system(self, monkeypatch):
        """Test that no system prompt is sent when none is given."""
        monkeypatch.setenv("ANTHROPIC_API_KEY", "test_key")

        mock_client = Mock()
        mock_response = Mock()
        mock_response.content = [Mock(text="ok")]
        mock_client.messages.create = AsyncMock(return_value=mock_response)

        with patch(
            "chatbridge.responder.llm_provider.anthropic.AsyncAnthropic",
            return_value=mock_client,
        ):
            provider = LLMProvider()
            await provider.complete(messages=[{"role": "user", "content": "Hi"}])

            call_args = mock_client.messages.create.call_args
            assert "system" not in call_args.kwargs
            assert call_args.kwargs["max_tokens"] == 1024

    @pytest.mark.asyncio
    async def test_complete_wraps_errors(self, monkeypatch):
        """Test that API errors are re-raised as RuntimeError."""
        monkeypatch.setenv("ANTHROPIC_API_KEY", "test_key")

        mock_client = Mock()
        mock_client.messages.create = AsyncMock(side_effect=Exception("API Error"))

        with patch(
            "chatbridge.responder.llm_provider.anthropic.AsyncAnthropic",
            return_value=mock_client,
        ):
            provider = LLMProvider()

            with pytest.raises(RuntimeError, match="API Error"):
                await provider.complete(messages=[{"role": "user", "content": "T"}])
