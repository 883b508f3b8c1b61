"""Tests for provider adapters and the adapter factory."""

import pytest

from application.services.chat.context import ConversationContext, Role, WindowMessage
from application.services.chat.providers import (
    CohereAdapter,
    DispatchMode,
    HuggingFaceAdapter,
    OpenAIAdapter,
    ProviderConfig,
    ProviderId,
    create_provider_adapter,
)
from common.exception import ProviderResponseError


@pytest.fixture
def context():
    return ConversationContext(
        window=(
            WindowMessage(role=Role.USER, content="Hi"),
            WindowMessage(role=Role.ASSISTANT, content="Hello!"),
        ),
        preamble="You are Nandu.",
        message="What do you design?",
    )


class TestFactory:
    """Test create_provider_adapter."""

    @pytest.mark.parametrize(
        "provider, adapter_class",
        [("huggingface", HuggingFaceAdapter), ("COHERE", CohereAdapter), (ProviderId.OPENAI, OpenAIAdapter)],
    )
    def test_known_providers(self, provider, adapter_class):
        assert isinstance(create_provider_adapter(provider), adapter_class)

    def test_unknown_provider_rejected(self):
        with pytest.raises(ValueError, match="Unsupported provider"):
            create_provider_adapter("anthropic")

    def test_options_are_passed_through(self):
        adapter = create_provider_adapter("cohere", max_tokens=42)

        assert adapter.max_tokens == 42


class TestHeaders:
    """Auth headers depend on the dispatch mode."""

    def test_direct_mode_sends_bearer(self):
        config = ProviderConfig(ProviderId.OPENAI, "https://openai.test", DispatchMode.DIRECT, "sk")

        headers = OpenAIAdapter().headers_for(config)

        assert headers["Authorization"] == "Bearer sk"

    def test_relayed_mode_sends_no_auth(self):
        config = ProviderConfig(ProviderId.COHERE, "https://relay.test/api/chat", DispatchMode.RELAYED)

        headers = CohereAdapter().headers_for(config)

        assert "Authorization" not in headers
        assert headers["Content-Type"] == "application/json"


class TestCohereAdapter:
    """Test CohereAdapter."""

    def test_payload(self, context):
        payload = CohereAdapter().build_payload(context, "command-r-08-2024")

        assert payload["message"] == "What do you design?"
        assert payload["chat_history"] == [
            {"role": "USER", "message": "Hi"},
            {"role": "CHATBOT", "message": "Hello!"},
        ]
        assert payload["preamble"] == "You are Nandu."
        assert payload["model"] == "command-r-08-2024"
        assert payload["max_tokens"] == 150

    def test_extract_text(self):
        assert CohereAdapter().extract_text(200, {"text": "  Interfaces.  "}) == "Interfaces."

    def test_error_status_uses_provider_message(self):
        with pytest.raises(ProviderResponseError, match="was removed") as exc_info:
            CohereAdapter().extract_text(404, {"message": "model 'command' was removed"})

        assert exc_info.value.status_code == 404

    def test_missing_text_is_a_failure(self):
        with pytest.raises(ProviderResponseError, match="Unexpected response format"):
            CohereAdapter().extract_text(200, {"generation_id": "x"})

    def test_non_string_text_is_a_failure(self):
        with pytest.raises(ProviderResponseError, match="Unexpected response format"):
            CohereAdapter().extract_text(200, {"text": {"content": "hi"}})


class TestHuggingFaceAdapter:
    """Test HuggingFaceAdapter."""

    def test_direct_url_includes_model(self):
        config = ProviderConfig(ProviderId.HUGGINGFACE, "https://hf.test/models/", DispatchMode.DIRECT, "hf")

        url = HuggingFaceAdapter().url_for(config, "microsoft/DialoGPT-medium")

        assert url == "https://hf.test/models/microsoft/DialoGPT-medium"

    def test_prompt_is_a_transcript(self, context):
        prompt = HuggingFaceAdapter().build_payload(context, "m")["inputs"]

        assert prompt.startswith("You are Nandu.")
        assert "User: Hi\nNandu: Hello!\nUser: What do you design?\nNandu:" in prompt

    def test_extract_generated_text(self):
        assert HuggingFaceAdapter().extract_text(200, [{"generated_text": " Hi! "}]) == "Hi!"

    def test_non_string_generated_text_is_a_failure(self):
        with pytest.raises(ProviderResponseError, match="Unexpected response format"):
            HuggingFaceAdapter().extract_text(200, [{"generated_text": {"text": "hi"}}])

    def test_error_payload_raises(self):
        with pytest.raises(ProviderResponseError, match="loading"):
            HuggingFaceAdapter().extract_text(200, {"error": "Model is loading"})

    def test_unknown_shape_returns_excerpt(self):
        text = HuggingFaceAdapter().extract_text(200, {"answer": "x" * 500})

        assert len(text) == 150
        assert text.startswith('{"answer":"xxx')


class TestOpenAIAdapter:
    """Test OpenAIAdapter."""

    def test_payload_messages(self, context):
        payload = OpenAIAdapter().build_payload(context, "gpt-3.5-turbo")

        assert payload["messages"] == [
            {"role": "system", "content": "You are Nandu."},
            {"role": "user", "content": "Hi"},
            {"role": "assistant", "content": "Hello!"},
            {"role": "user", "content": "What do you design?"},
        ]

    def test_extract_text(self):
        payload = {"choices": [{"message": {"content": " Products. "}}]}

        assert OpenAIAdapter().extract_text(200, payload) == "Products."

    def test_missing_choices_is_a_failure(self):
        with pytest.raises(ProviderResponseError):
            OpenAIAdapter().extract_text(200, {"choices": []})
