"""Tests for ChatClient and ChatSession."""

import asyncio
import random
from unittest.mock import AsyncMock, patch

import pytest

from application.services.chat.client import ChatSession, ReplySource, create_chat_client
from application.services.chat.config import ChatClientConfig
from application.services.chat.context import Role
from application.services.chat.fallback import KNOWLEDGE_BASE, KeywordResponder
from application.services.chat.providers import DispatchMode, ProviderId
from common.exception import ConversationBusyError

RELAY_URL = "https://relay.test/api/chat"


def relayed_client(**overrides):
    config = ChatClientConfig(relay_url=RELAY_URL, origin_host="example.com", **overrides)
    return create_chat_client(config, responder=KeywordResponder(rng=random.Random(1)))


@pytest.fixture
def mock_http():
    with patch("application.services.chat.client.httpx.AsyncClient") as mock_client_class:
        mock_client = AsyncMock()
        mock_client_class.return_value.__aenter__.return_value = mock_client
        yield mock_client


class TestClientConstruction:
    """Provider selection happens once at construction."""

    def test_public_origin_is_relayed_even_with_credentials(self):
        client = relayed_client(credentials={"cohere": "co-key"})

        assert client.provider_config.auth_mode is DispatchMode.RELAYED
        assert client.provider_config.endpoint == RELAY_URL
        assert client.provider_config.provider_id is ProviderId.COHERE

    def test_local_origin_with_credential_is_direct(self):
        client = create_chat_client(
            ChatClientConfig(credentials={"openai": "sk"}, origin_host="localhost")
        )

        assert client.provider_config.auth_mode is DispatchMode.DIRECT
        assert client.provider_config.provider_id is ProviderId.OPENAI
        assert client.models == ("gpt-3.5-turbo",)

    def test_model_override(self):
        client = relayed_client(models={ProviderId.COHERE: ["only-model"]})

        assert client.models == ("only-model",)

    def test_from_env(self):
        config = ChatClientConfig.from_env(
            {"COHERE_API_KEY": " co ", "OPENAI_API_KEY": "", "CHAT_RELAY_URL": RELAY_URL}
        )

        assert config.credentials == {ProviderId.COHERE: "co"}
        assert config.relay_url == RELAY_URL
        assert config.trusted_context is True


class TestSend:
    """Test ChatClient.send."""

    @pytest.mark.asyncio
    async def test_relayed_request_has_no_auth_header(self, mock_http, make_response):
        mock_http.post = AsyncMock(return_value=make_response(200, {"text": "I design products."}))
        client = relayed_client(credentials={"cohere": "co-key"})
        session = client.new_session()

        reply = await client.send(session, "  What do you do?  ")

        assert reply.text == "I design products."
        assert reply.source is ReplySource.AI
        assert reply.model == "command-r-08-2024"

        call = mock_http.post.call_args
        assert call.args[0] == RELAY_URL
        assert "Authorization" not in call.kwargs["headers"]
        assert call.kwargs["json"]["message"] == "What do you do?"
        assert call.kwargs["json"]["chat_history"] == []

        assert [m.role for m in session.history] == [Role.USER, Role.ASSISTANT]
        assert session.history[0].text == "What do you do?"

    @pytest.mark.asyncio
    async def test_history_window_excludes_new_message(self, mock_http, make_response):
        mock_http.post = AsyncMock(
            side_effect=[make_response(200, {"text": "one"}), make_response(200, {"text": "two"})]
        )
        client = relayed_client()
        session = client.new_session()

        await client.send(session, "first")
        await client.send(session, "second")

        second_payload = mock_http.post.call_args_list[1].kwargs["json"]
        assert second_payload["chat_history"] == [
            {"role": "USER", "message": "first"},
            {"role": "CHATBOT", "message": "one"},
        ]
        assert second_payload["message"] == "second"

    @pytest.mark.asyncio
    async def test_cascade_walks_removed_models(self, mock_http, make_response):
        removed = make_response(404, {"message": "model was removed"})
        mock_http.post = AsyncMock(
            side_effect=[removed, removed, make_response(200, {"text": "third time lucky"})]
        )
        client = relayed_client(models={ProviderId.COHERE: ["A", "B", "C"]})

        reply = await client.send(client.new_session(), "hello")

        assert reply.text == "third time lucky"
        assert reply.model == "C"
        assert [c.kwargs["json"]["model"] for c in mock_http.post.call_args_list] == ["A", "B", "C"]

    @pytest.mark.asyncio
    async def test_all_models_failing_falls_back_to_keywords(self, mock_http, make_response):
        mock_http.post = AsyncMock(return_value=make_response(500, {"message": "down"}))
        client = relayed_client()
        session = client.new_session()

        reply = await client.send(session, "hello")

        assert reply.source is ReplySource.FALLBACK
        assert reply.text in KNOWLEDGE_BASE["greetings"]
        assert session.history[-1].text == reply.text

    @pytest.mark.asyncio
    async def test_ai_disabled_never_calls_provider(self, mock_http):
        client = relayed_client(ai_enabled=False)

        reply = await client.send(client.new_session(), "what tools do you use")

        assert reply.source is ReplySource.FALLBACK
        assert reply.text in KNOWLEDGE_BASE["skills"]
        mock_http.post.assert_not_called()

    @pytest.mark.asyncio
    async def test_empty_message_rejected(self, mock_http):
        client = relayed_client()
        session = client.new_session()

        with pytest.raises(ValueError):
            await client.send(session, "   ")

        assert session.history == ()
        assert session.is_pending is False

    @pytest.mark.asyncio
    async def test_second_send_while_pending_is_rejected(self, mock_http, make_response):
        release = asyncio.Event()

        async def slow_post(*args, **kwargs):
            await release.wait()
            return make_response(200, {"text": "done"})

        mock_http.post = AsyncMock(side_effect=slow_post)
        client = relayed_client()
        session = client.new_session()

        first = asyncio.create_task(client.send(session, "first"))
        await asyncio.sleep(0)
        assert session.is_pending is True

        with pytest.raises(ConversationBusyError):
            await client.send(session, "second")

        release.set()
        reply = await first
        assert reply.text == "done"
        assert session.is_pending is False
        assert len(session.history) == 2


def test_reset_clears_history():
    session = ChatSession()
    with session.reply_guard():
        with pytest.raises(ConversationBusyError):
            session.reset()
    session.reset()

    assert session.history == ()
