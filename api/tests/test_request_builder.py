"""
Unit tests for chat request construction.
"""

import pytest

from verse_explorer.services.request_builder import (
    DEFAULT_MODEL,
    SYSTEM_PROMPT,
    build_chat_request,
)


class TestBuildChatRequest:
    @pytest.mark.parametrize("verse", ["John 3:16", "Romans 8:28", "Psalm 23"])
    def test_user_message_wraps_reference(self, verse):
        """The user message is the fixed prefix followed by the reference."""
        request = build_chat_request(verse, "test-key")
        assert request.messages[1].role == "user"
        assert request.messages[1].content == "Generate the analysis for: " + verse

    def test_system_message_first(self):
        request = build_chat_request("John 3:16", "test-key")
        assert [m.role for m in request.messages] == ["system", "user"]
        assert request.messages[0].content == SYSTEM_PROMPT

    def test_fixed_sampling_parameters(self):
        """Model parameters are policy constants, not derived from input."""
        request = build_chat_request("Genesis 1:1", "test-key")
        assert request.model == DEFAULT_MODEL
        assert request.temperature == 0.5
        assert request.max_tokens == 2048
        assert request.top_p == 1
        assert request.stop is None
        assert request.stream is False

    def test_model_override(self):
        request = build_chat_request("Genesis 1:1", "test-key", model="llama-3.1-8b-instant")
        assert request.model == "llama-3.1-8b-instant"

    def test_prompt_lists_every_key(self):
        for key in (
            "verse_reference",
            "verse_text",
            "context",
            "exegesis",
            "themes",
            "cross_references",
        ):
            assert f'"{key}"' in SYSTEM_PROMPT

    def test_no_validation_of_odd_input(self):
        """Odd input is passed through untouched to the model."""
        request = build_chat_request("  ???  ", "test-key")
        assert request.messages[1].content.endswith("  ???  ")


class TestCredentialHandling:
    def test_credential_not_in_body(self):
        request = build_chat_request("John 3:16", "secret-key")
        body = request.model_dump()
        assert "api_key" not in body
        assert "secret-key" not in request.model_dump_json()
        assert "secret-key" not in repr(request)

    def test_credential_retrievable_for_auth_header(self):
        request = build_chat_request("John 3:16", "secret-key")
        assert request.api_key.get_secret_value() == "secret-key"

    def test_body_matches_wire_schema(self):
        body = build_chat_request("John 3:16", "k").model_dump()
        assert set(body) == {
            "messages",
            "model",
            "temperature",
            "max_tokens",
            "top_p",
            "stop",
            "stream",
        }
        assert body["messages"][0] == {"role": "system", "content": SYSTEM_PROMPT}
