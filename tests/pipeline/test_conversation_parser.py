import pytest

from chat_gateway.pipeline.endpoint.parser import ConversationParseError, parse_compact_convo
from chat_gateway.pipeline.endpoint.schemas import (
    AnthropicConversation,
    GenericConversation,
    GoogleConversation,
    OpenAIConversation,
    PluginsConversation,
)


class TestParseCompactConvo:
    """Test suite for conversation normalization"""

    def test_picks_schema_by_endpoint(self):
        convo = parse_compact_convo("anthropic", None, {"model": "claude-3-5-haiku-latest", "temperature": 0.5})

        assert isinstance(convo, AnthropicConversation)
        assert convo.endpoint == "anthropic"
        assert convo.endpoint_type is None
        assert convo.temperature == 0.5

    def test_endpoint_type_overrides_schema(self):
        """
        Test: Custom endpoints parse with the OpenAI schema
        How: Parse a conversation for an operator-named endpoint with endpointType=custom
        Ensures: The protocol identifier, not the display name, selects the schema
        """
        convo = parse_compact_convo("ollama", "custom", {"model": "llama3.1:8b", "top_p": 0.9})

        assert isinstance(convo, OpenAIConversation)
        assert convo.endpoint == "ollama"
        assert convo.endpoint_type == "custom"
        assert convo.top_p == 0.9

    def test_aliases_and_unknown_keys(self):
        convo = parse_compact_convo(
            "openAI",
            None,
            {
                "endpoint": "ignored",
                "modelLabel": "Helper",
                "promptPrefix": "Be brief.",
                "maxContextTokens": 8000,
                "text": "hello",
                "conversationId": "abc",
                "files": [{"file_id": "f1"}],
            },
        )

        assert convo.endpoint == "openAI"
        assert convo.model_label == "Helper"
        assert convo.prompt_prefix == "Be brief."
        assert convo.max_context_tokens == 8000
        assert convo.compact() == {
            "modelLabel": "Helper",
            "promptPrefix": "Be brief.",
            "maxContextTokens": 8000,
        }

    def test_compact_skips_unset_fields(self):
        convo = parse_compact_convo("google", None, {"model": "gemini-1.5-pro", "topK": 20})

        assert isinstance(convo, GoogleConversation)
        assert convo.compact() == {"model": "gemini-1.5-pro", "topK": 20}

    def test_keeps_spec(self):
        convo = parse_compact_convo("openAI", None, {"spec": "fast-chat", "temperature": 0.9})
        assert convo.spec == "fast-chat"

    @pytest.mark.parametrize("endpoint,payload", [
        ("openAI", {"temperature": 3}),
        ("openAI", {"temperature": "hot"}),
        ("anthropic", {"temperature": 1.5}),
        ("google", {"topK": 50}),
        ("openAI", {"imageDetail": "ultra"}),
        ("openAI", {"spec": {"name": "x"}}),
    ])
    def test_invalid_values_raise(self, endpoint, payload):
        with pytest.raises(ConversationParseError):
            parse_compact_convo(endpoint, None, payload)

    def test_missing_endpoint_raises(self):
        with pytest.raises(ConversationParseError):
            parse_compact_convo(None, None, {"model": "gpt-4o"})

    def test_non_mapping_raises(self):
        with pytest.raises(ConversationParseError):
            parse_compact_convo("openAI", None, ["not", "a", "dict"])

    def test_plugins_schema_accepts_tools(self):
        convo = parse_compact_convo("gptPlugins", None, {"tools": ["calculator", {"pluginKey": "web-search"}]})

        assert isinstance(convo, PluginsConversation)
        assert convo.tools == ["calculator", {"pluginKey": "web-search"}]

    def test_unrecognized_endpoint_parses_leniently(self):
        convo = parse_compact_convo("mystery", None, {"model": "m1", "weird_param": 3})

        assert isinstance(convo, GenericConversation)
        assert convo.compact() == {"model": "m1", "weird_param": 3}
