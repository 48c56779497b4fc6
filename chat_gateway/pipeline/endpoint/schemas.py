from __future__ import annotations
from typing import Any, Dict, List, Literal, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field

from chat_gateway.models.providers.base import EModelEndpoint


class Conversation(BaseModel):
    """Canonical conversation record shared by every provider family.

    Fields carry the client's wire names as aliases, so payloads parse as sent
    and ``compact()`` renders them back the same way.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore", protected_namespaces=())

    endpoint: str
    endpoint_type: Optional[str] = Field(None, alias="endpointType")
    spec: Optional[str] = None
    model: Optional[str] = None
    model_label: Optional[str] = Field(None, alias="modelLabel")
    prompt_prefix: Optional[str] = Field(None, alias="promptPrefix")
    icon_url: Optional[str] = Field(None, alias="iconURL")
    greeting: Optional[str] = None
    max_context_tokens: Optional[int] = Field(None, alias="maxContextTokens", gt=0)

    def compact(self) -> Dict[str, Any]:
        """Provider parameters the payload actually set, keyed by wire name.

        ``endpoint`` and ``endpointType`` are left out; builders receive them
        as separate arguments.
        """
        return self.model_dump(
            by_alias=True,
            exclude_unset=True,
            exclude_none=True,
            exclude={"endpoint", "endpoint_type"},
        )


class OpenAIConversation(Conversation):
    chat_gpt_label: Optional[str] = Field(None, alias="chatGptLabel")
    temperature: Optional[float] = Field(None, ge=0, le=2)
    top_p: Optional[float] = Field(None, ge=0, le=1)
    presence_penalty: Optional[float] = Field(None, ge=-2, le=2)
    frequency_penalty: Optional[float] = Field(None, ge=-2, le=2)
    max_tokens: Optional[int] = Field(None, gt=0)
    stop: Optional[List[str]] = None
    resend_files: Optional[bool] = Field(None, alias="resendFiles")
    image_detail: Optional[Literal["low", "auto", "high"]] = Field(None, alias="imageDetail")
    reasoning_effort: Optional[Literal["low", "medium", "high"]] = None


class GoogleConversation(Conversation):
    examples: Optional[List[Dict[str, Any]]] = None
    temperature: Optional[float] = Field(None, ge=0, le=2)
    max_output_tokens: Optional[int] = Field(None, alias="maxOutputTokens", gt=0)
    top_p: Optional[float] = Field(None, alias="topP", ge=0, le=1)
    top_k: Optional[int] = Field(None, alias="topK", ge=1, le=40)


class AnthropicConversation(Conversation):
    temperature: Optional[float] = Field(None, ge=0, le=1)
    max_output_tokens: Optional[int] = Field(None, alias="maxOutputTokens", gt=0)
    top_p: Optional[float] = Field(None, alias="topP", ge=0, le=1)
    top_k: Optional[int] = Field(None, alias="topK", ge=1, le=40)
    resend_files: Optional[bool] = Field(None, alias="resendFiles")
    prompt_cache: Optional[bool] = Field(None, alias="promptCache")


class BedrockConversation(Conversation):
    region: Optional[str] = None
    temperature: Optional[float] = Field(None, ge=0, le=1)
    max_tokens: Optional[int] = Field(None, alias="maxTokens", gt=0)
    top_p: Optional[float] = Field(None, alias="topP", ge=0, le=1)
    top_k: Optional[int] = Field(None, alias="topK", ge=1)
    resend_files: Optional[bool] = Field(None, alias="resendFiles")


class PluginsConversation(OpenAIConversation):
    tools: Optional[List[Union[str, Dict[str, Any]]]] = None
    agent_options: Optional[Dict[str, Any]] = Field(None, alias="agentOptions")


class AssistantsConversation(Conversation):
    assistant_id: Optional[str] = None
    instructions: Optional[str] = None
    append_current_datetime: Optional[bool] = None


class AgentsConversation(OpenAIConversation):
    agent_id: Optional[str] = None
    instructions: Optional[str] = None
    additional_instructions: Optional[str] = None


class GenericConversation(Conversation):
    #unrecognized providers keep whatever parameters were sent
    model_config = ConfigDict(extra="allow")


CONVERSATION_SCHEMAS: Dict[EModelEndpoint, Type[Conversation]] = {
    EModelEndpoint.OPENAI: OpenAIConversation,
    EModelEndpoint.AZURE_OPENAI: OpenAIConversation,
    EModelEndpoint.CUSTOM: OpenAIConversation,
    EModelEndpoint.GOOGLE: GoogleConversation,
    EModelEndpoint.ANTHROPIC: AnthropicConversation,
    EModelEndpoint.BEDROCK: BedrockConversation,
    EModelEndpoint.GPT_PLUGINS: PluginsConversation,
    EModelEndpoint.ASSISTANTS: AssistantsConversation,
    EModelEndpoint.AZURE_ASSISTANTS: AssistantsConversation,
    EModelEndpoint.AGENTS: AgentsConversation,
}
