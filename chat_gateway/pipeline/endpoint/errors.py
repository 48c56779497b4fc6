from __future__ import annotations
from typing import Any, Dict, Optional

from chat_gateway.models.providers.base import TOOLS_ENDPOINT


class EndpointOptionError(Exception):
    """Terminal failure while building the endpoint option; reported to the client as-is."""
    error_code = "endpoint_option_error"
    status_code = 400
    default_text = "Error building endpoint option"

    def __init__(self, text: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.text = text or self.default_text
        self.details = details
        super().__init__(self.text)


class ParseError(EndpointOptionError):
    error_code = "parse_error"
    default_text = "Error parsing conversation"

class NoSpecSelected(EndpointOptionError):
    error_code = "no_spec_selected"
    default_text = "No model spec selected"

class InvalidSpec(EndpointOptionError):
    error_code = "invalid_spec"
    default_text = "Invalid model spec"

class SpecMismatch(EndpointOptionError):
    error_code = "spec_mismatch"
    default_text = "Model spec mismatch"

class ToolsNotAllowedForEndpoint(EndpointOptionError):
    error_code = "tools_not_allowed"
    default_text = f'Only the "{TOOLS_ENDPOINT.value}" endpoint can have tools defined in the preset'

#a catalog entry is broken, not the client input
class PresetParseError(EndpointOptionError):
    error_code = "preset_parse_error"
    status_code = 500
    default_text = "Error parsing model spec"

class UnknownProvider(EndpointOptionError):
    error_code = "unknown_provider"
    default_text = "Unknown endpoint"
