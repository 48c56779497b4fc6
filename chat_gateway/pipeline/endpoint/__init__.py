"""Endpoint option stage: parse, enforce model specs, dispatch, enrich."""

from .errors import (
    EndpointOptionError,
    InvalidSpec,
    NoSpecSelected,
    ParseError,
    PresetParseError,
    SpecMismatch,
    ToolsNotAllowedForEndpoint,
    UnknownProvider,
)
from .pipeline import EndpointOptionPipeline
from .types import EndpointOption, ModelsCatalog

__all__ = [
    "EndpointOption",
    "EndpointOptionError",
    "EndpointOptionPipeline",
    "InvalidSpec",
    "ModelsCatalog",
    "NoSpecSelected",
    "ParseError",
    "PresetParseError",
    "SpecMismatch",
    "ToolsNotAllowedForEndpoint",
    "UnknownProvider",
]
