from __future__ import annotations
from collections import Counter
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Union
import logging
import os

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parents[2] / "config" / "config.yaml"


class ConfigError(ValueError): ...


class ModelsSection(BaseModel):
    default: List[str] = Field(default_factory=list)
    fetch: bool = False


class EndpointConfig(BaseModel):
    type: Literal["static", "openai", "ollama"] = "static"
    models: ModelsSection = Field(default_factory=ModelsSection)
    settings: Dict[str, Any] = Field(default_factory=dict)


class Preset(BaseModel):
    """Administrator-authored conversation preset; any conversation field is allowed."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    endpoint: str
    endpoint_type: Optional[str] = Field(None, alias="endpointType")
    tools: Optional[List[Union[str, Dict[str, Any]]]] = None

    def to_conversation(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class ModelSpec(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    label: Optional[str] = None
    description: Optional[str] = None
    default: bool = False
    order: Optional[int] = None
    icon_url: Optional[str] = Field(None, alias="iconURL")
    preset: Preset


class ModelSpecsConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    enforce: bool = False
    specs: Optional[List[ModelSpec]] = Field(None, alias="list")

    @property
    def enforced(self) -> bool:
        # an empty list still enforces; only a missing list switches it off
        return self.specs is not None and self.enforce

    def find(self, name: str) -> Optional[ModelSpec]:
        #first match wins; duplicates are reported at load time
        return next((s for s in self.specs or () if s.name == name), None)

    def duplicate_names(self) -> List[str]:
        counts = Counter(s.name for s in self.specs or ())
        return sorted(name for name, n in counts.items() if n > 1)


class GatewayConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    endpoints: Dict[str, EndpointConfig] = Field(default_factory=dict)
    model_specs: Optional[ModelSpecsConfig] = Field(None, alias="modelSpecs")


def resolve_config_path(config_path: Optional[Union[Path, str]] = None) -> Path:
    if config_path:
        return Path(config_path)
    return Path(os.getenv("CHAT_GATEWAY_CONFIG", str(DEFAULT_CONFIG_PATH)))


def load_config(config_path: Optional[Union[Path, str]] = None) -> GatewayConfig:
    path = resolve_config_path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ConfigError(f"Config root must be a mapping: {path}")
    if 'endpoints' not in raw:
        raise ConfigError("Config missing 'endpoints'")

    try:
        config = GatewayConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e

    if config.model_specs:
        duplicates = config.model_specs.duplicate_names()
        if duplicates:
            logger.warning(f"Duplicate model spec names (first entry wins): {', '.join(duplicates)}")
        logger.info(
            f"Loaded {len(config.model_specs.specs or ())} model specs (enforce={config.model_specs.enforce})"
        )
    logger.info(f"Loaded config with endpoints: {', '.join(config.endpoints) or 'none'}")
    return config
