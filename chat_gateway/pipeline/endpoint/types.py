from __future__ import annotations
import asyncio
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

#endpoint name -> available model names
ModelsCatalog = Dict[str, List[str]]


@dataclass
class EndpointOption:
    """Output of the endpoint option stage, owned by the request that built it.

    ``attachments`` is a pending task; the downstream consumer awaits it.
    """
    endpoint: str
    endpoint_type: Optional[str]
    options: Dict[str, Any]
    models_config: Optional[ModelsCatalog] = None
    attachments: Optional[asyncio.Future] = field(default=None, repr=False, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        data = {"endpoint": self.endpoint, **self.options}
        if self.endpoint_type is not None:
            data.setdefault("endpointType", self.endpoint_type)
        if self.models_config is not None:
            data["modelsConfig"] = self.models_config
        return data
