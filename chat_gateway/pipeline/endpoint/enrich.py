from __future__ import annotations
import asyncio
from typing import Any, Awaitable, Callable, List, Optional, Sequence
import logging

from .types import EndpointOption, ModelsCatalog

logger = logging.getLogger(__name__)

GetModelsConfig = Callable[[Any], Awaitable[ModelsCatalog]]
ProcessFiles = Callable[[Sequence[Any]], Awaitable[List[Any]]]


async def enrich_endpoint_option(
    option: EndpointOption,
    request: Any,
    files: Optional[Sequence[Any]],
    get_models_config: GetModelsConfig,
    process_files: ProcessFiles,
) -> EndpointOption:
    option.models_config = await get_models_config(request)

    if files:
        # started, not awaited; the consumer of the option awaits it
        option.attachments = asyncio.ensure_future(process_files(list(files)))
        logger.debug(f"Started processing {len(files)} attachment(s) for '{option.endpoint}'")
    return option
