"""
API models for chat requests.

A chat request names its endpoint and carries arbitrary conversation
parameters next to it; only the routing fields and attachments are typed here.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional

from .common import APIResponse

class FileDescriptor(BaseModel):
    """Reference to a previously uploaded file."""
    model_config = ConfigDict(extra="allow")

    file_id: str = Field(..., description="ID returned by the files endpoint")
    filename: Optional[str] = None
    type: Optional[str] = None
    filepath: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    embedded: Optional[bool] = None

class ChatRequestBody(BaseModel):
    """Chat request; extra fields are conversation parameters."""
    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "endpoint": "openAI",
                "model": "gpt-4o-mini",
                "temperature": 0.7,
                "spec": "fast-chat",
                "text": "Summarize the attached report",
                "files": [{"file_id": "3f1c2b7e-0000-4000-8000-000000000000"}],
            }
        },
    )

    endpoint: str = Field(..., description="Target provider identifier")
    endpoint_type: Optional[str] = Field(None, alias="endpointType", description="Protocol override for provider variants")
    files: Optional[List[FileDescriptor]] = Field(None, description="Attachments for this message")

    def to_body(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)

class EndpointOptionData(BaseModel):
    """Built endpoint option with resolved attachments."""
    endpoint_option: Dict[str, Any] = Field(..., description="Builder options plus modelsConfig")
    attachments: Optional[List[Dict[str, Any]]] = Field(None, description="Processed attachment metadata")
    processing_time: float = Field(..., description="Processing time in seconds")

class EndpointOptionResponse(APIResponse):
    """Response after building the endpoint option."""
    data: Optional[EndpointOptionData] = None

class ModelSpecsResponse(BaseModel):
    enforce: bool
    list: List[Dict[str, Any]]
