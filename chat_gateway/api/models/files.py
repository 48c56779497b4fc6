from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from .common import APIResponse

class FileData(BaseModel):
    file_id: str
    filename: str
    type: str
    size: int = Field(..., description="Size in bytes")
    usage: int
    width: Optional[int] = None
    height: Optional[int] = None
    created_at: datetime
    updated_at: datetime

class FileUploadResponse(APIResponse):
    data: Optional[FileData] = None
