"""
File upload endpoints.

Uploaded files are referenced from chat requests by ``file_id`` and resolved
while the endpoint option is built.
"""

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from ..models.common import APIResponse
from ..models.files import FileData, FileUploadResponse
from ..dependencies.state import get_file_store
from chat_gateway.models.services.files import FileStore

router = APIRouter()

MAX_UPLOAD_BYTES = 20 * 1024 * 1024

@router.post("/", response_model=FileUploadResponse)
async def upload_file(file: UploadFile = File(...), file_store: FileStore = Depends(get_file_store)):
    content = await file.read()
    if len(content) > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail=f"File exceeds {MAX_UPLOAD_BYTES} bytes")

    record = file_store.register(
        filename=file.filename or "upload",
        content=content,
        type=file.content_type or "application/octet-stream",
    )
    return FileUploadResponse(
        success=True,
        message="File uploaded successfully",
        data=FileData(**record.to_dict()),
    )

@router.get("/{file_id}", response_model=FileUploadResponse)
async def get_file(file_id: str, file_store: FileStore = Depends(get_file_store)):
    record = file_store.get(file_id)
    if record is None:
        raise HTTPException(status_code=404, detail=f"File not found: {file_id}")
    return FileUploadResponse(success=True, data=FileData(**record.to_dict()))

@router.delete("/{file_id}", response_model=APIResponse)
async def delete_file(file_id: str, file_store: FileStore = Depends(get_file_store)):
    if not file_store.delete(file_id):
        raise HTTPException(status_code=404, detail=f"File not found: {file_id}")
    return APIResponse(success=True, message=f"File {file_id} deleted")
