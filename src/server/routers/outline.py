"""Outline endpoint for the API."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from server.models import OutlineErrorResponse, OutlineRequest, OutlineSuccessResponse
from server.outline_processor import process_outline

router = APIRouter()

COMMON_OUTLINE_RESPONSES: dict = {
    status.HTTP_200_OK: {"model": OutlineSuccessResponse, "description": "Outline built"},
    status.HTTP_400_BAD_REQUEST: {"model": OutlineErrorResponse, "description": "Outline could not be parsed"},
}


@router.post("/api/outline", responses=COMMON_OUTLINE_RESPONSES)
async def api_outline(outline_request: OutlineRequest) -> JSONResponse:
    """Build a book outline from YAML text.

    **Parameters**

    - **outline_request** (`OutlineRequest`): YAML text and build options

    **Returns**

    - **JSONResponse**: the chapter groups, a rendered tree and any issues,
      or an error body with status **400** when the YAML is invalid

    """
    response = process_outline(
        outline_request.outline,
        drop_empty=outline_request.drop_empty,
        max_depth=outline_request.max_depth,
    )
    if isinstance(response, OutlineErrorResponse):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=response.model_dump())
    return JSONResponse(status_code=status.HTTP_200_OK, content=response.model_dump(mode="json"))
