from typing import Optional
from fastapi import APIRouter
from app.schemas import FetchRequest, FetchResponse, ErrorResponse
from app.services.proxy import process_fetch_request
from app.core.errors import ProxyError, MissingUrlError

router = APIRouter()

@router.post(
    "/fetch",
    response_model=FetchResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def fetch_page(request: Optional[FetchRequest] = None):
    """
    Fetch a page and replace Yale with Fale in its visible text.

    Link targets and other attribute values are returned unchanged.
    """
    if request is None or not request.url:
        raise MissingUrlError()

    try:
        result = await process_fetch_request(request.url)
        return FetchResponse(**result)
    except ProxyError:
        raise
    except Exception as e:
        print(f"UNEXPECTED ERROR for {request.url}: {str(e)}")
        raise ProxyError(f"Internal server error: {str(e)}") from e

@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "Faleproxy"}
