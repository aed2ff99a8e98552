from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from app.api.routes import router
from app.core.config import settings
from app.core.errors import ProxyError, FetchError, InvalidUrlError

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    Report startup and shutdown; the service holds no resources between requests.
    """
    # Startup
    print(f"Faleproxy server running at http://localhost:{settings.PORT}")

    yield

    # Shutdown
    print("Shutting down Faleproxy...")

app = FastAPI(
    title="Faleproxy",
    description="Fetches a web page and replaces Yale with Fale in its text",
    version="1.0.0",
    lifespan=lifespan
)

@app.exception_handler(ProxyError)
async def proxy_error_handler(request: Request, exc: ProxyError):
    if isinstance(exc, (FetchError, InvalidUrlError)):
        message = f"Failed to fetch content: {exc.message}"
    else:
        message = exc.message
    return JSONResponse(status_code=exc.status_code, content={"error": message})

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # Body is not a JSON object or url is not a string
    return JSONResponse(status_code=400, content={"error": "Request body must be a JSON object with a string url"})

# Include API routes
app.include_router(router)

@app.get("/")
async def root():
    """Root endpoint with basic info"""
    return {
        "service": "Faleproxy",
        "version": "1.0.0",
        "endpoints": {
            "fetch": "POST /fetch",
            "health": "GET /health"
        }
    }

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
