from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class FetchRequest(BaseModel):
    # Optional so a missing field is reported as "URL is required" instead of a 422
    url: Optional[str] = None

class FetchResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    content: str
    title: Optional[str] = Field(None, description="Transformed document title")
    original_url: str = Field(alias="originalUrl", description="URL that was requested")

class ErrorResponse(BaseModel):
    error: str
