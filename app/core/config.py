import os
from typing import Optional

class Settings:
    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3001"))

    # Fetching
    # Unset means the transport default applies
    REQUEST_TIMEOUT: Optional[float] = (
        float(os.getenv("REQUEST_TIMEOUT")) if os.getenv("REQUEST_TIMEOUT") else None
    )
    USER_AGENT: str = os.getenv("USER_AGENT", "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36")
    FOLLOW_REDIRECTS: bool = os.getenv("FOLLOW_REDIRECTS", "1").lower() in ("1", "true", "yes")

settings = Settings()
