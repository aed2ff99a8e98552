from dataclasses import dataclass

@dataclass
class FetchResult:
    url: str
    status_code: int
    final_url: str
    html: str
    fetched_at: str  # ISO 8601
