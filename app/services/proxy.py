import asyncio
from typing import Dict, Any
from app.fetch import scraper
from app.fetch.utils import validate_url
from app.core.errors import ProxyError
from app.transform.transformer import transform, extract_title

async def process_fetch_request(url: str) -> Dict[str, Any]:
    """
    Main pipeline for a proxy request.

    1. Validate the URL
    2. Fetch raw HTML
    3. Rewrite the source term in visible text
    4. Return the transformed page with its title

    Parsing runs in a worker thread so large pages do not stall the event loop.
    """
    try:
        url = validate_url(url)
        print(f"PROCESSING {url} - fetching HTML...")
        html = await scraper.fetch_html(url)
        print(f"HTML RECEIVED: {len(html)} characters")
    except ProxyError as e:
        print(f"ERROR processing {url}: {e.message}")
        raise

    content = await asyncio.to_thread(transform, html)
    title = await asyncio.to_thread(extract_title, content)
    print(f"TRANSFORMED {url}: {len(content)} characters, title={title!r}")

    return {
        "success": True,
        "content": content,
        "title": title,
        "original_url": url,
    }
