"""
HTML rewriting: substitute the source term in rendered text while leaving
markup and attribute values exactly as they were.
"""

from typing import Optional
from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString
from app.transform.replacer import contains_term, replace_term

# Elements whose text content is never rendered as page text
SKIP_TAGS = frozenset(["script", "style"])


def _is_rewritable(node: NavigableString) -> bool:
    # Comments, doctypes, CDATA and processing instructions
    if isinstance(node, PreformattedString):
        return False
    parent = node.parent
    if parent is not None and parent.name in SKIP_TAGS:
        return False
    return contains_term(str(node))


def transform(html: str) -> str:
    """
    Rewrite the source term in every text node of an HTML document.

    - Uses the lenient "html.parser" backend, so malformed markup never fails
    - Only text nodes are visited; href, src and other attributes stay byte-identical
    - Each text node is handled on its own, no matching across sibling nodes
    - script/style bodies are left unchanged
    """
    if not html:
        return html or ""

    soup = BeautifulSoup(html, "html.parser")

    # Collect first, replacing while iterating would break the traversal
    targets = [node for node in soup.find_all(string=True) if _is_rewritable(node)]
    for node in targets:
        node.replace_with(replace_term(str(node)))

    return str(soup)


def extract_title(html: str) -> Optional[str]:
    """Return the text of the document <title>, or None when there is none"""
    if not html:
        return None
    soup = BeautifulSoup(html, "html.parser")
    if soup.title is None:
        return None
    return soup.title.get_text(strip=True)
