import re

SOURCE_TERM = "Yale"
REPLACEMENT_TERM = "Fale"

_TERM_PATTERN = re.compile(re.escape(SOURCE_TERM), re.IGNORECASE)

def _match_case(matched: str, replacement: str) -> str:
    """Copy the case of each letter in matched onto replacement: 'YALE' -> 'FALE', 'yAle' -> 'fAle'"""
    return "".join(
        new.upper() if old.isupper() else new.lower()
        for old, new in zip(matched, replacement)
    )

def contains_term(text: str) -> bool:
    if not text:
        return False
    return _TERM_PATTERN.search(text) is not None

def replace_term(text: str) -> str:
    """
    Replace every occurrence of the source term in text, in any case.
    Examples: 'Yale' -> 'Fale', 'yale.edu' -> 'fale.edu', 'YALE' -> 'FALE'
    """
    if not text:
        return text
    return _TERM_PATTERN.sub(lambda m: _match_case(m.group(0), REPLACEMENT_TERM), text)
