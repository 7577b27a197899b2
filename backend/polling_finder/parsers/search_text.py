import re

# Four ASCII digits that are not part of a longer digit run ("H-1052" yes, "12345" no).
_POSTAL_CODE_RE = re.compile(r'(?<![0-9])([0-9]{4})(?![0-9])')


def extract_postal_code(text: str) -> str | None:
    m = _POSTAL_CODE_RE.search(text)
    return m.group(1) if m else None


def normalize_search_text(text: str) -> str:
    return text.lower()
