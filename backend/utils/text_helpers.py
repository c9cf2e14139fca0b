"""
Text helpers: URL slugs and plain-text sanitization.
"""
import re

# Thai consonants (ก-ฮ) and leading vowels (เ-ไ) are kept so Thai form names stay readable
_NON_SLUG_CHARS = re.compile(r'[^a-z0-9ก-ฮเ-ไ\-]+')
_MULTIPLE_HYPHENS = re.compile(r'-{2,}')

_SCRIPT_STYLE_BLOCKS = re.compile(r'<(script|style)\b[^>]*>.*?</\1\s*>', re.IGNORECASE | re.DOTALL)
_HTML_TAGS = re.compile(r'<[^>]*>')
_ESCAPE_BRACKETS = str.maketrans({"<": "&lt;", ">": "&gt;"})


def slugify(text: str | None) -> str:
    """
    Create a URL-friendly slug from a display name.

    Lowercases, turns spaces and underscores into hyphens, drops anything that is
    not a-z, 0-9, a hyphen or a Thai letter, then collapses and trims hyphens.

    Args:
        text: Source text (usually a form name)

    Returns:
        str: The slug, empty if nothing survives
    """
    if not text:
        return ""

    slug = text.lower()
    slug = slug.replace(" ", "-").replace("_", "-")
    slug = _NON_SLUG_CHARS.sub("", slug)
    slug = _MULTIPLE_HYPHENS.sub("-", slug)
    return slug.strip("-")


def strip_html(value: str | None) -> str | None:
    """
    Reduce user input to plain text.

    Script and style blocks are removed with their content, every other tag is
    removed. Angle brackets left over from unclosed or malformed tags are
    HTML-escaped, so the result never contains markup. Existing entities are
    left encoded.

    Args:
        value: Raw input, may be None

    Returns:
        Plain text, or None when value is None
    """
    if value is None:
        return None
    text = _SCRIPT_STYLE_BLOCKS.sub("", value)
    text = _HTML_TAGS.sub("", text)
    return text.translate(_ESCAPE_BRACKETS).strip()
