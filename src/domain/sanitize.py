import math
import re

_TAG_RE = re.compile(r"<[^>]*?>", re.DOTALL)
_SCRIPT_RE = re.compile(r"<(script|style)[^>]*?>.*?</\1>", re.DOTALL | re.IGNORECASE)
_OCTET_RE = re.compile(r"%[a-fA-F0-9]{2}")
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
_BLANK_RE = re.compile(r"[\r\n\t ]+")
_KEY_RE = re.compile(r"[^a-z0-9_\-]")
_LEADING_INT_RE = re.compile(r"\s*([+-]?[0-9]+)")


def _strip_markup(text: str) -> str:
    text = _SCRIPT_RE.sub("", text)
    # A lone '<' that cannot open a tag is kept as an entity rather than eaten.
    text = re.sub(r"<(?![a-zA-Z/!?])", "&lt;", text)
    text = _TAG_RE.sub("", text)
    text = _OCTET_RE.sub("", text)
    return _CONTROL_RE.sub("", text)


def sanitize_text(value: object) -> str:
    """
    Reduce arbitrary input to a single line of plain text.

    Markup, percent-encoded octets and control characters are removed,
    whitespace runs (including line breaks) collapse to one space.
    """
    if value is None:
        return ""
    text = _strip_markup(str(value))
    return _BLANK_RE.sub(" ", text).strip()


def sanitize_textarea(value: object) -> str:
    """
    Like sanitize_text, but keeps line breaks.

    Each line is cleaned on its own; CRLF is normalized to LF.
    """
    if value is None:
        return ""
    text = _strip_markup(str(value).replace("\r\n", "\n").replace("\r", "\n"))
    lines = [re.sub(r"[\t ]+", " ", line).strip() for line in text.split("\n")]
    return "\n".join(lines).strip("\n")


def sanitize_key(value: object) -> str:
    """Lowercase and keep only [a-z0-9_-]."""
    if value is None:
        return ""
    return _KEY_RE.sub("", str(value).lower())


def sanitize_phone(value: object) -> str:
    """Keep digits, plus a '+' only when it is the first character."""
    if value is None:
        return ""
    raw = str(value).strip()
    digits = re.sub(r"[^0-9]", "", raw)
    if raw.startswith("+"):
        return "+" + digits
    return digits


def to_int(value: object) -> int:
    """
    Coerce to int the way a lenient form parser would.

    Leading digits are read ("12abc" -> 12); anything unreadable is 0,
    including NaN, infinities and digit runs too long to convert.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    if value is None:
        return 0
    match = _LEADING_INT_RE.match(str(value))
    if not match:
        return 0
    try:
        return int(match.group(1))
    except ValueError:
        return 0
