from __future__ import annotations
import re

# ---------------------------------------------------------------------------
# UK postcode text helpers
# ---------------------------------------------------------------------------
# Outward code: SW1A, LS1, B33  (area letters + district)
# Inward code:  the last 3 characters (1AA, 4DP)
# Prefix:       the leading run of letters of the outward code (SW, LS, B)
# ---------------------------------------------------------------------------

_PREFIX_RE = re.compile(r"^[A-Z]+")
_VALID_START_RE = re.compile(r"^[A-Z]{1,2}[0-9]", re.IGNORECASE)
_NON_ALNUM_RE = re.compile(r"[^A-Za-z0-9]")

MIN_IDENTIFY_LENGTH = 2


def normalize_postcode(postcode: str | None) -> str:
    if not isinstance(postcode, str):
        return ""
    return postcode.strip().upper()


def extract_prefix(postcode: str | None) -> str | None:
    """Leading letter run of the postcode, or None if it doesn't start with a letter."""
    pc = normalize_postcode(postcode)
    if not pc:
        return None
    m = _PREFIX_RE.match(pc)
    return m.group(0) if m else None


def is_valid_uk_postcode(postcode: str | None) -> bool:
    # 1-2 letters followed by a digit, the rest is not checked
    if not isinstance(postcode, str):
        return False
    return bool(_VALID_START_RE.match(postcode.strip()))


def can_identify_partial_postcode(postcode: str | None, min_length: int = MIN_IDENTIFY_LENGTH) -> bool:
    """
    True once the input is long enough to say "not recognized" about it:
    at least min_length characters after trimming and a leading letter run.
    """
    pc = normalize_postcode(postcode)
    if len(pc) < min_length:
        return False
    return extract_prefix(pc) is not None


def format_uk_postcode(postcode: str | None) -> str:
    if not isinstance(postcode, str):
        return ""
    return _NON_ALNUM_RE.sub("", postcode).upper()


def get_outward_postcode(postcode: str | None) -> str:
    return format_uk_postcode(postcode)[:-3]


def get_inward_postcode(postcode: str | None) -> str:
    return format_uk_postcode(postcode)[-3:]


def normalize_city(city: str | None) -> str:
    # only the first letter is upper-cased: "BELFAST" -> "Belfast"
    if not isinstance(city, str):
        return ""
    c = city.strip()
    if not c:
        return ""
    return c[0].upper() + c[1:].lower()
