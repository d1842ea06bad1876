"""Zip code and service area utilities."""
import re
from typing import Dict, FrozenSet, Optional, Tuple
import usaddress

ZIP_PATTERN = re.compile(r'\b(\d{5})\b')
PREFIX_PATTERN = re.compile(r'^\d{3,4}$')
STATE_PATTERN = re.compile(r'^[a-z]{2}$')

# Approximate 3-digit zip prefixes per state for the PA/NJ/DE/MD service
# region. Hand-maintained, not a postal database: a zip outside these
# prefixes never resolves to a state.
ZIP_PREFIX_STATES: Dict[str, FrozenSet[str]] = {
    "PA": frozenset(str(p) for p in range(150, 197)),
    "NJ": frozenset(f"{p:03d}" for p in range(70, 90)),
    "DE": frozenset({"197", "198", "199"}),
    "MD": frozenset({"206", "207", "208", "209", "210", "211", "212",
                     "214", "215", "216", "217", "218", "219"}),
}


def parse_address(address: str) -> dict:
    """
    Parse address using usaddress library.

    Args:
        address: Address string to parse

    Returns:
        Dict with parsed components
    """
    try:
        parsed, _ = usaddress.tag(address)
        return dict(parsed)
    except Exception:
        return {}


def normalize_zip_code(value: Optional[str]) -> Optional[str]:
    """
    Reduce a zip-like value to its 5-digit form.

    Args:
        value: Zip code, possibly ZIP+4 or padded with whitespace

    Returns:
        5-digit zip string or None
    """
    if not value:
        return None
    match = ZIP_PATTERN.search(str(value))
    return match.group(1) if match else None


def extract_zip_code(location: Optional[str]) -> Optional[str]:
    """
    Extract a 5-digit zip code from free-text location.

    Prefers the ZipCode component tagged by usaddress, then falls back to
    the first 5-digit run in the text that usaddress did not tag as the
    street number.

    Args:
        location: Free-text location or address

    Returns:
        5-digit zip string or None
    """
    if not location or not location.strip():
        return None

    parsed = parse_address(location)
    tagged = normalize_zip_code(parsed.get("ZipCode"))
    if tagged:
        return tagged

    street_numbers = set(ZIP_PATTERN.findall(parsed.get("AddressNumber", "")))
    for candidate in ZIP_PATTERN.findall(location):
        if candidate not in street_numbers:
            return candidate
    return None


def zip_in_state(zip_code: str, state: str) -> bool:
    """
    Check if a zip code falls in a state per ZIP_PREFIX_STATES.

    Args:
        zip_code: 5-digit zip
        state: 2-letter state code (any case)

    Returns:
        True if the zip's 3-digit prefix belongs to the state
    """
    prefixes = ZIP_PREFIX_STATES.get(state.upper())
    return bool(prefixes) and zip_code[:3] in prefixes


def parse_service_area(area: str) -> Tuple[Optional[str], Optional[str]]:
    """
    Classify a vendor service area entry.

    Accepted forms: "19103" (zip), "prefix:191" / "prefix:1910" or a bare
    3-4 digit prefix, "state:PA" or a bare 2-letter state code.

    Args:
        area: Service area string

    Returns:
        Tuple of (kind, value) where kind is "zip", "prefix", "state" or None
    """
    if not area:
        return None, None

    normalized = str(area).strip().lower()

    if ZIP_PATTERN.fullmatch(normalized):
        return "zip", normalized

    if normalized.startswith("prefix:"):
        prefix = normalized[len("prefix:"):].strip()
        if PREFIX_PATTERN.match(prefix):
            return "prefix", prefix
        return None, None

    if PREFIX_PATTERN.match(normalized):
        return "prefix", normalized

    if normalized.startswith("state:"):
        state = normalized[len("state:"):].strip()
        if STATE_PATTERN.match(state):
            return "state", state.upper()
        return None, None

    if STATE_PATTERN.match(normalized):
        return "state", normalized.upper()

    return None, None
