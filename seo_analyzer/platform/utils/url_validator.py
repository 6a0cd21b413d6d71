import ipaddress
import re
from typing import Tuple
from urllib.parse import urlparse

ALLOWED_SCHEMES = ("http", "https")

# Any whitespace or control character makes the URL unparseable.
_FORBIDDEN_CHARS = re.compile(r"[\s\x00-\x1f\x7f]")
# One DNS label: word characters and hyphens, no leading/trailing hyphen.
_HOST_LABEL = re.compile(r"^(?!-)[\w-]{1,63}(?<!-)$")


def _is_valid_host(hostname: str) -> bool:
    try:
        ipaddress.ip_address(hostname)
        return True
    except ValueError:
        pass

    # A single trailing dot is a fully-qualified name
    labels = hostname[:-1].split(".") if hostname.endswith(".") else hostname.split(".")
    return all(_HOST_LABEL.match(label) for label in labels)


def validate_url(url: str) -> Tuple[bool, str, str]:
    """
    Check that `url` is an absolute http(s) URL.

    Returns (is_valid, cleaned_url, error_message). Unlike a browser address
    bar, a missing scheme is rejected rather than guessed.
    """
    if not isinstance(url, str) or not url.strip():
        return False, "", "URL cannot be empty"

    cleaned = url.strip()

    if _FORBIDDEN_CHARS.search(cleaned):
        return False, cleaned, "Invalid URL format: contains whitespace or control characters"

    try:
        parsed = urlparse(cleaned)
        # Accessing .port validates the port component
        parsed.port
    except ValueError as e:
        return False, cleaned, f"URL parsing error: {str(e)}"

    if parsed.scheme.lower() not in ALLOWED_SCHEMES:
        scheme = parsed.scheme or "none"
        return False, cleaned, f"Invalid URL scheme: {scheme} (must be http or https)"

    if not parsed.hostname:
        return False, cleaned, "Invalid URL format: missing domain"

    if not _is_valid_host(parsed.hostname):
        return False, cleaned, f"Invalid URL format: bad host {parsed.hostname!r}"

    return True, cleaned, ""
