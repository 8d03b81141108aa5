"""Identity field extraction from decoded certificate descriptors."""

from typing import Any

from .input_guard import is_key_indexable
from .models import IdentityFields

_MISSING = object()


def _lookup(container: Any, key: str) -> Any:
    """Read key from a key-indexable container, or _MISSING if unavailable."""
    if not is_key_indexable(container):
        return _MISSING
    try:
        if key not in container:
            return _MISSING
        return container[key]
    except (KeyError, IndexError, TypeError):
        return _MISSING


def extract_common_name(certificate: Any) -> str:
    """Extract subject CN, or "" when subject or CN is absent."""
    subject = _lookup(certificate, "subject")
    cn = _lookup(subject, "CN")
    if not isinstance(cn, str):
        return ""
    return cn


def extract_subject_alt_name(certificate: Any) -> str | None:
    """Extract raw subjectAltName string, or None when absent or empty."""
    extensions = _lookup(certificate, "extensions")
    san = _lookup(extensions, "subjectAltName")
    if not isinstance(san, str) or not san:
        return None
    return san


def extract_identity(certificate: Any) -> IdentityFields:
    """Read CN and subjectAltName from a validated certificate descriptor.

    Never raises for missing or malformed content; such fields come back as
    "no identity" values so the caller can fail closed.
    """
    return IdentityFields(
        cn=extract_common_name(certificate),
        san_raw=extract_subject_alt_name(certificate),
    )
