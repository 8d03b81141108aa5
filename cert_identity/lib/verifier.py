"""Hostname verification against a decoded peer certificate."""

from collections.abc import Mapping
from typing import Any

from .config import VerifierConfig
from .identity_extractor import extract_identity
from .input_guard import ensure_certificate, ensure_host
from .logging_config import LOGGER
from .matcher import match_host
from .san_parser import parse_dns_names


def verify_certificate(
    host: Any,
    certificate: Mapping[str, Any] | Any,
    *,
    case_sensitive: bool | None = None,
    config: VerifierConfig | None = None,
) -> bool:
    """Verify that certificate was issued for host (RFC 2818 section 3.1).

    Call this after chain validation succeeded; it only checks that the
    certificate's identity fields name the host.

    Args:
        host: Hostname the caller intended to reach (str or string-convertible)
        certificate: Decoded certificate descriptor, e.g.
            {"subject": {"CN": "a.example"},
             "extensions": {"subjectAltName": "DNS: a.example, DNS: b.example"}}
        case_sensitive: Override comparison mode; defaults to config value
        config: Verifier settings; defaults to VerifierConfig()

    Returns:
        True if the host matches a DNS subjectAltName entry, or, when the
        certificate carries no DNS entries, its non-empty Common Name.

    Raises:
        InvalidArgument: If host or certificate has the wrong type
    """
    host_name = ensure_host(host)
    ensure_certificate(certificate)

    if case_sensitive is None:
        case_sensitive = (config or VerifierConfig()).case_sensitive

    identity = extract_identity(certificate)
    dns_names = parse_dns_names(identity.san_raw)

    if dns_names:
        LOGGER.debug("Matching against %d DNS subjectAltName entries; CN ignored", len(dns_names))
    else:
        LOGGER.debug("No DNS subjectAltName entries; matching against CN")

    verdict = match_host(host_name, identity.cn, dns_names, case_sensitive=case_sensitive)
    LOGGER.debug("Identity check for '%s': %s", host_name, "match" if verdict else "no match")
    return verdict
