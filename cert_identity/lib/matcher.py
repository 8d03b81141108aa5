"""RFC 2818 section 3.1 identity matching."""


def _normalize(name: str, case_sensitive: bool) -> str:
    return name if case_sensitive else name.lower()


def match_host(host: str, cn: str, dns_names: list[str], case_sensitive: bool = True) -> bool:
    """Decide whether host is authorised by the certificate identities.

    If any DNS name is present the certificate is matched against those only
    and CN is never examined, even when none of them matches. Otherwise host
    must equal a non-empty CN. Comparison is exact; no wildcards.
    """
    host = _normalize(host, case_sensitive)

    if dns_names:
        return any(host == _normalize(name, case_sensitive) for name in dns_names)

    if not cn:
        return False
    return host == _normalize(cn, case_sensitive)
