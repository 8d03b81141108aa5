"""subjectAltName string parsing."""

DNS_TAG = "DNS:"

# ASCII whitespace and NUL only; other Unicode spaces stay part of the value.
TRIM_CHARS = " \t\n\r\0\x0b"


def parse_dns_names(san_raw: str | None) -> list[str]:
    """Return DNS-tagged values from a raw subjectAltName string, in order.

    The string is comma separated, e.g. "DNS: example.com, IP Address:10.0.0.1".
    Entries not starting with the case-sensitive "DNS:" tag are dropped.
    Values are trimmed of TRIM_CHARS; duplicates and empty values are kept.
    """
    if not san_raw:
        return []

    dns_names = []
    for entry in san_raw.split(","):
        entry = entry.strip(TRIM_CHARS)
        if not entry.startswith(DNS_TAG):
            continue
        dns_names.append(entry[len(DNS_TAG) :].strip(TRIM_CHARS))
    return dns_names
