"""Intermediate models for certificate identity verification."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IdentityFields:
    """Identity fields read from a certificate descriptor.

    cn is "" when the subject or its CN is absent. san_raw is None when the
    subjectAltName extension is absent or empty.
    """

    cn: str
    san_raw: str | None
