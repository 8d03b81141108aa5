"""Type definitions for decoded certificate descriptors."""

from typing import TypedDict


class Subject(TypedDict, total=False):
    CN: str


class Extensions(TypedDict, total=False):
    subjectAltName: str


class CertificateDescriptor(TypedDict, total=False):
    """Certificate decoded into named fields by the TLS layer.

    Mirrors the shape produced by OpenSSL's x509 parsers: the subject's
    Common Name plus the raw, comma-separated subjectAltName string.
    """

    subject: Subject
    extensions: Extensions
