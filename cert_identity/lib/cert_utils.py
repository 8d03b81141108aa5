"""Adapters from X.509 certificates to certificate descriptors.

The TLS layer hands over peer certificates in one of two shapes: raw PEM/DER
bytes (loaded with cryptography) or the dict returned by
ssl.SSLSocket.getpeercert(). Both are rendered into the descriptor shape that
verify_certificate consumes, with subjectAltName formatted as OpenSSL prints it.
"""

import uuid
from collections.abc import Iterable, Mapping
from typing import Any

from cryptography import x509
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey
from cryptography.x509.oid import NameOID

from ._types import CertificateDescriptor, Extensions, Subject
from .config import VerifierConfig
from .errors import CertificateLoadError
from .logging_config import LOGGER
from .verifier import verify_certificate

PEM_MARKER = b"-----BEGIN CERTIFICATE-----"
DNS_LABEL = "DNS"
SAN_SEPARATOR = ","


def generate_private_key(key_size: int = 2048) -> RSAPrivateKey:
    """Generate RSA private key with specified size."""
    return rsa.generate_private_key(
        public_exponent=65537,
        key_size=key_size,
    )


def generate_serial_number() -> int:
    """Generate certificate serial number from UUID4 (128-bit, positive)."""
    return uuid.uuid4().int


def serialize_certificate(cert: x509.Certificate) -> bytes:
    """Serialize certificate to PEM format."""
    return cert.public_bytes(serialization.Encoding.PEM)


def load_certificate(data: bytes) -> x509.Certificate:
    """Load certificate from PEM or DER bytes.

    Raises:
        CertificateLoadError: If data is not bytes or not a decodable certificate
    """
    if not isinstance(data, (bytes, bytearray)):
        raise CertificateLoadError(f"Certificate data must be bytes, got {type(data).__name__}")
    data = bytes(data)
    try:
        if PEM_MARKER in data:
            return x509.load_pem_x509_certificate(data)
        return x509.load_der_x509_certificate(data)
    except ValueError as e:
        raise CertificateLoadError(f"Unable to load certificate: {e}") from e


def _general_name_entry(name: x509.GeneralName) -> tuple[str, str]:
    """Return (OpenSSL label, value) for a general name."""
    if isinstance(name, x509.DNSName):
        return DNS_LABEL, name.value
    if isinstance(name, x509.IPAddress):
        return "IP Address", str(name.value)
    if isinstance(name, x509.RFC822Name):
        return "email", name.value
    if isinstance(name, x509.UniformResourceIdentifier):
        return "URI", name.value
    if isinstance(name, x509.DirectoryName):
        return "DirName", name.value.rfc4514_string()
    if isinstance(name, x509.RegisteredID):
        return "Registered ID", name.value.dotted_string
    return "othername", "<unsupported>"


def _render_subject_alt_name(entries: Iterable[tuple[str, str]]) -> str | None:
    """Join (label, value) pairs into a comma-separated subjectAltName string.

    The rendered string is split on commas downstream, so a value containing
    one would read as extra entries. Such non-DNS values are dropped. Such DNS
    values are rendered as an empty "DNS:" entry, which keeps the certificate
    bound to its DNS names while matching no host.
    """
    rendered = []
    for label, value in entries:
        if SAN_SEPARATOR in value:
            if label != DNS_LABEL:
                LOGGER.debug("Dropping %s subjectAltName entry containing a comma", label)
                continue
            LOGGER.debug("DNS subjectAltName entry contains a comma; rendering it empty")
            value = ""
        rendered.append(f"{label}:{value}")
    return ", ".join(rendered) or None


def format_subject_alt_name(cert: x509.Certificate) -> str | None:
    """Render subjectAltName extension as OpenSSL does, or None if absent.

    Example: "DNS:example.com, DNS:www.example.com, IP Address:192.0.2.1"
    """
    try:
        ext = cert.extensions.get_extension_for_class(x509.SubjectAlternativeName)
    except x509.ExtensionNotFound:
        return None
    return _render_subject_alt_name(_general_name_entry(name) for name in ext.value)


def _common_name(cert: x509.Certificate) -> str | None:
    """Return the most specific (last) subject CN."""
    attributes = cert.subject.get_attributes_for_oid(NameOID.COMMON_NAME)
    if not attributes:
        return None
    value = attributes[-1].value
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    return value


def descriptor_from_x509(cert: x509.Certificate) -> CertificateDescriptor:
    """Build certificate descriptor from a cryptography certificate.

    Absent fields are left out of the descriptor rather than set to None.
    """
    subject: Subject = {}
    cn = _common_name(cert)
    if cn is not None:
        subject["CN"] = cn

    descriptor: CertificateDescriptor = {"subject": subject}

    san = format_subject_alt_name(cert)
    if san:
        extensions: Extensions = {"subjectAltName": san}
        descriptor["extensions"] = extensions

    return descriptor


def descriptor_from_peercert(peercert: Mapping[str, Any]) -> CertificateDescriptor:
    """Build certificate descriptor from ssl.SSLSocket.getpeercert() output.

    getpeercert() returns subject as a tuple of RDNs, each a tuple of
    (attribute, value) pairs, and subjectAltName as (type, value) pairs:

        {"subject": ((("commonName", "example.com"),),),
         "subjectAltName": (("DNS", "example.com"), ("IP Address", "192.0.2.1"))}
    """
    common_names = [
        value
        for rdn in peercert.get("subject", ())
        for (key, value) in rdn
        if key == "commonName"
    ]

    subject: Subject = {}
    if common_names:
        subject["CN"] = common_names[-1]

    descriptor: CertificateDescriptor = {"subject": subject}

    san = _render_subject_alt_name(
        (str(kind), str(value)) for (kind, value) in peercert.get("subjectAltName", ())
    )
    if san:
        extensions: Extensions = {"subjectAltName": san}
        descriptor["extensions"] = extensions

    return descriptor


def verify_pem(
    host: Any,
    data: bytes,
    *,
    case_sensitive: bool | None = None,
    config: VerifierConfig | None = None,
) -> bool:
    """Load PEM/DER certificate bytes and verify them against host.

    Raises:
        CertificateLoadError: If data is not a decodable certificate
        InvalidArgument: If host has the wrong type
    """
    cert = load_certificate(data)
    return verify_certificate(
        host,
        descriptor_from_x509(cert),
        case_sensitive=case_sensitive,
        config=config,
    )
