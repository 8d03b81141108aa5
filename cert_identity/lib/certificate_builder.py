"""Certificate builder for self-signed server certificates."""

import ipaddress
from collections.abc import Iterable
from datetime import UTC, datetime, timedelta

from cryptography import x509
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey
from cryptography.x509.oid import NameOID

from .cert_utils import generate_private_key, generate_serial_number


class CertificateBuilder:
    """Builds X.509 server certificates carrying hostname identities."""

    @staticmethod
    def build_server_certificate(
        common_name: str | None,
        dns_names: Iterable[str] = (),
        ip_addresses: Iterable[str] = (),
        uris: Iterable[str] = (),
        private_key: RSAPrivateKey | None = None,
        validity_days: int = 30,
    ) -> x509.Certificate:
        """Build self-signed server certificate.

        Args:
            common_name: Subject CN; None for an empty subject
            dns_names: DNS subjectAltName entries
            ip_addresses: IP Address subjectAltName entries
            uris: URI subjectAltName entries
            private_key: RSA private key for signing; generated when omitted
            validity_days: Certificate validity period in days

        Returns:
            Self-signed X.509 certificate. The subjectAltName extension is
            only added when at least one name is given.
        """
        if private_key is None:
            private_key = generate_private_key()

        attributes = []
        if common_name is not None:
            attributes.append(x509.NameAttribute(NameOID.COMMON_NAME, common_name))
        subject = x509.Name(attributes)

        not_before = datetime.now(UTC)
        not_after = not_before + timedelta(days=validity_days)

        builder = (
            x509.CertificateBuilder()
            .subject_name(subject)
            .issuer_name(subject)
            .public_key(private_key.public_key())
            .serial_number(generate_serial_number())
            .not_valid_before(not_before)
            .not_valid_after(not_after)
            .add_extension(
                x509.BasicConstraints(ca=False, path_length=None),
                critical=True,
            )
        )

        general_names: list[x509.GeneralName] = [x509.DNSName(name) for name in dns_names]
        general_names.extend(x509.IPAddress(ipaddress.ip_address(ip)) for ip in ip_addresses)
        general_names.extend(x509.UniformResourceIdentifier(uri) for uri in uris)
        if general_names:
            builder = builder.add_extension(
                x509.SubjectAlternativeName(general_names),
                critical=False,
            )

        return builder.sign(private_key, hashes.SHA256())
