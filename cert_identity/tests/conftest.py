"""Test fixtures for cert_identity tests."""

from pathlib import Path

import pytest
from cryptography import x509
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from cert_identity.lib.cert_utils import generate_private_key, serialize_certificate
from cert_identity.lib.certificate_builder import CertificateBuilder
from cert_identity.lib.config import CASE_SENSITIVE_ENV_VAR


@pytest.fixture(autouse=True)
def clear_env_vars(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure verifier environment configuration does not leak into tests."""
    monkeypatch.delenv(CASE_SENSITIVE_ENV_VAR, raising=False)


@pytest.fixture
def server_key() -> RSAPrivateKey:
    """Generate RSA private key for server certificates."""
    return generate_private_key(key_size=2048)


@pytest.fixture
def server_cert(server_key: RSAPrivateKey) -> x509.Certificate:
    """Self-signed certificate with CN and DNS/IP subjectAltName entries."""
    return CertificateBuilder.build_server_certificate(
        common_name="example.com",
        dns_names=["example.com", "www.example.com"],
        ip_addresses=["192.0.2.1"],
        private_key=server_key,
    )


@pytest.fixture
def cn_only_cert(server_key: RSAPrivateKey) -> x509.Certificate:
    """Self-signed certificate with CN and no subjectAltName extension."""
    return CertificateBuilder.build_server_certificate(
        common_name="legacy.example.com",
        private_key=server_key,
    )


@pytest.fixture
def ip_only_san_cert(server_key: RSAPrivateKey) -> x509.Certificate:
    """Self-signed certificate whose subjectAltName holds only an IP address."""
    return CertificateBuilder.build_server_certificate(
        common_name="example.org",
        ip_addresses=["192.0.2.7"],
        private_key=server_key,
    )


@pytest.fixture
def pem_file(tmp_path: Path, server_cert: x509.Certificate) -> Path:
    """Write server certificate as PEM and return its path."""
    path = tmp_path / "server.pem"
    path.write_bytes(serialize_certificate(server_cert))
    return path
