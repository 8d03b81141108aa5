"""RFC 2818 hostname identity verification for TLS peer certificates."""

from .lib.config import VerifierConfig
from .lib.errors import CertificateLoadError, InvalidArgument
from .lib.verifier import verify_certificate

__version__ = "0.1.0"

__all__ = [
    "verify_certificate",
    "VerifierConfig",
    "InvalidArgument",
    "CertificateLoadError",
]
