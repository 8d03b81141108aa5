#!/usr/bin/env python3
"""Verify that a certificate file was issued for a hostname."""

import argparse
import logging
import sys
from pathlib import Path

from cert_identity.lib.cert_utils import descriptor_from_x509, load_certificate
from cert_identity.lib.config import VerifierConfig
from cert_identity.lib.errors import CertificateLoadError, InvalidArgument
from cert_identity.lib.logging_config import LOGGER, configure_log_level
from cert_identity.lib.verifier import verify_certificate

EXIT_MATCH = 0
EXIT_ERROR = 1
EXIT_MISMATCH = 2


def main(argv: list[str] | None = None) -> int:
    """Check certificate identity against host.

    Returns:
        Exit code (0 on match, 2 on mismatch, 1 on failure)
    """
    parser = argparse.ArgumentParser(description="Verify certificate hostname identity (RFC 2818)")
    parser.add_argument(
        "--host",
        required=True,
        help="Hostname the client intends to connect to",
    )
    parser.add_argument(
        "--cert",
        type=Path,
        required=True,
        help="Peer certificate file in PEM or DER format",
    )
    parser.add_argument(
        "--ignore-case",
        action="store_true",
        help="Compare hostnames case-insensitively (default: CERT_IDENTITY_CASE_SENSITIVE or exact)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log matching decisions at debug level",
    )
    args = parser.parse_args(argv)

    if args.verbose:
        configure_log_level(logging.DEBUG)

    try:
        config = VerifierConfig.from_env()
        if args.ignore_case:
            config.case_sensitive = False

        cert = load_certificate(args.cert.read_bytes())
        descriptor = descriptor_from_x509(cert)
        LOGGER.info("Loaded certificate: %s", args.cert)

        if verify_certificate(args.host, descriptor, config=config):
            LOGGER.info("Certificate identity matches host: %s", args.host)
            return EXIT_MATCH

        LOGGER.info("Certificate identity does not match host: %s", args.host)
        return EXIT_MISMATCH

    except FileNotFoundError as e:
        LOGGER.error("Certificate file not found: %s", e)
        return EXIT_ERROR
    except CertificateLoadError as e:
        LOGGER.error("Invalid certificate file: %s", e)
        return EXIT_ERROR
    except (InvalidArgument, ValueError) as e:
        LOGGER.error("Certificate identity check failed: %s", e)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
