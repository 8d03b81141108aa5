"""Verifier configuration dataclasses."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

CASE_SENSITIVE_ENV_VAR = "CERT_IDENTITY_CASE_SENSITIVE"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass
class VerifierConfig:
    """Hostname verification settings.

    case_sensitive: compare host and certificate identities exactly (default).
        When False, both sides are lower-cased before comparison, following
        the DNS convention that names are case-insensitive.
    """

    case_sensitive: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "VerifierConfig":
        """Build config from CERT_IDENTITY_* environment variables.

        Raises:
            ValueError: If a variable holds an unrecognised boolean value
        """
        env = os.environ if environ is None else environ
        raw = env.get(CASE_SENSITIVE_ENV_VAR)
        if raw is None or raw.strip() == "":
            return cls()

        value = raw.strip().lower()
        if value in _TRUE_VALUES:
            return cls(case_sensitive=True)
        if value in _FALSE_VALUES:
            return cls(case_sensitive=False)
        raise ValueError(f"{CASE_SENSITIVE_ENV_VAR} must be a boolean, got '{raw}'")
