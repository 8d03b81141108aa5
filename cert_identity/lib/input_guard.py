"""Argument type checks for verify_certificate."""

from collections.abc import Mapping, Sequence
from typing import Any

from .errors import InvalidArgument

HOST_TYPES = "string|string-convertible"
CERTIFICATE_TYPES = "mapping|key-indexable"

_BYTES_LIKE = (bytes, bytearray, memoryview)


def is_string_convertible(value: Any) -> bool:
    """Return True for str or objects whose class defines its own __str__.

    Numbers, None and containers only inherit object.__str__ and are rejected.
    Other types with a dedicated __str__ are accepted, so Decimal("1") and
    exception instances qualify while int and float do not. Bytes-like values
    define __str__ but are rejected, since str() yields their repr.
    """
    if isinstance(value, str):
        return True
    if isinstance(value, _BYTES_LIKE):
        return False
    return type(value).__str__ is not object.__str__


def is_key_indexable(value: Any) -> bool:
    """Return True for mappings and other objects with key lookup semantics.

    Sequences and strings support `in` and `[]` too, but index by position,
    so they do not qualify. Classes are rejected too: dict itself carries
    the dunders, but only its instances are key-indexable.
    """
    if isinstance(value, Mapping):
        return True
    if isinstance(value, (str, Sequence, *_BYTES_LIKE)):
        return False
    if isinstance(value, type):
        return False
    value_type = type(value)
    return hasattr(value_type, "__getitem__") and hasattr(value_type, "__contains__")


def ensure_host(host: Any) -> str:
    """Validate host argument and return it converted to str.

    Raises:
        InvalidArgument: If host is neither a string nor string-convertible
    """
    if not is_string_convertible(host):
        raise InvalidArgument.create(1, "host", HOST_TYPES)
    return str(host)


def ensure_certificate(certificate: Any) -> Any:
    """Validate certificate argument.

    Raises:
        InvalidArgument: If certificate is not key-indexable
    """
    if not is_key_indexable(certificate):
        raise InvalidArgument.create(2, "certificate", CERTIFICATE_TYPES)
    return certificate
