"""Exceptions raised by certificate identity verification."""


class InvalidArgument(TypeError):
    """Argument does not satisfy the type contract of a public operation.

    Signals a caller bug, never an untrusted-input condition. It must not be
    caught and turned into a negative verdict.
    """

    def __init__(self, message: str, position: int = 0, name: str = "", expected: str = "") -> None:
        super().__init__(message)
        self.position = position
        self.name = name
        self.expected = expected

    @classmethod
    def create(cls, position: int, name: str, expected: str) -> "InvalidArgument":
        """Build the error with the canonical message.

        Example:
            Argument #1 ($host) must be of type string|string-convertible
        """
        message = f"Argument #{position} (${name}) must be of type {expected}"
        return cls(message, position=position, name=name, expected=expected)


class CertificateLoadError(ValueError):
    """PEM or DER certificate bytes could not be decoded."""
