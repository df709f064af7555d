"""Exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["IPv6Error", "IPv6ParseError"]


class IPv6Error(Exception):
    """Base exception for all ipv6literal errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize IPv6Error.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class IPv6ParseError(IPv6Error):
    """An address literal failed to parse.

    Returned (not raised) by ``parse_ipv6`` and ``parse_h16`` in their
    errors tuple; callers who prefer exceptions can raise it directly.

    Attributes:
        input_value: The string that failed to parse
        position: Character offset of the failure
        code: Failure kind

    Example:
        >>> groups, errors = parse_ipv6("::999.1.1.1")
        >>> if errors:
        ...     print(errors[0].code.name, errors[0].position)
        OCTET_OUT_OF_RANGE 2
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        position: int = 0,
        code: DiagnosticCode | None = None,
    ) -> None:
        """Initialize IPv6ParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The string that failed to parse
            position: Character offset of the failure
            code: Failure kind (taken from the diagnostic when omitted)
        """
        super().__init__(message)
        self.input_value = input_value
        self.position = position
        if code is None and self.diagnostic is not None:
            code = self.diagnostic.code
        self.code = code

    def __repr__(self) -> str:
        code = self.code.name if self.code is not None else None
        return f"IPv6ParseError(code={code}, position={self.position}, message={str(self)!r})"
