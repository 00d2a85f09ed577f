"""
Error definitions for result normalization.

Rules:
- No silent failures: every problem surfaces as a NormalizationError
- No partial results: an error aborts the whole query conversion
- Transport failures belong to the query client, never raised here
"""

from typing import Any


class NormalizationError(Exception):
    """
    Raised when a query result cannot be converted to canonical rows.

    Carries a stable code plus free-form context for diagnostics.

    Usage:
        raise NormalizationError("INVALID_CONFIG", key="round_digits", value=-1)
    """

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {ctx_str}" if ctx_str else f"[{self.code}]"

    def to_dict(self) -> dict[str, Any]:
        """Code and context for logs."""
        return {
            "code": self.code,
            **self.context,
        }


class SchemaMismatchError(NormalizationError):
    """A batch schema is not contained in the declared query schema."""

    def __init__(self, expected: Any, actual: Any) -> None:
        super().__init__(ErrorCodes.SCHEMA_MISMATCH, expected=expected, actual=actual)

    def _format_message(self) -> str:
        return (
            f"[{self.code}] Schema mismatch. Previously had\n"
            f"{self.context['expected']}\n\nGot:\n{self.context['actual']}"
        )

    def to_dict(self) -> dict[str, Any]:
        """Schemas as text, for JSON logs."""
        return {
            "code": self.code,
            "expected": str(self.expected),
            "actual": str(self.actual),
        }

    @property
    def expected(self) -> Any:
        return self.context["expected"]

    @property
    def actual(self) -> Any:
        return self.context["actual"]


class UnsupportedCellEncodingError(NormalizationError):
    """The default formatter cannot render a column's physical type."""

    def __init__(self, data_type: Any, cause: Any = None) -> None:
        super().__init__(
            ErrorCodes.UNSUPPORTED_CELL_ENCODING,
            data_type=str(data_type),
            cause=str(cause) if cause is not None else None,
        )


class ConfigError(NormalizationError):
    """Invalid normalizer configuration value."""

    def __init__(self, key: str, value: Any, reason: str) -> None:
        super().__init__(ErrorCodes.INVALID_CONFIG, key=key, value=value, reason=reason)


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """Error code constants."""

    # === Conversion ===
    SCHEMA_MISMATCH = "SCHEMA_MISMATCH"
    UNSUPPORTED_CELL_ENCODING = "UNSUPPORTED_CELL_ENCODING"

    # === Configuration ===
    INVALID_CONFIG = "INVALID_CONFIG"
