# =============================================================================
# bridge/exceptions.py - Custom Exceptions
# =============================================================================
# Errors raised when the registry or engine is misused (unknown names,
# bad parameters). The core transforms never raise: an empty input to
# transform_safe() is an Err value, not an exception.
# Errors should tell HOW to fix, not just WHAT failed.
# =============================================================================

from typing import Any


class BridgeException(Exception):
    """
    Base exception for the bridge library.

    All custom exceptions inherit from this class.
    Carries a machine-readable code and an actionable suggestion.
    """

    def __init__(
        self,
        message: str,
        code: str = "BRIDGE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a plain dict for reporting."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Registry Exceptions
# =============================================================================

class UnknownTransformError(BridgeException):
    """Raised when a transform name isn't registered."""

    def __init__(self, name: str, available: list[str] | None = None):
        super().__init__(
            message=f"Unknown transform '{name}'",
            code="UNKNOWN_TRANSFORM",
            suggestion="Use list_transforms() to see the registered names",
            details={"name": name, "available": available or []}
        )


class DuplicateTransformError(BridgeException):
    """Raised when a second transform is registered under an existing name."""

    def __init__(self, name: str):
        super().__init__(
            message=f"Transform '{name}' is already registered",
            code="DUPLICATE_TRANSFORM",
            suggestion="Pick a different name for the new transform",
            details={"name": name}
        )


class InvalidParamsError(BridgeException):
    """Raised when a transform factory gets missing or malformed parameters."""

    def __init__(self, name: str, errors: list[str]):
        super().__init__(
            message=f"Invalid params for '{name}': {', '.join(errors)}",
            code="INVALID_PARAMS",
            suggestion="Check the transform's parameters with get_transform_info()",
            details={"name": name, "errors": errors}
        )
