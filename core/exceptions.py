"""
Exception hierarchy for the assessment engine.

Incomplete inputs are not errors (see ``core.types.Incomplete``); these
exceptions cover contract violations and broken configuration only.
"""
from typing import Optional, Dict, Any


class AssessmentError(Exception):
    """Base exception for all assessment engine errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details
        }


class ContractViolation(AssessmentError):
    """Caller broke an input contract (wrong array length, unknown protocol)."""

    def __init__(
        self,
        message: str,
        protocol: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="CONTRACT_VIOLATION",
            details={"protocol": protocol, **(details or {})}
        )
        self.protocol = protocol


class ConfigError(AssessmentError):
    """Invalid or unreadable configuration."""

    def __init__(
        self,
        message: str,
        path: str = "config.toml",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="CONFIG_ERROR",
            details={"path": path, **(details or {})}
        )
        self.path = path
