"""Enumerations that classify errors, reports, fixes and parameter origins."""

from __future__ import annotations

import enum
import functools


@functools.total_ordering
class ErrorSeverity(enum.Enum):
    """Severity level for errors, ordered from least to most severe."""

    DEBUG = "Debug"
    INFO = "Info"
    WARNING = "Warning"
    ERROR = "Error"
    CRITICAL = "Critical"

    @property
    def _rank(self) -> int:
        return list(type(self)).index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ErrorSeverity):
            return NotImplemented
        return self._rank < other._rank

    def __str__(self) -> str:
        return self.value


class ErrorCategory(enum.Enum):
    """Broad category an error belongs to."""

    IO = "IO"
    PARSING = "Parsing"
    NETWORK = "Network"
    CONFIGURATION = "Configuration"
    VALIDATION = "Validation"
    INTERNAL = "Internal"
    CIRCUIT_BREAKER = "Circuit Breaker"
    TIMEOUT = "Timeout"
    RESOURCE_EXHAUSTION = "Resource Exhaustion"
    NOT_FOUND = "Not Found"
    CONCURRENCY = "Concurrency"
    EXTERNAL_SERVICE = "External Service"
    AUTHENTICATION = "Authentication"
    AUTHORIZATION = "Authorization"
    STATE_CONFLICT = "State Conflict"
    MULTIPLE = "Multiple Errors"
    STYLE = "Style"
    RUNTIME = "Runtime"
    UNSPECIFIED = "Unspecified"

    def __str__(self) -> str:
        return self.value


class ErrorReportFormat(enum.Enum):
    """Output format for error reports."""

    PLAIN = "Plain"
    JSON = "JSON"
    MARKDOWN = "Markdown"
    HTML = "HTML"

    def __str__(self) -> str:
        return self.value


class FixType(enum.Enum):
    """Nature of a proposed autocorrection."""

    TEXT_REPLACEMENT = "Text Replacement"
    AST_MODIFICATION = "AST Modification"
    ADD_IMPORT = "Add Import"
    ADD_DEPENDENCY = "Add Dependency"
    CONFIGURATION_CHANGE = "Configuration Change"
    EXECUTE_COMMAND = "Command Execution"
    REFACTOR = "Code Refactoring"
    MANUAL_INTERVENTION_REQUIRED = "Manual Intervention Required"
    INFORMATION = "Information"
    UPDATE_CARGO_TOML = "Update Cargo.toml"
    RUN_CARGO_COMMAND = "Run Cargo Command"
    SUGGEST_ALTERNATIVE_METHOD = "Suggest Alternative Method"

    def __str__(self) -> str:
        return self.value


class ParameterSource(enum.Enum):
    """Where a set of extracted parameters came from."""

    ERROR_MESSAGE = "ErrorMessage"
    ERROR_CONTEXT = "ErrorContext"
    DIAGNOSTIC_INFO = "DiagnosticInfo"
    BACKTRACE = "Backtrace"
    SOURCE_CODE = "SourceCode"
    MANUAL = "Manual"

    def __str__(self) -> str:
        return self.value