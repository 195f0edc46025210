"""Structured context that travels with an error: locations, diagnostics and metadata."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Optional

from faultkit.kinds import ErrorSeverity


@dataclass(frozen=True)
class ErrorSource:
    """Source location where an error was raised."""

    file: str
    line: int
    module_path: str
    column: Optional[int] = None
    function: Optional[str] = None

    def with_column(self, column: int) -> ErrorSource:
        """Return a copy carrying a column number."""
        return replace(self, column=column)

    def with_function(self, function: str) -> ErrorSource:
        """Return a copy carrying the name of the enclosing function."""
        return replace(self, function=function)


@dataclass(frozen=True)
class ErrorLocation:
    """Exact location used for diagnostics."""

    file: str
    line: int
    column: int
    function_context: str
    decrust_variant: Optional[str] = None

    def with_snafu_variant(self, variant: str) -> ErrorLocation:
        """Return a copy naming the error variant raised at this location."""
        return replace(self, decrust_variant=variant)


@dataclass(frozen=True)
class MacroExpansion:
    """One step in a macro expansion trace."""

    macro_name: str
    expansion_site: ErrorLocation
    generated_code_snippet: str


@dataclass(frozen=True)
class DiagnosticResult:
    """Detailed diagnostic information gathered for an error."""

    primary_location: Optional[ErrorLocation] = None
    expansion_trace: tuple[MacroExpansion, ...] = ()
    suggested_fixes: tuple[str, ...] = ()
    original_message: Optional[str] = None
    diagnostic_code: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "expansion_trace", tuple(self.expansion_trace))
        object.__setattr__(self, "suggested_fixes", tuple(self.suggested_fixes))


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(eq=False)
class ErrorContext:
    """Message plus structured context describing an error.

    The ``with_*`` methods and ``add_tag`` return a new context and leave the
    original untouched; ``add_metadata`` updates this context in place.
    """

    message: str
    source_location: Optional[ErrorSource] = None
    recovery_suggestion: Optional[str] = None
    metadata: dict[str, str] = field(default_factory=dict)
    severity: ErrorSeverity = ErrorSeverity.ERROR
    timestamp: Optional[datetime] = field(default_factory=_now)
    correlation_id: Optional[str] = None
    component: Optional[str] = None
    tags: list[str] = field(default_factory=list)
    diagnostic_info: Optional[DiagnosticResult] = None

    def _copy(self, **changes: object) -> ErrorContext:
        changes.setdefault("metadata", dict(self.metadata))
        changes.setdefault("tags", list(self.tags))
        return replace(self, **changes)

    def with_severity(self, severity: ErrorSeverity) -> ErrorContext:
        """Return a copy with the given severity."""
        return self._copy(severity=severity)

    def with_source_location(self, source_location: ErrorSource) -> ErrorContext:
        """Return a copy carrying the given source location."""
        return self._copy(source_location=source_location)

    def with_recovery_suggestion(self, suggestion: str) -> ErrorContext:
        """Return a copy carrying a suggestion for recovery."""
        return self._copy(recovery_suggestion=suggestion)

    def with_metadata(self, key: str, value: str) -> ErrorContext:
        """Return a copy with one more metadata entry."""
        metadata = dict(self.metadata)
        metadata[key] = value
        return self._copy(metadata=metadata)

    def with_correlation_id(self, id: str) -> ErrorContext:  # noqa: A002
        """Return a copy carrying a correlation id."""
        return self._copy(correlation_id=id)

    def with_component(self, component: str) -> ErrorContext:
        """Return a copy naming the component where the error occurred."""
        return self._copy(component=component)

    def add_tag(self, tag: str) -> ErrorContext:
        """Return a copy with one more tag."""
        return self._copy(tags=[*self.tags, tag])

    def with_diagnostic_info(self, diagnostic: DiagnosticResult) -> ErrorContext:
        """Return a copy carrying diagnostic information."""
        return self._copy(diagnostic_info=diagnostic)

    def add_metadata(self, key: str, value: str) -> None:
        """Add a metadata entry to this context in place."""
        self.metadata[key] = value