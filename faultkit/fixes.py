"""Detailed descriptions of how a proposed fix is to be carried out."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path


class FixDetails:
    """Base of every kind of fix detail."""

    __slots__ = ()


def _as_path(value: str | Path) -> Path:
    return value if isinstance(value, Path) else Path(value)


@dataclass(frozen=True)
class TextReplace(FixDetails):
    """Replace a span of text in a file; positions are 1-based."""

    file_path: Path
    line_start: int
    column_start: int
    line_end: int
    column_end: int
    original_text_snippet: str | None
    replacement_text: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "file_path", _as_path(self.file_path))


@dataclass(frozen=True)
class AddImport(FixDetails):
    """Add an import statement to a file."""

    file_path: str
    import_: str


@dataclass(frozen=True)
class AddCargoDependency(FixDetails):
    """Add a dependency to the project manifest."""

    dependency: str
    version: str
    features: tuple[str, ...] = field(default_factory=tuple)
    is_dev_dependency: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "features", tuple(self.features))


@dataclass(frozen=True)
class ExecuteCommand(FixDetails):
    """Run a command to fix the issue."""

    command: str
    args: tuple[str, ...] = field(default_factory=tuple)
    working_directory: Path | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))
        if self.working_directory is not None:
            object.__setattr__(
                self, "working_directory", _as_path(self.working_directory)
            )


@dataclass(frozen=True)
class SuggestCommand(FixDetails):
    """Suggest a command for the user to run."""

    command: str
    explanation: str


@dataclass(frozen=True)
class SuggestCodeChange(FixDetails):
    """Suggest a code change without applying it."""

    file_path: Path
    line_hint: int
    suggested_code_snippet: str
    explanation: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "file_path", _as_path(self.file_path))


def _ensure_iterable(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(values)