"""Proposed autocorrections, extracted parameters and templates that build fixes."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional

from faultkit.fixes import FixDetails
from faultkit.kinds import FixType, ParameterSource


@dataclass(frozen=True)
class Autocorrection:
    """A proposed fix for an error.

    The ``with_*`` methods and ``add_command`` return a new instance.
    """

    description: str
    fix_type: FixType
    confidence: float
    details: Optional[FixDetails] = None
    diff_suggestion: Optional[str] = None
    commands_to_apply: tuple[str, ...] = ()
    targets_error_code: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "commands_to_apply", tuple(self.commands_to_apply))

    def with_details(self, details: FixDetails) -> Autocorrection:
        """Return a copy carrying detailed instructions for the fix."""
        return replace(self, details=details)

    def with_diff_suggestion(self, diff: str) -> Autocorrection:
        """Return a copy carrying a diff-style view of the change."""
        return replace(self, diff_suggestion=diff)

    def add_command(self, command: str) -> Autocorrection:
        """Return a copy with one more command that applies the fix."""
        return replace(self, commands_to_apply=(*self.commands_to_apply, command))

    def with_target_error_code(self, code: str) -> Autocorrection:
        """Return a copy naming the error code this fix addresses."""
        return replace(self, targets_error_code=code)


@dataclass
class ExtractedParameters:
    """Named values pulled out of an error, with a confidence and an origin.

    The mutating methods return ``self`` so calls can be chained.
    """

    values: dict[str, str] = field(default_factory=dict)
    confidence: float = 0.0
    source: ParameterSource = ParameterSource.MANUAL

    @classmethod
    def with_source(
        cls, source: ParameterSource, confidence: float
    ) -> ExtractedParameters:
        """Create an empty set with the given origin and confidence."""
        return cls(confidence=confidence, source=source)

    def add_parameter(self, key: str, value: str) -> ExtractedParameters:
        """Store a parameter, replacing any previous value for the key."""
        self.values[key] = value
        return self

    def set_confidence(self, confidence: float) -> ExtractedParameters:
        """Set the confidence level."""
        self.confidence = confidence
        return self

    def set_source(self, source: ParameterSource) -> ExtractedParameters:
        """Set where the parameters came from."""
        self.source = source
        return self

    def merge(self, other: ExtractedParameters) -> ExtractedParameters:
        """Fold in another set if it is at least as confident as this one.

        With equal confidence only keys not yet present are added; with higher
        confidence the other set's values win and its confidence and source
        are adopted.
        """
        if other.confidence < self.confidence:
            return self
        higher = other.confidence > self.confidence
        for key, value in other.values.items():
            if higher or key not in self.values:
                self.values[key] = value
        if higher:
            self.confidence = other.confidence
            self.source = other.source
        return self


@dataclass
class FixTemplate:
    """Template from which autocorrections are built by filling in ``{name}`` holes."""

    description_template: str
    fix_type: FixType
    base_confidence: float
    command_templates: list[str] = field(default_factory=list)

    def add_command_template(self, template: str) -> FixTemplate:
        """Append a command template and return this template."""
        self.command_templates.append(template)
        return self

    def apply(self, params: ExtractedParameters) -> Autocorrection:
        """Fill in the templates with ``params`` and build an autocorrection."""
        return Autocorrection(
            description=_fill(self.description_template, params.values),
            fix_type=self.fix_type,
            confidence=self.base_confidence * params.confidence,
            commands_to_apply=tuple(
                _fill(template, params.values) for template in self.command_templates
            ),
        )


def _fill(template: str, values: dict[str, str]) -> str:
    result = template
    for key, value in values.items():
        result = result.replace(f"{{{key}}}", value)
    return result