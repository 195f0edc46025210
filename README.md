# faultkit

faultkit is a small set of types for describing errors and the fixes you might
propose for them. It does not raise or catch anything itself. It gives you
structured records that you can attach to your own errors, log or report on.

## Installation

```
pip install faultkit
```

The package has no runtime dependencies. To install the test tools as well:

```
pip install "faultkit[test]"
```

## Modules

- `faultkit.kinds` holds the enumerations:
  - `ErrorSeverity` runs from `DEBUG` through `INFO`, `WARNING` and `ERROR`
    up to `CRITICAL`. Its members compare with `<` and `>` in that order.
  - `ErrorCategory`, `ErrorReportFormat`, `FixType` and `ParameterSource`.

  `str()` of any member gives a readable label. For example,
  `str(ErrorCategory.IO) == "IO"`, `str(ErrorReportFormat.JSON) == "JSON"` and
  `str(FixType.EXECUTE_COMMAND) == "Command Execution"`.
- `faultkit.fixes` holds `FixDetails`, the base class, and its frozen
  dataclass forms:
  - `TextReplace`, for a 1-based span in a file plus the replacement text.
  - `AddImport`, whose import statement lives in the field `import_`.
  - `AddCargoDependency`.
  - `ExecuteCommand`.
  - `SuggestCommand`.
  - `SuggestCodeChange`.

  File paths given as strings are stored as `pathlib.Path`, except in
  `AddImport`. Lists of features or arguments are stored as tuples.
- `faultkit.context` holds:
  - `ErrorSource`, `ErrorLocation`, `MacroExpansion` and `DiagnosticResult`.
    These are frozen dataclasses, and their `with_*` methods return copies.
  - `ErrorContext`, which takes a message and defaults to severity `ERROR`
    with a UTC timestamp. Its `with_*` methods and `add_tag` return new
    contexts and leave the original unchanged. `add_metadata` changes the
    context in place.
- `faultkit.correction` holds:
  - `Autocorrection`, which is frozen. Its `with_*` methods and `add_command`
    return copies, and `commands_to_apply` is a tuple.
  - `ExtractedParameters`, which is mutable. Its setters return `self`, so
    calls can be chained.
  - `FixTemplate`.

## Example

```python
from faultkit.kinds import ErrorSeverity, FixType, ParameterSource
from faultkit.context import ErrorContext, ErrorSource
from faultkit.correction import Autocorrection, ExtractedParameters, FixTemplate

context = (
    ErrorContext("Test error")
    .with_severity(ErrorSeverity.WARNING)
    .with_source_location(ErrorSource("src/main.rs", 42, "main").with_column(10))
    .with_metadata("request_id", "123456")
    .add_tag("security")
)

fix = Autocorrection("Fix parse error", FixType.TEXT_REPLACEMENT, 0.85).add_command("cargo check")
# fix.commands_to_apply == ("cargo check",)

params = ExtractedParameters.with_source(ParameterSource.ERROR_MESSAGE, 0.8)
params.add_parameter("path", "/tmp/config.json")

template = FixTemplate("Create missing file {path}", FixType.EXECUTE_COMMAND, 0.9)
template.add_command_template("touch {path}")
suggestion = template.apply(params)
# suggestion.description == "Create missing file /tmp/config.json"
# suggestion.commands_to_apply == ("touch /tmp/config.json",)
# suggestion.confidence == 0.9 * 0.8
```

`FixTemplate.apply` replaces each `{name}` with the matching parameter value.
Placeholders that have no matching parameter are left as they are.

## Merging extracted parameters

`ExtractedParameters.merge(other)` depends on how the two confidences compare:

- If `other` has a lower confidence, nothing changes.
- If the confidences are equal, only keys that are missing are added.
- If `other` has a higher confidence, its values replace existing ones, and
  its confidence and source are taken over.

## What faultkit does not do

faultkit only describes errors and fixes. It does not:

- provide an exception type of its own;
- work out the category of an error;
- render reports in the formats named by `ErrorReportFormat`;
- generate fixes automatically or apply them;
- run the commands that an `ExecuteCommand` or `SuggestCommand` describes.

## Running the tests

```
pytest
```