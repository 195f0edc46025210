from datetime import datetime, timedelta, timezone

from faultkit.context import (
    DiagnosticResult,
    ErrorContext,
    ErrorLocation,
    ErrorSource,
    MacroExpansion,
)
from faultkit.kinds import ErrorSeverity


def test_error_source_basic():
    source = ErrorSource("src/main.rs", 42, "main")
    assert source.file == "src/main.rs"
    assert source.line == 42
    assert source.module_path == "main"
    assert source.column is None
    assert source.function is None


def test_error_source_builders():
    source = ErrorSource("src/main.rs", 42, "main").with_column(10).with_function(
        "process_data"
    )
    assert source.file == "src/main.rs"
    assert source.line == 42
    assert source.module_path == "main"
    assert source.column == 10
    assert source.function == "process_data"


def test_error_source_builder_leaves_original():
    original = ErrorSource("a.rs", 1, "m")
    changed = original.with_column(3)
    assert original.column is None
    assert changed.column == 3
    assert changed == ErrorSource("a.rs", 1, "m", column=3)


def test_error_location():
    location = ErrorLocation("src/main.rs", 42, 10, "process_data")
    assert location.file == "src/main.rs"
    assert location.line == 42
    assert location.column == 10
    assert location.function_context == "process_data"
    assert location.decrust_variant is None

    location = location.with_snafu_variant("IoError")
    assert location.decrust_variant == "IoError"


def test_diagnostic_result():
    diagnostic = DiagnosticResult(
        primary_location=ErrorLocation("src/main.rs", 42, 10, "process_data"),
        expansion_trace=[],
        suggested_fixes=["Add semicolon at the end of line"],
        original_message="Expected ';', found '}'",
        diagnostic_code="E0001",
    )
    assert diagnostic.primary_location == ErrorLocation(
        "src/main.rs", 42, 10, "process_data"
    )
    assert len(diagnostic.expansion_trace) == 0
    assert len(diagnostic.suggested_fixes) == 1
    assert diagnostic.suggested_fixes[0] == "Add semicolon at the end of line"
    assert diagnostic.original_message == "Expected ';', found '}'"
    assert diagnostic.diagnostic_code == "E0001"


def test_diagnostic_result_defaults_and_trace():
    site = ErrorLocation("lib.rs", 5, 1, "expand")
    step = MacroExpansion("my_macro", site, "let x = 1;")
    diagnostic = DiagnosticResult(expansion_trace=[step])
    assert diagnostic.primary_location is None
    assert diagnostic.expansion_trace == (step,)
    assert diagnostic.expansion_trace[0].macro_name == "my_macro"
    assert diagnostic.suggested_fixes == ()


def test_error_context_defaults():
    before = datetime.now(timezone.utc)
    context = ErrorContext("Test error")
    assert context.message == "Test error"
    assert context.severity == ErrorSeverity.ERROR
    assert context.source_location is None
    assert context.recovery_suggestion is None
    assert context.metadata == {}
    assert context.correlation_id is None
    assert context.component is None
    assert context.tags == []
    assert context.diagnostic_info is None
    assert context.timestamp is not None
    assert before - timedelta(seconds=1) <= context.timestamp <= datetime.now(
        timezone.utc
    ) + timedelta(seconds=1)


def test_error_context_building():
    context = (
        ErrorContext("Test error")
        .with_severity(ErrorSeverity.WARNING)
        .with_recovery_suggestion("Try again")
        .with_metadata("request_id", "123456")
        .with_correlation_id("corr-789")
        .with_component("auth_service")
        .add_tag("security")
    )
    assert context.message == "Test error"
    assert context.severity == ErrorSeverity.WARNING
    assert context.recovery_suggestion == "Try again"
    assert context.metadata.get("request_id") == "123456"
    assert context.correlation_id == "corr-789"
    assert context.component == "auth_service"
    assert len(context.tags) == 1
    assert context.tags[0] == "security"


def test_error_context_builders_do_not_alter_original():
    base = ErrorContext("base")
    tagged = base.add_tag("a").with_metadata("k", "v")
    assert base.tags == []
    assert base.metadata == {}
    assert tagged.tags == ["a"]
    assert tagged.metadata == {"k": "v"}


def test_error_context_source_and_diagnostic():
    source = ErrorSource("src/main.rs", 7, "main")
    diagnostic = DiagnosticResult(diagnostic_code="E0308")
    context = (
        ErrorContext("oops")
        .with_source_location(source)
        .with_diagnostic_info(diagnostic)
    )
    assert context.source_location == source
    assert context.diagnostic_info.diagnostic_code == "E0308"


def test_add_metadata_in_place():
    context = ErrorContext("oops")
    context.add_metadata("user", "alice")
    context.add_metadata("user", "bob")
    assert context.metadata == {"user": "bob"}


def test_tags_accumulate_in_order():
    context = ErrorContext("x").add_tag("one").add_tag("two")
    assert context.tags == ["one", "two"]