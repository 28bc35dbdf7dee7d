import pytest

from sea_editor.config import EditorSettings
from sea_editor.runtime import telemetry


@pytest.fixture(autouse=True)
def quiet_telemetry():
    telemetry.configure(EditorSettings())
    yield
    telemetry.configure(EditorSettings())


def test_loggers_are_cached_until_reconfigured() -> None:
    first = telemetry.get_logger("sea_editor.tests")

    assert telemetry.get_logger("sea_editor.tests") is first

    telemetry.configure(EditorSettings(log_level="DEBUG"))

    assert telemetry.get_logger("sea_editor.tests") is not first


def test_span_yields_handle_with_metadata() -> None:
    with telemetry.span(
        "tests::span", component="tests", metadata={"token": b"ctrl+s"}
    ) as handle:
        handle.add_metadata("status", 3)

    assert handle.span_name == "tests::span"
    assert handle.component_name == "tests"
    assert handle.metadata == {"token": "ctrl+s", "status": "3"}


def test_span_reraises_errors_from_the_block() -> None:
    with pytest.raises(RuntimeError, match="boom"):
        with telemetry.span("tests::failing", component="tests"):
            raise RuntimeError("boom")


def test_record_event_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        telemetry.record_event("tests.event", level="nonsense")
