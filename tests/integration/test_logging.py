import json
import subprocess
import sys
import textwrap
import logging

import pytest

import reeks
from reeks import Collection, Config, configure_logging


def _events(caplog, logger_name):
    events = []
    for record in caplog.records:
        if record.name == logger_name:
            events.append(json.loads(record.getMessage()))
    return events


def test_debug_events_for_eager_operations(caplog, reset_logging):
    configure_logging(Config({"logging": {"level": "DEBUG"}}))

    Collection([3, 1, 2]).sort_by().to_list()

    events = _events(caplog, "reeks.collection")
    names = [e["event"] for e in events]
    assert "sort_finished" in names
    assert "to_list_finished" in names
    sort_event = events[names.index("sort_finished")]
    assert sort_event["items"] == 3
    assert sort_event["level"] == "debug"


def test_stage_construction_is_logged(caplog, reset_logging):
    configure_logging(Config({"logging": {"level": "DEBUG"}}))

    def double(x):
        return x * 2

    Collection([1]).map_by(double)

    events = _events(caplog, "reeks.stages")
    assert {"stage": "map", "func": "double"}.items() <= events[-1].items()


def test_default_level_is_quiet(caplog, reset_logging):
    configure_logging()
    Collection([1, 2]).to_list()
    assert _events(caplog, "reeks.collection") == []


def test_errors_are_not_logged(caplog, reset_logging):
    configure_logging(Config({"logging": {"level": "DEBUG"}}))
    with pytest.raises(ZeroDivisionError):
        Collection([0]).map_by(lambda x: 1 / x).to_list()
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


def test_console_renderer(caplog, reset_logging):
    configure_logging(Config({"logging": {"level": "DEBUG", "renderer": "console"}}))
    Collection([1]).to_list()
    messages = [r.getMessage() for r in caplog.records if r.name == "reeks.collection"]
    assert any("to_list_finished" in m for m in messages)


@pytest.mark.parametrize(
    "settings",
    [{"level": "LOUD"}, {"renderer": "xml"}],
)
def test_configure_logging_rejects_unknown_settings(settings, reset_logging):
    with pytest.raises(ValueError):
        configure_logging(Config({"logging": settings}))


def test_configure_from_file(tmp_path, reset_logging):
    config_file = tmp_path / "reeks.yml"
    config_file.write_text("logging:\n  level: INFO\n")

    config = reeks.configure(str(config_file))
    assert config.get("logging.level") == "INFO"
    assert logging.getLogger("reeks").level == logging.INFO


# --- Host application isolation ---


def _run_python(code):
    result = subprocess.run(
        [sys.executable, "-c", textwrap.dedent(code)],
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout, result.stderr


def test_import_leaves_structlog_unconfigured():
    stdout, _ = _run_python(
        """
        import structlog
        before = structlog.is_configured()
        import reeks
        reeks.Collection([2, 1]).filter_by(bool).sort_by().to_list()
        print(before, structlog.is_configured())
        structlog.get_logger("app").info("app_event")
        """
    )
    assert stdout.splitlines()[0] == "False False"
    assert "app_event" in stdout


def test_configure_logging_leaves_structlog_unconfigured():
    stdout, _ = _run_python(
        """
        import structlog
        from reeks import Config, configure_logging
        configure_logging(Config({"logging": {"level": "DEBUG"}}))
        print(structlog.is_configured())
        """
    )
    assert stdout.strip() == "False"


def test_fallback_handler_used_without_root_handlers():
    _, stderr = _run_python(
        """
        from reeks import Collection, Config, configure_logging
        configure_logging(Config({"logging": {"level": "DEBUG"}}))
        Collection([3, 1, 2]).sort_by()
        """
    )
    assert stderr.count("sort_finished") == 1


def test_events_not_duplicated_when_root_has_a_handler():
    _, stderr = _run_python(
        """
        import logging
        from reeks import Collection, Config, configure_logging
        configure_logging(Config({"logging": {"level": "DEBUG"}}))
        logging.basicConfig(format="%(message)s")
        configure_logging(Config({"logging": {"level": "DEBUG"}}))
        Collection([3, 1, 2]).sort_by()
        """
    )
    assert stderr.count("sort_finished") == 1
