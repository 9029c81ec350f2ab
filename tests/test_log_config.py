from __future__ import annotations

from collections import OrderedDict
from pathlib import Path
from typing import Iterator

import pytest

from saxon_options import Feature, SaxonOptions, prepare_saxon_configuration
from saxon_options.config import get_logging_environment
from saxon_options.core.resolver import PropertyConfiguration
from saxon_options.log_config import debug_verbose, verbose_log


@pytest.fixture(autouse=True)
def _reset_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for key in ("SAXON_OPTIONS_VERBOSE", "SAXON_OPTIONS_DEBUG", "SAXON_OPTIONS_LOG_FILE"):
        monkeypatch.delenv(key, raising=False)
    get_logging_environment.cache_clear()
    yield
    get_logging_environment.cache_clear()


def test_defaults_disable_logging(capsys: pytest.CaptureFixture[str]) -> None:
    env = get_logging_environment()

    verbose_log("label", "payload")
    debug_verbose("label", "payload")

    assert env.verbose is False
    assert env.debug is False
    assert env.log_file is None
    assert capsys.readouterr().err == ""


def test_debug_flag_writes_debug_lines_to_stderr(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("SAXON_OPTIONS_DEBUG", "yes")

    verbose_log("hidden", "payload")
    debug_verbose("shown", "payload")

    lines = capsys.readouterr().err.splitlines()
    assert len(lines) == 1
    assert lines[0].startswith("[DEBUG][")
    assert lines[0].endswith("] shown: payload")


def test_verbose_flag_writes_to_log_file(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    log_file = tmp_path / "logs" / "saxon-options.log"
    monkeypatch.setenv("SAXON_OPTIONS_VERBOSE", "on")
    monkeypatch.setenv("SAXON_OPTIONS_LOG_FILE", str(log_file))

    prepare_saxon_configuration(
        PropertyConfiguration(), SaxonOptions(warnings="bogus", xinclude="on")
    )

    content = log_file.read_text(encoding="utf-8")
    assert "[VERBOSE]" in content
    assert "ignoring unrecognized value: warnings='bogus'" in content
    assert "[DEBUG]" in content
    assert "xinclude -> http://saxon.sf.net/feature/xinclude-aware=True" in content


def test_malformed_flag_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SAXON_OPTIONS_VERBOSE", "maybe")

    with pytest.raises(RuntimeError):
        get_logging_environment()


def test_blank_values_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SAXON_OPTIONS_DEBUG", "   ")
    monkeypatch.setenv("SAXON_OPTIONS_LOG_FILE", "")

    env = get_logging_environment()

    assert env.debug is False
    assert env.log_file is None


def test_unwritable_log_file_falls_back_to_stderr(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setenv("SAXON_OPTIONS_VERBOSE", "on")
    monkeypatch.setenv("SAXON_OPTIONS_LOG_FILE", str(tmp_path))
    config = PropertyConfiguration()

    prepare_saxon_configuration(
        config,
        SaxonOptions(
            xinclude="on",
            collection_finder_class="collections.OrderedDict",
            line_numbering="on",
        ),
    )

    assert config.get_property(Feature.XINCLUDE) is True
    assert isinstance(config.get_property(Feature.COLLECTION_FINDER), OrderedDict)
    assert config.get_property(Feature.LINE_NUMBERING) is True
    err = capsys.readouterr().err
    assert "instantiated class: collection-finder-class -> collections.OrderedDict" in err
    assert "unavailable" in err
