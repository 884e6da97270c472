# tests/test_config.py

from __future__ import annotations

import logging
import os
from dataclasses import replace
from pathlib import Path

import pytest

from tasklift.config import Settings, fallback_namespace_label
from tasklift.logging_setup import level_from_name, setup_logging_from_settings


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in list(os.environ):
        if name.startswith("TASKLIFT_"):
            monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    s = Settings.from_env(load_env_file=False)

    assert s.source_name == "wunderlist"
    assert s.fallback_namespace_name == "Migrated from wunderlist"
    assert s.strict_references is True
    assert s.fetch_concurrency == 4
    assert s.fetch_timeout_seconds == 30.0
    assert s.max_attempts == 1


def test_env_overrides(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("TASKLIFT_SOURCE_NAME", "todoist")
    clean_env.setenv("TASKLIFT_STRICT_REFERENCES", "no")
    clean_env.setenv("TASKLIFT_FETCH_CONCURRENCY", "0")
    clean_env.setenv("TASKLIFT_FETCH_TIMEOUT_SECONDS", "not-a-number")
    clean_env.setenv("TASKLIFT_MAX_ATTEMPTS", "3")
    clean_env.setenv("TASKLIFT_LOG_DIR", "/tmp/tasklift-logs")

    s = Settings.from_env(load_env_file=False)

    assert s.fallback_namespace_name == "Migrated from todoist"
    assert s.strict_references is False
    assert s.fetch_concurrency == 1
    assert s.fetch_timeout_seconds == 30.0
    assert s.max_attempts == 3
    assert s.log_dir == Path("/tmp/tasklift-logs")


def test_template_without_placeholder_is_literal(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("TASKLIFT_FALLBACK_NAMESPACE_TEMPLATE", "Imported {stuff}")
    assert Settings.from_env(load_env_file=False).fallback_namespace_name == "Imported {stuff}"


def test_fallback_label() -> None:
    assert fallback_namespace_label("trello", "From {source} (archive)") == "From trello (archive)"


def test_template_keeps_unknown_placeholders_literal(clean_env: pytest.MonkeyPatch, settings: Settings) -> None:
    template = "Migrated from {source} {year}"
    assert replace(settings, fallback_namespace_template=template).fallback_namespace_name == (
        "Migrated from wunderlist {year}"
    )

    clean_env.setenv("TASKLIFT_FALLBACK_NAMESPACE_TEMPLATE", template)
    assert Settings.from_env(load_env_file=False).fallback_namespace_name == "Migrated from wunderlist {year}"


def test_setup_logging_writes_file(settings: Settings) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        log_file = setup_logging_from_settings(settings)
        assert log_file.parent == settings.log_dir
        logging.getLogger("tasklift.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert "hello file" in log_file.read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)


def test_level_from_name() -> None:
    assert level_from_name("debug") == logging.DEBUG
    assert level_from_name("bogus") == logging.INFO
    assert level_from_name(None, logging.ERROR) == logging.ERROR
