from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from app.config import DEFAULT_BASE_URL, load_config, load_site_config
from common.logger import JsonFormatter, setup_logger
from common.mongo.config import get_mongo_db_name, get_mongo_uri
from common.sql.config import get_database_url


def _write_config(directory: Path, text: str) -> Path:
    path = directory / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_site_config_strips_trailing_slash(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        "site:\n  base_url: https://example.com/\n  title: Portfolio\n  author: Tester\n",
    )

    site = load_site_config(path)

    assert site.base_url == "https://example.com"
    assert site.title == "Portfolio"
    assert site.author == "Tester"


def test_load_config_is_found_in_parent_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _write_config(tmp_path, "site:\n  base_url: https://example.com\n")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)

    assert load_config().site.base_url == "https://example.com"


def test_missing_site_section_uses_defaults(tmp_path: Path) -> None:
    path = _write_config(tmp_path, "")

    site = load_site_config(path)

    assert site.base_url == DEFAULT_BASE_URL
    assert site.title == "Portfolio"


@pytest.mark.parametrize(
    "text",
    [
        "site:\n  base_url: example.com\n",
        "site:\n  base_url: 42\n",
        "site: [1, 2]\n",
    ],
)
def test_invalid_site_config_raises(tmp_path: Path, text: str) -> None:
    path = _write_config(tmp_path, text)

    with pytest.raises(RuntimeError):
        load_site_config(path)


def test_store_urls_are_required(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MONGO_URI", raising=False)
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(RuntimeError, match="MONGO_URI"):
        get_mongo_uri()
    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        get_database_url()


def test_store_urls_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONGO_URI", "mongodb://localhost:27017/portfolio")
    monkeypatch.setenv("MONGO_DB_NAME", "  ")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///portfolio.db")

    assert get_mongo_uri() == "mongodb://localhost:27017/portfolio"
    assert get_mongo_db_name() is None
    assert get_database_url() == "sqlite:///portfolio.db"


def test_json_formatter_includes_trace_fields() -> None:
    record = logging.LogRecord(
        name="request_trace",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="completed request",
        args=(),
        exc_info=None,
    )
    record.request_id = "req-1"
    record.status = 200

    payload = json.loads(JsonFormatter().format(record))

    assert payload["message"] == "completed request"
    assert payload["level"] == "INFO"
    assert payload["request_id"] == "req-1"
    assert payload["status"] == 200


def test_setup_logger_does_not_stack_handlers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SERVICE_NAME", raising=False)

    setup_logger(name="portfolio-test", level="DEBUG")
    logger = setup_logger(name="portfolio-test", level="DEBUG")

    assert logger.name == "portfolio-test"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, JsonFormatter)
