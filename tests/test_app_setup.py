import logging
import sys

import pytest

from config import get_settings_module

from company_records.logging_config import PACKAGE_LOGGER, setup_logging
from company_records.main import create_app, load_settings, parse_args


@pytest.mark.parametrize(
    "env,module",
    [
        ("production", "config.production"),
        ("PROD", "config.production"),
        ("testing", "config.testing"),
        ("anything", "config.development"),
    ],
)
def test_get_settings_module(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == module


def test_setup_logging_does_not_duplicate_handlers(tmp_path):
    log_file = tmp_path / "app.log"
    setup_logging("debug", log_file=str(log_file))
    setup_logging(logging.INFO)

    logger = logging.getLogger(PACKAGE_LOGGER)
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1


def test_parse_args():
    args = parse_args(["--data-file", "x.txt", "--no-color", "--log-level", "DEBUG"])
    assert args.data_file == "x.txt"
    assert args.no_color is True
    assert args.log_level == "DEBUG"


def test_create_app_uses_data_file_override(monkeypatch, data_file):
    monkeypatch.setenv("APP_ENV", "testing")
    settings = load_settings()
    container = create_app(parse_args(["--data-file", str(data_file)]), settings)

    assert container.file_exists()
    assert [e.empno for e in container.employee_service.list_employees()] == [1, 2, 3]


def test_setup_logging_writes_to_stderr(tmp_path):
    setup_logging("INFO", log_file=str(tmp_path / "app.log"))

    handlers = logging.getLogger(PACKAGE_LOGGER).handlers
    assert [type(h) for h in handlers] == [logging.StreamHandler, logging.FileHandler]
    assert handlers[0].stream is sys.stderr
    setup_logging(logging.WARNING)
