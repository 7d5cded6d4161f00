from __future__ import annotations

import argparse
import importlib
import logging
from types import ModuleType
from typing import Optional, Sequence

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_DATA_FILE
from .logging_config import setup_logging
from .menu.controller import MenuController

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="company-records",
        description="Manage employees and departments stored in a flat text file.",
    )
    parser.add_argument("--data-file", help="Path to the data file (overrides DATA_FILE)")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ...")
    parser.add_argument("--log-file", help="Also write logs to this file")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    return parser.parse_args(argv)


def load_settings() -> ModuleType:
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())


def create_app(args: argparse.Namespace, settings: ModuleType) -> Container:
    setup_logging(
        level=args.log_level or getattr(settings, "LOG_LEVEL", "WARNING"),
        log_file=args.log_file or getattr(settings, "LOG_FILE", None),
    )

    data_file = args.data_file or getattr(settings, "DATA_FILE", DEFAULT_DATA_FILE)
    logger.info("settings=%s data_file=%s", settings.__name__, data_file)
    return build_container(data_file=data_file)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    settings = load_settings()
    container = create_app(args, settings)

    color = bool(getattr(settings, "USE_COLOR", True)) and not args.no_color
    MenuController(container, color=color).run()


if __name__ == "__main__":
    main()
