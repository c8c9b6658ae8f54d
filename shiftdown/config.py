"""
Configuration Management
========================

Locates and loads the ShiftDown settings file. The file sits next to the
running program and shares its name: a service started from
`/opt/shiftdown/ShiftDown.exe` reads `/opt/shiftdown/ShiftDown.xml`.

A missing file is normal and yields the built-in defaults. A file that exists
but cannot be read, parsed or bound raises `ConfigurationError`; whether the
service then refuses to start is up to the caller.

Usage:
    python -m shiftdown.config --file /opt/shiftdown/ShiftDown.xml
"""

import argparse
import sys
from pathlib import Path
from typing import Optional, Union

from shiftdown.binding import bind, parse_document, to_xml
from shiftdown.errors import ConfigurationError
from shiftdown.settings import Settings
from shiftdown.utils.logger import get_logger

logger = get_logger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[1]
CONFIG_EXTENSION = ".xml"


def program_path() -> Path:
    """Location of the running program: the frozen executable or the main script."""
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve()
    main = sys.argv[0] if sys.argv else ""
    if not main or main == "-c":
        # interactive interpreter
        return PROJECT_ROOT / "shiftdown"
    return Path(main).resolve()


def settings_path(program: Optional[Union[str, Path]] = None) -> Path:
    program = Path(program) if program is not None else program_path()
    return program.with_name(program.stem + CONFIG_EXTENSION)


def load(path: Optional[Union[str, Path]] = None) -> Settings:
    path = Path(path) if path is not None else settings_path()

    if not path.is_file():
        logger.info(f"No settings file at {path}, using defaults.")
        return Settings()

    logger.info(f"Loading settings from {path}")
    try:
        with open(path, "rb") as f:
            settings = bind(parse_document(f))
    except Exception as e:
        error = ConfigurationError.from_exception(e)
        logger.error(error.message)
        raise error from e

    logger.info(
        f"Settings loaded: workers={settings.workers}, "
        f"processLoadMax={settings.process_load_max}, "
        f"normalizationTime={settings.normalization_time}"
    )
    return settings


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Validate a ShiftDown settings file.")
    parser.add_argument(
        "--file",
        type=Path,
        required=True,
        help="Settings file to check, e.g. /opt/shiftdown/ShiftDown.xml",
    )
    args = parser.parse_args(argv)

    try:
        settings = load(args.file)
    except ConfigurationError:
        return 1

    logger.info(f"Effective settings:\n{to_xml(settings)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
