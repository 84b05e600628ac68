from __future__ import annotations

import logging
import os
import sys

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
PACKAGE_LOGGER = "pwgen"
_TRUTHY = ("1", "true", "yes", "on")


def env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


def setup_logging(verbose: bool = False) -> None:
    # Install a stderr handler only when the host has none; the package level is applied every time.
    if not logging.getLogger().handlers:
        logging.basicConfig(stream=sys.stderr, format=LOG_FORMAT)

    level = logging.DEBUG if verbose or env_flag("PWGEN_VERBOSE") else logging.WARNING
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
