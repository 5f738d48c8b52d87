"""
This module applies the logging configuration for ViewCase

The configuration is a json5 file (comments and trailing commas allowed)
fed to `logging.config.dictConfig`.  Module loggers are named
`ViewCase.<Area>` so the whole harness can be tuned from one key.
"""

import logging
import logging.config
from pathlib import Path
from typing import TextIO, Union

import json5

from ViewCase import utils

logger = logging.getLogger("ViewCase.Logging")


def get_log_conf_file(log_conf: Union[str, Path, None] = None) -> Path:
    """
    Resolve the logging config file to use, falling back
    to the one bundled with the package
    """
    if log_conf is None:
        return utils.default_logconf_file
    return Path(log_conf)


def read_config(file: TextIO) -> None:
    """
    Read logging configuration from the specified file handle and apply it.
    """
    config = json5.load(file)
    logging.config.dictConfig(config)


def apply_config(log_conf: Union[str, Path, None] = None) -> Path:
    """
    Apply the logging config at log_conf, or the bundled
    one when log_conf is None.  Returns the path applied.
    """
    log_conf_file = get_log_conf_file(log_conf)
    if not log_conf_file.exists():
        raise FileNotFoundError(
            f"Logging configuration file {log_conf_file} does not exist."
        )

    with open(log_conf_file, "r") as f:
        read_config(f)

    # Pillow registers image plugins at DEBUG on first use
    logging.getLogger("PIL.PngImagePlugin").setLevel(logging.WARNING)
    logger.debug("Applied logging config %s", log_conf_file)
    return log_conf_file
