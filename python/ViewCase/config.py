#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
This module handles non-volatile config options
for the screen test harness
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional, Union

from ViewCase import utils

logger = logging.getLogger("ViewCase.Config")

CONFIG_ENV_VAR = "VIEWCASE_CONFIG"


class Config:
    def __init__(self, config_file_path: Union[str, Path, None] = None):
        """
        load all settings from config file
        """
        # Set up session config items
        # These are transient
        self._session_config_dict: dict = {}
        self._explicit_path = config_file_path
        self.load_config()

    def _resolve_config_path(self) -> Path:
        if self._explicit_path is not None:
            return Path(self._explicit_path)
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            return Path(env_path)
        return Path(utils.data_dir, "config.json")

    def load_config(self):
        """
        Loads all config from disk useful if another
        process has changed config
        """
        self.config_file_path = self._resolve_config_path()
        self.default_file_path = utils.default_config_file

        if not os.path.exists(self.config_file_path):
            self._config_dict = {}
        else:
            with open(self.config_file_path, "r") as config_file:
                logger.info("Loading config from %s", self.config_file_path)
                self._config_dict = json.load(config_file)

        # open default default_config
        with open(self.default_file_path, "r") as config_file:
            self._default_config_dict = json.load(config_file)

    def dump_config(self):
        """
        Write config to config file
        """
        utils.create_path(self.config_file_path.parent)
        with open(self.config_file_path, "w") as config_file:
            json.dump(self._config_dict, config_file, indent=4)

    def set_option(self, option, value):
        if option.startswith("session."):
            self._session_config_dict[option] = value
        else:
            self._config_dict[option] = value
            self.dump_config()

    def get_option(self, option, default: Any = None):
        if option.startswith("session."):
            return self._session_config_dict.get(option, default)
        return self._config_dict.get(
            option, self._default_config_dict.get(option, default)
        )

    def __str__(self):
        return str(self._config_dict)

    def __repr__(self):
        return str(self._config_dict)


_config: Optional[Config] = None


def get_config() -> Config:
    """
    Returns the process wide config, loading it on
    first use
    """
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config(config: Optional[Config] = None) -> None:
    """
    Replace (or drop) the process wide config.
    Mostly useful in tests
    """
    global _config
    _config = config
