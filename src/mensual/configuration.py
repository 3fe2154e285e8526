# SPDX-License-Identifier: MIT

from typing import TypedDict

import platformdirs

APP_NAME = "mensual"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

LOG_LEVEL_ENV_VAR = "MENSUAL_LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Configuration(TypedDict):
    timeline_days: int
    timeline_hours: int
    granularity: str
    fun_font: bool
    show_header: bool
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "timeline_days": 7,
        "timeline_hours": 5,
        "granularity": "day",
        "fun_font": False,
        "show_header": True,
        "log_level": "WARNING",
    }
