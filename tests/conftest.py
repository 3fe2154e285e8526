# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Iterator

import pytest

from mensual import configuration
from mensual.repository.configuration import CONFIGURATION_REPO
from mensual.view import state as view_state


@pytest.fixture
def config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the configuration at a throwaway directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_dir)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_dir / "config.yaml")
    monkeypatch.delenv(configuration.LOG_LEVEL_ENV_VAR, raising=False)
    CONFIGURATION_REPO.reset()
    yield config_dir / "config.yaml"
    CONFIGURATION_REPO.reset()
    view_state.set_show_header(True)
