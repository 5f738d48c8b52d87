import pytest

from ViewCase.config import Config, reset_config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path):
    """Keep tests away from the user's ~/ViewCase_data config"""
    config = Config(tmp_path / "config.json")
    reset_config(config)
    yield config
    reset_config()
