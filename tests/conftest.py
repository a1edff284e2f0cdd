import json
import logging
from pathlib import Path

import pytest

from activity_console.core.config import Settings

SETTINGS_ENV_VARS = (
    "APP_NAME",
    "APP_ENV",
    "APP_ENVIRONMENT",
    "LOG_LEVEL",
    "ACTIVITY_PARAMS__MIN_NUMBER_OF_PARTICIPANTS",
    "ACTIVITY_PARAMS__MAX_NUMBER_OF_PARTICIPANTS",
    "BORED_CLIENT__USE_MOCK",
    "BORED_CLIENT__BASE_URL",
    "BORED_CLIENT__TIMEOUT_SECONDS",
)

BORED_TEST_URL = "https://bored.test/api/activity"


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def write_json(path: Path, data: dict) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def config_dir(tmp_path):
    write_json(
        tmp_path / "appsettings.json",
        {
            "log_level": "INFO",
            "activity_params": {
                "min_number_of_participants": 1,
                "max_number_of_participants": 5,
            },
            "bored_client": {
                "use_mock": True,
                "base_url": BORED_TEST_URL,
                "timeout_seconds": 5,
            },
        },
    )
    return tmp_path


@pytest.fixture
def make_settings():
    def _make(minimum: int = 1, maximum: int = 5, *, use_mock: bool = True) -> Settings:
        return Settings(
            activity_params={
                "min_number_of_participants": minimum,
                "max_number_of_participants": maximum,
            },
            bored_client={"use_mock": use_mock, "base_url": BORED_TEST_URL},
            _env_file=None,
        )

    return _make


@pytest.fixture
def bored_payload():
    return {
        "activity": "Learn how to play a new sport",
        "type": "recreational",
        "participants": 2,
        "price": 0.1,
        "link": "",
        "key": "5808228",
        "accessibility": 0.2,
    }
