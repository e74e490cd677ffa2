import json
import logging

import pytest

from clubranking.config import ClubConfig, load_config
from clubranking.exceptions import InvalidConfigurationException


def test_defaults(monkeypatch):
    monkeypatch.delenv("CLUBRANKING_DATA_DIR", raising=False)
    config = load_config()
    assert config.seed is None
    assert config.pairing_attempts == 200
    assert config.level == logging.WARNING
    assert config.data_dir == "~/.clubranking"


def test_file_and_environment(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"data_dir": "/srv/club", "seed": 7, "log_level": "debug"}),
        encoding="utf-8",
    )
    monkeypatch.setenv("CLUBRANKING_DATA_DIR", str(tmp_path / "env"))

    config = load_config(path)
    assert config.data_path == tmp_path / "env"
    assert config.seed == 7
    assert config.log_level == "DEBUG"


def test_round_trip():
    config = ClubConfig(data_dir="/tmp/x", seed=3, pairing_attempts=50)
    assert ClubConfig.from_dict(config.to_dict()) == config


@pytest.mark.parametrize(
    "content",
    ["{broken", "[1, 2]", '{"log_level": "LOUD"}', '{"pairing_attempts": 0}'],
)
def test_invalid_configuration(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(InvalidConfigurationException):
        load_config(path)


def test_missing_configuration_file(tmp_path):
    with pytest.raises(InvalidConfigurationException):
        load_config(tmp_path / "absent.json")
