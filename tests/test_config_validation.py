from pathlib import Path

import pytest
from pydantic import ValidationError

from regex_collection.config import load_config
from regex_collection.utils.errors import ConfigError


def test_unknown_key(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("unknown:\n  foo: 1\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_unknown_identify_category(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("identify:\n  categories: [phone, mobile]\n")
    with pytest.raises(ValidationError) as info:
        load_config(cfg_file, env={})
    assert "mobile" in str(info.value)


def test_schema_version_must_be_positive(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("schema_version: 0\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_identify_subset(tmp_path: Path) -> None:
    cfg_file = tmp_path / "ok.yml"
    cfg_file.write_text("identify:\n  categories: [phone, tel_phone]\ninput:\n  skip_blank: false\n")
    cfg = load_config(cfg_file, env={})
    assert cfg.identify.categories == ["phone", "tel_phone"]
    assert cfg.input.skip_blank is False
    assert cfg.input.strip_whitespace is True


def test_malformed_yaml(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("logging: [unclosed\n")
    with pytest.raises(ConfigError):
        load_config(cfg_file, env={})


def test_non_mapping_yaml(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("- a\n- b\n")
    with pytest.raises(ConfigError):
        load_config(cfg_file, env={})


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yml", env={})
