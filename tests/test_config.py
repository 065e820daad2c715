"""設定モデル・ローダーのユニットテスト"""

from pathlib import Path

import pytest
from fluent_validation.config import (
    DateRuleSection,
    PasswordPolicySection,
    SlugRuleSection,
    ValidatorConfig,
    load_config,
)
from fluent_validation.exceptions import ValidatorError, ValidatorErrorCodes
from pydantic import ValidationError


def test_validator_config_defaults() -> None:
    """デフォルト値の確認。"""
    config = ValidatorConfig()
    assert config.url.allowed_schemes == ["http", "https"]
    assert "localhost" in config.url.blocked_hosts
    assert config.slug.max_length == 100
    assert config.password.min_length == 12
    assert config.password.max_length == 128
    assert config.log.level == "INFO"
    assert config.log.format == "json"


def test_password_policy_invalid_bounds() -> None:
    """max_length < min_length で ValidationError が発生すること。"""
    with pytest.raises(ValidationError):
        PasswordPolicySection(min_length=20, max_length=10)


def test_slug_section_invalid_max_length() -> None:
    with pytest.raises(ValidationError):
        SlugRuleSection(max_length=0)


def test_load_config(tmp_path: Path) -> None:
    """YAML ファイルの読み込み。"""
    config_file = tmp_path / "validation.yaml"
    config_file.write_text(
        "url:\n"
        "  allowed_schemes: [https]\n"
        "password:\n"
        "  min_length: 16\n"
        "log:\n"
        "  level: DEBUG\n"
        "  format: text\n"
    )
    config = load_config(config_file)
    assert config.url.allowed_schemes == ["https"]
    assert config.password.min_length == 16
    assert config.password.require_digit is True
    assert config.log.format == "text"


def test_load_config_empty_file(tmp_path: Path) -> None:
    """空ファイルはすべてデフォルト値になること。"""
    config_file = tmp_path / "empty.yaml"
    config_file.write_text("")
    assert load_config(config_file) == ValidatorConfig()


def test_load_config_file_not_found(tmp_path: Path) -> None:
    """存在しないファイルで ValidatorError(READ_FILE_ERROR) が発生すること。"""
    with pytest.raises(ValidatorError) as exc_info:
        load_config(tmp_path / "missing.yaml")
    assert exc_info.value.code == ValidatorErrorCodes.READ_FILE
    assert isinstance(exc_info.value.__cause__, OSError)


def test_load_config_invalid_yaml(tmp_path: Path) -> None:
    """不正 YAML で ValidatorError(PARSE_YAML_ERROR) が発生すること。"""
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text("url: {invalid: yaml: content:\n")
    with pytest.raises(ValidatorError) as exc_info:
        load_config(bad_file)
    assert exc_info.value.code == ValidatorErrorCodes.PARSE_YAML


def test_load_config_validation_error(tmp_path: Path) -> None:
    """バリデーション失敗で ValidatorError(INVALID_CONFIG_ERROR) が発生すること。"""
    bad_config = tmp_path / "bad_config.yaml"
    bad_config.write_text("log:\n  format: xml\n")
    with pytest.raises(ValidatorError) as exc_info:
        load_config(bad_config)
    assert exc_info.value.code == ValidatorErrorCodes.INVALID_CONFIG


def test_rule_section_defaults() -> None:
    """filename / json_document / date / url.block_private のデフォルト値。"""
    config = ValidatorConfig()
    assert config.url.block_private is True
    assert ".exe" in config.filename.blocked_types
    assert ".pdf" in config.filename.allowed_types
    assert config.filename.max_length == 255
    assert config.json_document.max_depth == 10
    assert config.date.formats[0] == "%Y-%m-%dT%H:%M:%S%z"


def test_date_section_requires_format() -> None:
    with pytest.raises(ValidationError):
        DateRuleSection(formats=[])


def test_load_config_rule_sections(tmp_path: Path) -> None:
    """YAML から各ルール設定を読み込めること。"""
    config_file = tmp_path / "validation.yaml"
    config_file.write_text(
        "url:\n"
        "  block_private: false\n"
        "filename:\n"
        "  allowed_types: []\n"
        "json_document:\n"
        "  max_depth: 3\n"
        "date:\n"
        "  formats: ['%Y-%m-%d']\n"
    )
    config = load_config(config_file)
    assert config.url.block_private is False
    assert config.filename.allowed_types == []
    assert config.json_document.max_depth == 3
    assert config.date.formats == ["%Y-%m-%d"]
