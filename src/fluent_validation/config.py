"""設定型定義（pydantic BaseModel）と設定ファイル読み込み"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from .exceptions import ValidatorError, ValidatorErrorCodes


class UrlRuleSection(BaseModel):
    """url ルール設定。"""

    allowed_schemes: list[str] = Field(default_factory=lambda: ["http", "https"])
    blocked_hosts: list[str] = Field(
        default_factory=lambda: ["localhost", "127.0.0.1", "0.0.0.0"]
    )
    # IP リテラルのホストがループバック・プライベート・リンクローカルなら拒否する
    block_private: bool = True


class SlugRuleSection(BaseModel):
    """slug ルール設定。"""

    max_length: int = Field(default=100, ge=1)


class FilenameRuleSection(BaseModel):
    """filename ルール設定。拡張子はドット付き・大文字小文字を区別しない。

    allowed_types が空の場合はブロック対象以外のすべての拡張子を許可する。
    """

    max_length: int = Field(default=255, ge=1)
    allowed_types: list[str] = Field(
        default_factory=lambda: [".jpg", ".jpeg", ".png", ".gif", ".pdf", ".doc", ".docx"]
    )
    blocked_types: list[str] = Field(
        default_factory=lambda: [".exe", ".dll", ".bat", ".cmd", ".sh", ".ps1", ".php", ".jsp"]
    )


class JsonRuleSection(BaseModel):
    """json ルール設定。max_depth が 0 の場合は深さを検査しない。"""

    max_depth: int = Field(default=10, ge=0)


class DateRuleSection(BaseModel):
    """date ルール設定。いずれかの strptime 書式に一致すれば有効。"""

    formats: list[str] = Field(
        default_factory=lambda: ["%Y-%m-%dT%H:%M:%S%z", "%Y-%m-%dT%H:%M:%S.%f%z"],
        min_length=1,
    )


class PasswordPolicySection(BaseModel):
    """password ルールのポリシー設定。"""

    min_length: int = Field(default=12, ge=0)
    max_length: int = Field(default=128, ge=1)
    require_upper: bool = True
    require_lower: bool = True
    require_digit: bool = True
    require_special: bool = True

    @model_validator(mode="after")
    def _check_length_bounds(self) -> PasswordPolicySection:
        if self.max_length < self.min_length:
            raise ValueError("max_length must be greater than or equal to min_length")
        return self


class LogSection(BaseModel):
    """ログ設定。"""

    level: str = "INFO"
    format: Literal["json", "text"] = "json"


class ValidatorConfig(BaseModel):
    """Validator 設定全体。構築後は読み取り専用として扱う。"""

    url: UrlRuleSection = Field(default_factory=UrlRuleSection)
    slug: SlugRuleSection = Field(default_factory=SlugRuleSection)
    filename: FilenameRuleSection = Field(default_factory=FilenameRuleSection)
    json_document: JsonRuleSection = Field(default_factory=JsonRuleSection)
    date: DateRuleSection = Field(default_factory=DateRuleSection)
    password: PasswordPolicySection = Field(default_factory=PasswordPolicySection)
    log: LogSection = Field(default_factory=LogSection)


def _read_yaml(path: Path) -> dict[str, Any]:
    """YAML ファイルを読み込む。"""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ValidatorError(
            code=ValidatorErrorCodes.READ_FILE,
            message=f"Failed to read config file: {path}",
            cause=e,
        ) from e
    try:
        data: dict[str, Any] = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ValidatorError(
            code=ValidatorErrorCodes.PARSE_YAML,
            message=f"Failed to parse YAML: {path}",
            cause=e,
        ) from e
    return data


def load_config(path: Path) -> ValidatorConfig:
    """設定ファイルを読み込んで ValidatorConfig を返す。

    空ファイルの場合はすべてデフォルト値となる。
    """
    data = _read_yaml(path)
    try:
        return ValidatorConfig.model_validate(data)
    except ValidationError as e:
        raise ValidatorError(
            code=ValidatorErrorCodes.INVALID_CONFIG,
            message=f"Config validation failed: {e}",
            cause=e,
        ) from e
