"""validation ライブラリの例外型定義"""

from __future__ import annotations

from typing import Any

from .models import ValidationErrors


class ValidatorError(Exception):
    """validation ライブラリのエラー基底クラス。"""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class ValidatorErrorCodes:
    """ValidatorError のエラーコード定数。"""

    READ_FILE: str = "READ_FILE_ERROR"
    PARSE_YAML: str = "PARSE_YAML_ERROR"
    INVALID_CONFIG: str = "INVALID_CONFIG_ERROR"
    VALIDATION_FAILED: str = "VALIDATION_ERROR"


class ValidationFailedError(ValidatorError):
    """バリデーション結果が invalid だった場合に送出されるエラー。

    Validator.raise_if_invalid() からのみ送出される。個々のルール失敗は
    例外にならず ValidationErrors に蓄積される。
    """

    status_code: int = 400

    def __init__(self, errors: ValidationErrors) -> None:
        super().__init__(code=ValidatorErrorCodes.VALIDATION_FAILED, message=str(errors))
        self.errors = errors

    def to_response_body(self) -> dict[str, Any]:
        """HTTP エラーレスポンスのボディを返す。"""
        return {
            "error": {
                "code": self.code,
                "message": str(self.errors),
                "details": self.errors.to_list(),
            }
        }
