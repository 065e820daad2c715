"""fluent validation library."""

from .config import (
    DateRuleSection,
    FilenameRuleSection,
    JsonRuleSection,
    LogSection,
    PasswordPolicySection,
    SlugRuleSection,
    UrlRuleSection,
    ValidatorConfig,
    load_config,
)
from .exceptions import ValidationFailedError, ValidatorError, ValidatorErrorCodes
from .logger import new_logger, new_logger_from_config
from .models import ValidationError, ValidationErrors
from .validator import Validator

__all__ = [
    "DateRuleSection",
    "FilenameRuleSection",
    "JsonRuleSection",
    "LogSection",
    "PasswordPolicySection",
    "SlugRuleSection",
    "UrlRuleSection",
    "ValidationError",
    "ValidationErrors",
    "ValidationFailedError",
    "Validator",
    "ValidatorConfig",
    "ValidatorError",
    "ValidatorErrorCodes",
    "load_config",
    "new_logger",
    "new_logger_from_config",
]
