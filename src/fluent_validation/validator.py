"""Fluent validator that accumulates field-level errors."""

from __future__ import annotations

import logging

from . import rules
from .config import ValidatorConfig
from .exceptions import ValidationFailedError
from .models import ValidationError, ValidationErrors

logger = logging.getLogger(__name__)


class Validator:
    """Applies rules to named field values and collects failures.

    Each rule appends at most one error and returns the same instance, so a
    whole validation pass can be written as one chained expression. Failed
    rules are recorded, never raised. Create one Validator per validation
    pass; instances are not meant to be shared between threads.

    Example:
        v = (
            Validator()
            .required("name", body["name"])
            .email("email", body["email"])
            .max_length("name", body["name"], 64)
        )
        if not v.valid():
            return 400, v.errors().to_list()
    """

    def __init__(self, config: ValidatorConfig | None = None) -> None:
        self._config = config or ValidatorConfig()
        self._errors = ValidationErrors()

    def _fail(self, rule: str, field: str, message: str) -> None:
        logger.debug("validation rule failed", extra={"field": field, "rule": rule})
        self._errors.add(ValidationError(field=field, message=message))

    def required(self, field: str, value: str) -> Validator:
        """Fails if the value is empty or whitespace only."""
        if rules.is_blank(value):
            self._fail("required", field, "is required")
        return self

    def email(self, field: str, value: str) -> Validator:
        """Fails if a non-empty value is not an email address."""
        if value and not rules.is_email(value):
            self._fail("email", field, "must be a valid email")
        return self

    def phone(self, field: str, value: str) -> Validator:
        """Fails if a non-empty value is not a phone number."""
        if value and not rules.is_phone(value):
            self._fail("phone", field, "must be a valid phone number")
        return self

    def uuid(self, field: str, value: str) -> Validator:
        """Fails if a non-empty value is not a canonical UUID."""
        if value and not rules.is_uuid(value):
            self._fail("uuid", field, "must be a valid UUID")
        return self

    def min_length(self, field: str, value: str, minimum: int) -> Validator:
        """Fails if the value has fewer than ``minimum`` characters."""
        if len(value) < minimum:
            self._fail("min_length", field, f"must be at least {minimum:d} characters")
        return self

    def max_length(self, field: str, value: str, maximum: int) -> Validator:
        """Fails if the value has more than ``maximum`` characters."""
        if len(value) > maximum:
            self._fail("max_length", field, f"must be at most {maximum:d} characters")
        return self

    def min(self, field: str, value: int, minimum: int) -> Validator:
        if value < minimum:
            self._fail("min", field, "must be greater than or equal to minimum")
        return self

    def max(self, field: str, value: int, maximum: int) -> Validator:
        if value > maximum:
            self._fail("max", field, "must be less than or equal to maximum")
        return self

    def url(self, field: str, value: str) -> Validator:
        """Fails if a non-empty value is not an allowed http(s) URL."""
        if value and not rules.is_url(value, self._config.url):
            self._fail("url", field, "must be a valid URL")
        return self

    def slug(self, field: str, value: str) -> Validator:
        if value and not rules.is_slug(value, self._config.slug.max_length):
            self._fail("slug", field, "must be a valid slug")
        return self

    def ip_address(self, field: str, value: str) -> Validator:
        if value and not rules.is_ip_address(value):
            self._fail("ip_address", field, "must be a valid IP address")
        return self

    def cidr(self, field: str, value: str) -> Validator:
        if value and not rules.is_cidr(value):
            self._fail("cidr", field, "must be a valid CIDR")
        return self

    def date(self, field: str, value: str) -> Validator:
        """Fails if a non-empty value matches none of the configured date formats."""
        if value and not rules.is_date(value, self._config.date):
            self._fail("date", field, "must be a valid date")
        return self

    def credit_card(self, field: str, value: str) -> Validator:
        """Fails if a non-empty value is not a Luhn-valid 13-19 digit card number."""
        if value and not rules.is_credit_card(value):
            self._fail("credit_card", field, "must be a valid credit card number")
        return self

    def filename(self, field: str, value: str) -> Validator:
        """Fails on path parts, null bytes, or a disallowed extension."""
        if value and not rules.is_filename(value, self._config.filename):
            self._fail("filename", field, "must be a valid filename")
        return self

    def json(self, field: str, value: str) -> Validator:
        """Fails if a non-empty value is not JSON or is nested too deeply."""
        if value and not rules.is_json(value, self._config.json_document):
            self._fail("json", field, "must be valid JSON")
        return self

    def password(self, field: str, value: str) -> Validator:
        """Fails with the first password policy requirement the value violates."""
        if value:
            violation = rules.password_violation(value, self._config.password)
            if violation is not None:
                self._fail("password", field, violation)
        return self

    def merge(self, other: Validator, prefix: str | None = None) -> Validator:
        """Appends another validator's errors, optionally prefixing field names.

        Used for nested payloads, e.g. ``v.merge(address_v, prefix="address")``
        records ``address.zip`` for an error on ``zip``.
        """
        for error in other.errors():
            field = f"{prefix}.{error.field}" if prefix else error.field
            self._errors.add(ValidationError(field=field, message=error.message))
        return self

    def errors(self) -> ValidationErrors:
        """Returns a copy of the accumulated errors."""
        return ValidationErrors(self._errors.get_errors())

    def valid(self) -> bool:
        """Returns True if no rule has failed."""
        return not self._errors.has_errors()

    def raise_if_invalid(self) -> Validator:
        """Raises ValidationFailedError if any rule has failed.

        Raises:
            ValidationFailedError: if at least one error was recorded
        """
        if not self.valid():
            errors = self.errors()
            logger.info("validation failed", extra={"error_count": len(errors)})
            raise ValidationFailedError(errors)
        return self
