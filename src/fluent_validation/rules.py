"""Validation rules.

Patterns are compiled once at import time and never mutated, so every
Validator shares them.
"""

from __future__ import annotations

import ipaddress
import json
import re
import unicodedata
from datetime import datetime
from typing import Any
from urllib.parse import urlparse

from .config import (
    DateRuleSection,
    FilenameRuleSection,
    JsonRuleSection,
    PasswordPolicySection,
    UrlRuleSection,
)

_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}")
_PHONE_RE = re.compile(r"\+?[0-9]{10,15}")
_UUID_RE = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)
_SLUG_RE = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*")

COMMON_PASSWORDS = (
    "password", "123456", "12345678", "qwerty", "abc123",
    "monkey", "1234567", "letmein", "trustno1", "dragon",
    "baseball", "iloveyou", "master", "sunshine", "ashley",
    "passw0rd", "shadow", "123123", "654321", "superman",
)


def is_blank(value: str) -> bool:
    """Return True if the value is empty after trimming whitespace."""
    return not value.strip()


def is_email(value: str) -> bool:
    """Validate email format."""
    return _EMAIL_RE.fullmatch(value) is not None


def is_phone(value: str) -> bool:
    """Validate phone number (optional leading +, 10-15 digits)."""
    return _PHONE_RE.fullmatch(value) is not None


def is_uuid(value: str) -> bool:
    """Validate canonical 8-4-4-4-12 UUID format."""
    return _UUID_RE.fullmatch(value) is not None


def is_slug(value: str, max_length: int) -> bool:
    """Validate URL slug (lowercase alphanumerics joined by single hyphens)."""
    return len(value) <= max_length and _SLUG_RE.fullmatch(value) is not None


def is_ip_address(value: str) -> bool:
    """Validate an IPv4 or IPv6 address."""
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def is_url(value: str, policy: UrlRuleSection) -> bool:
    """Validate URL format (allowed scheme, host present and not blocked)."""
    try:
        parsed = urlparse(value)
        hostname = parsed.hostname
    except ValueError:
        return False
    allowed = {scheme.lower() for scheme in policy.allowed_schemes}
    if parsed.scheme.lower() not in allowed or not hostname:
        return False
    blocked = {host.lower() for host in policy.blocked_hosts}
    if hostname.lower() in blocked:
        return False
    return not (policy.block_private and _is_internal_address(hostname))


def _is_internal_address(hostname: str) -> bool:
    # host names are not resolved, only IP literals are checked
    try:
        address = ipaddress.ip_address(hostname)
    except ValueError:
        return False
    return address.is_loopback or address.is_private or address.is_link_local


def is_cidr(value: str) -> bool:
    """Validate CIDR notation (address/prefix)."""
    if "/" not in value:
        return False
    try:
        ipaddress.ip_network(value, strict=False)
    except ValueError:
        return False
    return True


def is_date(value: str, policy: DateRuleSection) -> bool:
    """Validate a date against any of the configured strptime formats."""
    for fmt in policy.formats:
        try:
            datetime.strptime(value, fmt)
        except ValueError:
            continue
        return True
    return False


def _luhn_check(digits: str) -> bool:
    total = 0
    for i, char in enumerate(reversed(digits)):
        n = int(char)
        if i % 2 == 1:
            n *= 2
            if n > 9:
                n -= 9
        total += n
    return total % 10 == 0


def is_credit_card(value: str) -> bool:
    """Validate a card number: 13-19 digits passing the Luhn check.

    Separators such as spaces and hyphens are ignored.
    """
    digits = "".join(c for c in value if "0" <= c <= "9")
    if not 13 <= len(digits) <= 19:
        return False
    return _luhn_check(digits)


def is_filename(value: str, policy: FilenameRuleSection) -> bool:
    """Validate a bare file name (no path parts, allowed extension)."""
    if len(value) > policy.max_length:
        return False
    if any(part in value for part in ("..", "/", "\\", "\x00")):
        return False
    dot = value.rfind(".")
    ext = value[dot:].lower() if dot != -1 else ""
    if ext in {t.lower() for t in policy.blocked_types}:
        return False
    if policy.allowed_types:
        return ext in {t.lower() for t in policy.allowed_types}
    return True


def _json_depth(node: Any) -> int:
    if isinstance(node, dict):
        return 1 + max((_json_depth(v) for v in node.values()), default=0)
    if isinstance(node, list):
        return 1 + max((_json_depth(v) for v in node), default=0)
    return 1


def is_json(value: str, policy: JsonRuleSection) -> bool:
    """Validate a JSON document and, if configured, its nesting depth."""
    try:
        document = json.loads(value)
    except (ValueError, RecursionError):
        return False
    if policy.max_depth:
        try:
            return _json_depth(document) <= policy.max_depth
        except RecursionError:
            return False
    return True


def _is_special(char: str) -> bool:
    # punctuation (P*) or symbol (S*)
    return unicodedata.category(char)[0] in ("P", "S")


def password_violation(value: str, policy: PasswordPolicySection) -> str | None:
    """Return the first requirement the password violates, or None."""
    if len(value) < policy.min_length:
        return f"must be at least {policy.min_length} characters"
    if len(value) > policy.max_length:
        return f"must be at most {policy.max_length} characters"
    if policy.require_upper and not any(c.isupper() for c in value):
        return "must contain at least one uppercase letter"
    if policy.require_lower and not any(c.islower() for c in value):
        return "must contain at least one lowercase letter"
    if policy.require_digit and not any(c.isdigit() for c in value):
        return "must contain at least one digit"
    if policy.require_special and not any(_is_special(c) for c in value):
        return "must contain at least one special character"
    lowered = value.lower()
    if any(common in lowered for common in COMMON_PASSWORDS):
        return "must not contain common password patterns"
    return None
