"""Validation error records."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """A single failed rule application for one field."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class ValidationErrors:
    """An ordered collection of ValidationError instances.

    Errors are kept in the order the rules were evaluated.
    """

    def __init__(self, errors: list[ValidationError] | None = None) -> None:
        self._errors: list[ValidationError] = list(errors) if errors else []

    def has_errors(self) -> bool:
        """Returns True if there are any errors."""
        return len(self._errors) > 0

    def get_errors(self) -> list[ValidationError]:
        """Returns a copy of all collected errors."""
        return list(self._errors)

    def add(self, error: ValidationError) -> None:
        """Adds a validation error to the collection."""
        self._errors.append(error)

    def to_list(self) -> list[dict[str, str]]:
        """Returns the errors as a JSON-ready list of {field, message} dicts."""
        return [error.to_dict() for error in self._errors]

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(self._errors)

    def __getitem__(self, index: int) -> ValidationError:
        return self._errors[index]

    def __str__(self) -> str:
        return "; ".join(str(error) for error in self._errors)

    def __repr__(self) -> str:
        return f"ValidationErrors({self._errors!r})"
