"""Per-field validation errors shared by every calculation engine."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class FieldError:
    field: str
    reason: str

    def as_dict(self) -> dict:
        return {"field": self.field, "reason": self.reason}


class InputValidationError(ValueError):
    """Raised before any computation when one or more inputs are out of bounds.

    Carries every violated constraint so a caller can flag all bad fields at once.
    """

    def __init__(self, errors: List[FieldError]):
        super().__init__("; ".join(f"{error.field}: {error.reason}" for error in errors))
        self.errors = errors

    @property
    def fields(self) -> List[str]:
        return [error.field for error in self.errors]


class Validator:
    """Collects field errors, then raises them together."""

    def __init__(self) -> None:
        self.errors: List[FieldError] = []

    def check(self, condition: bool, field: str, reason: str) -> None:
        if not condition:
            self.errors.append(FieldError(field=field, reason=reason))

    def between(
        self,
        value: float,
        field: str,
        low: Optional[float] = None,
        high: Optional[float] = None,
        reason: Optional[str] = None,
    ) -> None:
        if not math.isfinite(value):
            self.errors.append(FieldError(field, reason or "must be a finite number"))
        elif low is not None and value < low:
            self.errors.append(FieldError(field, reason or f"must be at least {low:g}"))
        elif high is not None and value > high:
            self.errors.append(FieldError(field, reason or f"must be at most {high:g}"))

    def raise_if_any(self) -> None:
        if self.errors:
            raise InputValidationError(self.errors)
