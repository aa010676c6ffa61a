"""Domain value objects for Tube.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from tube.domain.value.common import RootValueObject


class SortField(str, Enum):
    """Field used to order top-level comment listings."""

    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    @classmethod
    def parse(cls, value: str | None, default: "SortField") -> "SortField":
        """Parse a client-supplied sort field, falling back to ``default``.

        Accepts both snake_case and the camelCase names clients send
        (``createdAt``, ``updatedAt``).
        """
        if not value:
            return default
        normalized = value.strip().lower().replace("_", "")
        for field in cls:
            if field.value.replace("_", "") == normalized:
                return field
        return default


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: str | None, default: "SortOrder") -> "SortOrder":
        """Parse a client-supplied sort direction, falling back to ``default``."""
        if not value:
            return default
        try:
            return cls(value.strip().lower())
        except ValueError:
            return default


class Handle(RootValueObject[str]):
    """Public username of a user (e.g. ``jane_doe``)."""

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Handle must be 1-255 characters")
        return v
