"""Base model for all data models in the estimating core.

This module provides a base Pydantic model with common configuration
and the numeric coercion helper shared by every money/percent field.
"""

from decimal import Decimal, InvalidOperation
from typing import Any

from pydantic import BaseModel, ConfigDict


def coerce_decimal(v: Any) -> Any:
    """Convert numeric values to Decimal for precision.

    Strings, ints and floats are converted through ``str`` so that a float
    such as ``0.1`` becomes ``Decimal("0.1")`` rather than its binary
    expansion. ``None`` and non-numeric values are passed through so that
    Pydantic can report them.

    Args:
        v: The value to convert

    Returns:
        The value as a Decimal, or the original value if it is not numeric

    Raises:
        ValueError: If a string cannot be parsed as a number
    """
    if v is None or isinstance(v, Decimal) or isinstance(v, bool):
        return v
    if isinstance(v, (int, float, str)):
        try:
            return Decimal(str(v).strip())
        except InvalidOperation as e:
            raise ValueError(f"Cannot convert {v!r} to Decimal: {e}")
    return v


class BaseDataModel(BaseModel):
    """Base class for all data models.

    Provides common configuration for:
    - Validation with type checking
    - Serialization to/from dictionaries and JSON
    - Immutability (frozen models), since the pricing pipeline only reads
      configuration and never edits it in place

    Example:
        >>> class Category(BaseDataModel):
        ...     name: str
        ...     amount: Decimal
        >>> cat = Category(name="Rent", amount=Decimal("2500"))
        >>> cat.model_dump()
        {'name': 'Rent', 'amount': Decimal('2500')}
    """

    model_config = ConfigDict(
        # Allow arbitrary types like Decimal
        arbitrary_types_allowed=True,
        # Use lax type checking so JSON numbers and strings are accepted
        strict=False,
        # Unknown fields are a configuration mistake, not something to ignore
        extra="forbid",
        # Frozen models are immutable after creation
        frozen=True,
    )
