"""
Exception types raised by the statistics engine.
"""
from typing import Any, Optional


class FortisError(Exception):
    """Base class for all Fortis errors."""


class InvalidInputError(FortisError, ValueError):
    """
    A workout record violates the input contract.

    Raised for dates that cannot be parsed or ordered and for metric
    values that are not numbers. Carries the offending field, value and,
    when known, the record's position in the input collection.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
        index: Optional[int] = None,
    ):
        self.field = field
        self.value = value
        self.index = index

        location = f" (record {index})" if index is not None else ""
        super().__init__(f"{message}{location}")
