"""
Contains functionality to analyze the result of a validation run
"""
import itertools
from typing import Iterable, Optional

from .errors import ValidationFailure


def _extract_property_name(failure: ValidationFailure) -> str:
    return failure.property_name


class ValidationResult:
    """
    `AbstractValidator.validate` returns an instance of this class. The grouped views are calculated only if you use
    them.
    """

    def __init__(self, errors: Iterable[ValidationFailure] = ()):
        self._errors: list[ValidationFailure] = list(errors)
        self._errors_per_property: Optional[dict[str, list[ValidationFailure]]] = None

    @property
    def errors(self) -> list[ValidationFailure]:
        """All failures in the order the rules produced them"""
        return self._errors

    @property
    def is_valid(self) -> bool:
        """True if no rule failed"""
        return len(self._errors) == 0

    @property
    def errors_per_property(self) -> dict[str, list[ValidationFailure]]:
        """Maps the property paths with failures onto their failures"""
        if self._errors_per_property is None:
            self._errors_per_property = {
                key: list(values_iter)
                for key, values_iter in itertools.groupby(
                    sorted(self._errors, key=_extract_property_name), key=_extract_property_name
                )
            }
        return self._errors_per_property

    @property
    def num_errors_per_property(self) -> dict[str, int]:
        """Maps the property paths with failures onto the number of failures"""
        return {key: len(values) for key, values in self.errors_per_property.items()}

    def __str__(self):
        return "\n".join(str(error) for error in self._errors)
