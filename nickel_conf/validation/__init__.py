"""Module de validation des valeurs passées aux setters."""

from nickel_conf.validation.base import Validator
from nickel_conf.validation.range_checker import IntegerRangeValidator
from nickel_conf.validation.type_checker import BooleanTypeValidator

__all__ = [
    "Validator",
    "IntegerRangeValidator",
    "BooleanTypeValidator",
]
