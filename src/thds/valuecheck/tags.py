"""Structural categories of values, independent of where their classes sit in any hierarchy.

A tag says what kind of thing a value *is* (a boolean, a list, a compiled regex...) so that
categories with special instance rules can be recognized without comparing class names.
"""

import datetime
import enum
import inspect
import numbers
import re
import typing as ty
from functools import partial


class TypeTag(enum.Enum):
    BOOLEAN = "Boolean"
    NUMBER = "Number"
    STRING = "String"
    ARRAY = "Array"
    ARGUMENTS = "Arguments"
    DATE = "Date"
    REGEXP = "RegExp"
    ERROR = "Error"
    FUNCTION = "Function"
    OBJECT = "Object"


def _isinstance(type_: ty.Union[type, ty.Tuple[type, ...]], value: ty.Any) -> bool:
    # flipped isinstance for use with partial
    return isinstance(value, type_)


def is_function(value: ty.Any) -> bool:
    return isinstance(value, type) or inspect.isroutine(value)


# bool is registered as a numbers.Number, so BOOLEAN must be tested before NUMBER.
_TAGS: ty.Sequence[ty.Tuple[ty.Callable[[ty.Any], bool], TypeTag]] = (
    (partial(_isinstance, bool), TypeTag.BOOLEAN),
    (partial(_isinstance, numbers.Number), TypeTag.NUMBER),
    (partial(_isinstance, str), TypeTag.STRING),
    (partial(_isinstance, list), TypeTag.ARRAY),
    (partial(_isinstance, tuple), TypeTag.ARGUMENTS),
    (partial(_isinstance, (datetime.date, datetime.time)), TypeTag.DATE),
    (partial(_isinstance, re.Pattern), TypeTag.REGEXP),
    (partial(_isinstance, BaseException), TypeTag.ERROR),
    (is_function, TypeTag.FUNCTION),
)


def classify(value: ty.Any) -> TypeTag:
    """The first matching tag, falling back to OBJECT. Not meaningful for `None`."""
    for predicate, tag in _TAGS:
        if predicate(value):
            return tag
    return TypeTag.OBJECT
