"""Booleans, numbers and strings are checked by category rather than purely by class.

Within a category the usual class relationships hold (an `int` is a `numbers.Number`, a `str`
subclass instance is a `str`), but no value crosses into another category: `True` is not an `int`.
Numbers additionally have to be finite to count as numbers at all.
"""

import cmath
import decimal
import math
import numbers
import types
import typing as ty

from .tags import TypeTag

# insertion order is lookup order; bool has to precede numbers.Number.
PRIMITIVES: ty.Mapping[TypeTag, type] = types.MappingProxyType(
    {
        TypeTag.STRING: str,
        TypeTag.BOOLEAN: bool,
        TypeTag.NUMBER: numbers.Number,
    }
)


def category(type_: type) -> ty.Optional[TypeTag]:
    """The primitive category whose wrapper `type_` derives from, if any."""
    for tag, wrapper in PRIMITIVES.items():
        if issubclass(type_, wrapper):
            return tag
    return None


def is_finite(number: numbers.Number) -> bool:
    if isinstance(number, decimal.Decimal):
        return number.is_finite()
    if isinstance(number, numbers.Rational):
        # ints and Fractions can't be infinite, but may be too large to convert to float
        return True
    if isinstance(number, numbers.Real):
        return math.isfinite(number)
    if isinstance(number, numbers.Complex):
        return cmath.isfinite(number)
    return True


def is_primitive_instance(subject: ty.Any, tag: TypeTag, target: type) -> ty.Optional[bool]:
    """Decides whether a primitive `subject` carrying `tag` is an instance of `target`.

    Returns None when `target` belongs to no primitive category, in which case ordinary class
    relationships apply instead.
    """
    target_tag = category(target)
    if target_tag is None:
        return None
    if target_tag is TypeTag.NUMBER:
        return tag is TypeTag.NUMBER and is_finite(subject) and isinstance(subject, target)
    return tag is target_tag and isinstance(subject, target)
