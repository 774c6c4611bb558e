import types
import typing as ty

from typing_extensions import TypeIs


class InvalidArgument(TypeError):
    """Something that is not a class was given where a class is required."""


class CyclicInheritance(ValueError):
    """Declared supertypes loop back on themselves, so the chain has no end."""

    def __init__(self, chain: ty.Sequence[type]):
        self.chain = tuple(chain)
        super().__init__(
            "Declared supertypes form a cycle: " + " -> ".join(map(_class_name, self.chain))
        )

    def __reduce__(self):
        return type(self), (self.chain,)


def _class_name(cls: type) -> str:
    return getattr(cls, "__qualname__", repr(cls))


def is_class(obj: ty.Any) -> TypeIs[type]:
    # parameterized builtins like list[int] pass isinstance(..., type) before Python 3.11
    return isinstance(obj, type) and not isinstance(obj, types.GenericAlias)


def require_class(obj: ty.Any, role: str) -> type:
    if not is_class(obj):
        raise InvalidArgument(f"{role} must be a class; got {obj!r} of type {type(obj).__name__}")
    return obj
