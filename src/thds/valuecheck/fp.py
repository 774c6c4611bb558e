import typing as ty
from functools import wraps

from typing_extensions import ParamSpec

P = ParamSpec("P")


def negate(predicate: ty.Callable[P, bool]) -> ty.Callable[P, bool]:
    """The boolean complement of `predicate`, called with exactly the same arguments.

    The result is a plain function, so it also works as a class attribute, where the instance is
    passed through as the first argument just as it would be to `predicate`.
    """

    @wraps(predicate)
    def negated(*args: P.args, **kwargs: P.kwargs) -> bool:
        return not predicate(*args, **kwargs)

    return negated
