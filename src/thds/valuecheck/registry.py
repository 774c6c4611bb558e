import contextlib
import typing as ty

K = ty.TypeVar("K")
V = ty.TypeVar("V")

_MISSING = object()


class Registry(ty.Dict[K, V]):
    """A dict that entries get registered into, either directly or as a decorator.

    An optional `validate` callable sees every key/value pair before it is stored, however it gets
    stored, and may raise to reject it.
    """

    def __init__(self, *, validate: ty.Optional[ty.Callable[[K, V], None]] = None):
        super().__init__()
        self._validate = validate

    def __setitem__(self, key: K, value: V):
        if self._validate is not None:
            self._validate(key, value)
        super().__setitem__(key, value)

    def update(self, *args, **kwargs) -> None:  # type: ignore[override]
        for key, value in dict(*args, **kwargs).items():
            self[key] = value

    def setdefault(self, key: K, default: V) -> V:  # type: ignore[override]
        if key not in self:
            self[key] = default
        return self[key]

    def __ior__(self, other):  # type: ignore[override]
        self.update(other)
        return self

    @ty.overload
    def register(self, key: K) -> ty.Callable[[V], V]: ...

    @ty.overload
    def register(self, key: K, value: V) -> V: ...

    def register(self, key: K, value=_MISSING):
        if value is _MISSING:

            def decorator(value: V) -> V:
                self[key] = value
                return value

            return decorator
        else:
            self[key] = value
            return value

    @contextlib.contextmanager
    def registered(self, key: K, value: V) -> ty.Iterator[V]:
        """Register for the duration of a with-block, then restore whatever was there before."""
        previous = self.get(key, ty.cast(V, _MISSING))
        self[key] = value
        try:
            yield value
        finally:
            if previous is _MISSING:
                self.pop(key, None)
            else:
                super().__setitem__(key, previous)
