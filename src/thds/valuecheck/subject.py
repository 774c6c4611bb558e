"""Capture a value once, then ask it questions:

```
from thds.valuecheck import value

if value(config.get("timeout")).is_not_set():
    ...
if value(thing).is_a(Mapping):
    ...
```

`value` takes a snapshot of what it needs to know about the subject (whether it is present, its
structural tag and its class) and returns a `Subject`: the predicates bound to that snapshot.
Snapshots are immutable, so a `Subject` keeps answering for its own value no matter what else gets
captured in the meantime. Capturing the very same object twice in a row returns the previous
`Subject` rather than building a new one; see `REUSE_LAST`.

Every predicate has a canonical name and some synonyms (`is_a`, `is_an`, ...), listed in
`SYNONYMS`. A synonym is the identical callable, not a copy of it.
"""

import contextvars as cv
import typing as ty
from functools import partial, update_wrapper

import attrs

from thds.core import config

from . import primitives
from .errors import InvalidArgument, require_class
from .extends import declares
from .fp import negate
from .tags import TypeTag, classify

UNSET: ty.Any = attrs.NOTHING
# a subject is absent if it is None or UNSET, which is also what `value()` captures by default.


REUSE_LAST = config.item("thds.valuecheck.subject.reuse_last", default=True, parse=config.tobool)


@attrs.frozen(eq=False)
class Snapshot:
    subject: ty.Any
    is_present: bool
    type_tag: ty.Optional[TypeTag]
    constructor: ty.Optional[type]


def is_absent(subject: ty.Any) -> bool:
    return subject is None or subject is UNSET


def take_snapshot(subject: ty.Any) -> Snapshot:
    if is_absent(subject):
        return Snapshot(subject, False, None, None)
    return Snapshot(subject, True, classify(subject), type(subject))


def get_constructor(snapshot: Snapshot) -> ty.Optional[type]:
    """The class of the subject, or None if it is absent."""
    return snapshot.constructor


def is_set(snapshot: Snapshot) -> bool:
    """Whether the subject is anything other than None or UNSET. Falsy values are set."""
    return snapshot.is_present


def _native_isinstance(subject: ty.Any, target: type) -> bool:
    try:
        return isinstance(subject, target)
    except TypeError as err:
        # e.g. a typing.Protocol that isn't runtime_checkable
        raise InvalidArgument(f"Can't check for instances of {target!r}: {err}") from err


def is_instance_of(snapshot: Snapshot, target: type) -> bool:
    """Whether the subject should be considered an instance of the class `target`.

    - an absent subject is an instance of nothing, not even `object`.
    - a boolean, number or string checked against a boolean, numeric or string class only matches
      within its own category, and numbers must also be finite: NaN is not a `float`, and `True`
      is not an `int`. See `primitives`.
    - otherwise, plain `isinstance`. Every present value is therefore an `object`.
    - failing that, non-primitive subjects match any supertype declared for their class. See
      `thds.valuecheck.extends`.

    Raises InvalidArgument if `target` is not a class, unless the subject is absent.
    """
    if not snapshot.is_present:
        return False
    require_class(target, "isinstance target")

    subject = snapshot.subject
    tag = snapshot.type_tag
    is_primitive = tag is not None and tag in primitives.PRIMITIVES
    if is_primitive:
        by_category = primitives.is_primitive_instance(subject, ty.cast(TypeTag, tag), target)
        if by_category is not None:
            return by_category

    if _native_isinstance(subject, target):
        return True
    if is_primitive:
        return False
    return declares(ty.cast(type, snapshot.constructor), target)


SYNONYMS: ty.Mapping[str, ty.Tuple[str, ...]] = {
    "get_constructor": ("get_class",),
    "is_set": ("exists",),
    "is_not_set": ("does_not_exist",),
    "is_instance_of": ("is_a", "is_an", "is_type_of"),
    "is_not_instance_of": ("is_not_a", "is_not_an", "is_not_type_of"),
}


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(word.capitalize() for word in rest)


# every synonym, plus the camelCase spelling of every name, onto its canonical name.
ALIASES: ty.Mapping[str, str] = {
    alias: canonical
    for canonical, synonyms in SYNONYMS.items()
    for name in (canonical, *synonyms)
    for alias in (name, _camel_case(name))
    if alias != canonical
}


def _bind(predicate: ty.Callable, snapshot: Snapshot) -> ty.Callable:
    return update_wrapper(partial(predicate, snapshot), predicate)


class Subject:
    """The predicates for a single captured value. Build these with `value`."""

    __slots__ = ("snapshot", *SYNONYMS)

    snapshot: Snapshot
    get_constructor: ty.Callable[[], ty.Optional[type]]
    is_set: ty.Callable[[], bool]
    is_not_set: ty.Callable[[], bool]
    is_instance_of: ty.Callable[[type], bool]
    is_not_instance_of: ty.Callable[[type], bool]

    def __init__(self, snapshot: Snapshot):
        self.snapshot = snapshot
        self.get_constructor = _bind(get_constructor, snapshot)
        self.is_set = _bind(is_set, snapshot)
        self.is_not_set = negate(self.is_set)
        self.is_instance_of = _bind(is_instance_of, snapshot)
        self.is_not_instance_of = negate(self.is_instance_of)

    def __getattr__(self, name: str) -> ty.Callable:
        try:
            canonical = ALIASES[name]
        except KeyError:
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}") from None
        return getattr(self, canonical)

    def __dir__(self) -> ty.Iterable[str]:
        return [*super().__dir__(), *ALIASES]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.snapshot.subject!r})"


_LAST_CAPTURED: cv.ContextVar[ty.Optional[Subject]] = cv.ContextVar(
    "thds-valuecheck-last-captured", default=None
)


def value(subject: ty.Any = UNSET) -> Subject:
    """Capture `subject` for inspection. Never raises; None and UNSET are fine to pass."""
    last = _LAST_CAPTURED.get()
    if last is not None and last.snapshot.subject is subject and REUSE_LAST():
        return last

    captured = Subject(take_snapshot(subject))
    _LAST_CAPTURED.set(captured)
    return captured
