"""Declared supertypes: a class may say that it 'extends' another without inheriting from it.

There are two ways to declare one. A class can carry the marker attribute (named by
`thds.valuecheck.extends.marker`, "Extends" unless configured otherwise) in its own namespace:

```
class Duck:
    Extends = Bird
```

or, for classes you can't or shouldn't modify, the declaration can be registered:

```
DECLARED_SUPERTYPES.register(Decoy, Duck)
```

Registered declarations take precedence over markers. Declarations chain - a Decoy is then also a
Bird - but only through further declarations, never through ordinary base classes. A chain that
loops back on itself raises `CyclicInheritance`.
"""

import typing as ty

from thds.core import config, log

from .errors import CyclicInheritance, is_class, require_class
from .registry import Registry

MARKER = config.item("thds.valuecheck.extends.marker", "Extends", parse=str)

logger = log.getLogger(__name__)

C = ty.TypeVar("C", bound=type)


def _validate_declaration(cls: type, supertype: type) -> None:
    require_class(cls, "A class declaring a supertype")
    require_class(supertype, "A declared supertype")
    logger.debug(
        "Registering declared supertype", cls=cls.__qualname__, supertype=supertype.__qualname__
    )


DECLARED_SUPERTYPES: Registry[type, type] = Registry(validate=_validate_declaration)


def extends(supertype: type) -> ty.Callable[[C], C]:
    """Class decorator setting the marker attribute, using the marker name configured at decoration
    time."""
    require_class(supertype, "supertype")

    def decorator(cls: C) -> C:
        require_class(cls, "extends() decorated object")
        setattr(cls, MARKER(), supertype)
        return cls

    return decorator


def declared_supertype(cls: type) -> ty.Optional[type]:
    registered = DECLARED_SUPERTYPES.get(cls)
    if registered is not None:
        return registered

    marker = vars(cls).get(MARKER())
    if marker is None:
        return None
    if not is_class(marker):
        logger.debug("Ignoring non-class inheritance marker", cls=cls.__qualname__, marker=marker)
        return None
    return marker


def supertype_chain(cls: type) -> ty.Iterator[type]:
    """Yields each declared supertype of `cls`, nearest first. Lazy, so a caller that stops early
    never reaches a cycle further down the chain."""
    visited = [cls]
    supertype = declared_supertype(cls)
    while supertype is not None:
        if any(supertype is seen for seen in visited):
            chain = [*visited, supertype]
            logger.warning("Declared supertypes form a cycle", chain=[c.__qualname__ for c in chain])
            raise CyclicInheritance(chain)
        yield supertype
        visited.append(supertype)
        supertype = declared_supertype(supertype)


def declares(cls: type, target: type) -> bool:
    """Whether `target` appears anywhere in the declared supertype chain of `cls`."""
    return any(supertype is target for supertype in supertype_chain(cls))
