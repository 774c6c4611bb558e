"""Runtime value inspection: is a value set, and is it an instance of some class?"""

from thds.core import meta

from .errors import CyclicInheritance, InvalidArgument  # noqa: F401
from .extends import DECLARED_SUPERTYPES, extends  # noqa: F401
from .fp import negate  # noqa: F401
from .subject import UNSET, Snapshot, Subject, take_snapshot, value  # noqa: F401
from .tags import TypeTag, classify  # noqa: F401

__version__ = meta.get_version(__name__)
