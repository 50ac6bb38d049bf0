__title__ = 'commandline'
__license__ = 'MIT'
# Placeholder, modified by dynamic-versioning.
__version__ = "0.1.0"

from .actions import *
from .config import *
from .faults import *
from .help import *
from .options import *
from .parameters import *
from .parser import *
from .validation import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

# Placeholder, modified by dynamic-versioning.
version_info = VersionInfo(0, 1, 0, "final", 0, "")

__all__ = (
    "__title__",
    "__license__",
    "__version__",
    "version_info"
)

# Load the exposed API of every layer, bottom-up
__all__ += actions.__all__  # type: ignore[attr-defined]
__all__ += config.__all__  # type: ignore[attr-defined]
__all__ += faults.__all__  # type: ignore[attr-defined]
__all__ += help.__all__  # type: ignore[attr-defined]
__all__ += options.__all__  # type: ignore[attr-defined]
__all__ += parameters.__all__  # type: ignore[attr-defined]
__all__ += parser.__all__  # type: ignore[attr-defined]
__all__ += validation.__all__  # type: ignore[attr-defined]
