__title__ = 'argpattern'
__license__ = 'MIT'
# Placeholder, modified by dynamic-versioning.
__version__ = "0.1.0"

from .arguments import *
from .descriptions import *
from .faults import *
from .help import *
from .options import *
from .paramtypes import *
from .requests import *
from .schemas import *
from .validators import *

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

# Load the exposed API of every module
__all__ += arguments.__all__  # type: ignore[attr-defined]
__all__ += descriptions.__all__  # type: ignore[attr-defined]
__all__ += faults.__all__  # type: ignore[attr-defined]
__all__ += help.__all__  # type: ignore[attr-defined]
__all__ += options.__all__  # type: ignore[attr-defined]
__all__ += paramtypes.__all__  # type: ignore[attr-defined]
__all__ += requests.__all__  # type: ignore[attr-defined]
__all__ += schemas.__all__  # type: ignore[attr-defined]
__all__ += validators.__all__  # type: ignore[attr-defined]
