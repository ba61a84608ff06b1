"""
fluent_optional – Optional[T] with Some / Nothing variants.

Import path convention::

    from fluent_optional import Optional, NoSuchElementError
    from fluent_optional.config import EnvSettingsLoader, OptionalSettings
    from fluent_optional.observability import configure_logging
"""

from fluent_optional.errors import NoSuchElementError, OptionalError
from fluent_optional.types import MISSING, Nothing, Optional, Some, is_absent

__version__ = "0.1.0"
__all__ = [
    "MISSING",
    "NoSuchElementError",
    "Nothing",
    "Optional",
    "OptionalError",
    "Some",
    "__version__",
    "is_absent",
]
