"""Error hierarchy — public re-export surface.

Hierarchy::

    OptionalError            (base.py)
    ├── NoSuchElementError   (lookup.py, also a LookupError)
    └── ConfigError          (fluent_optional.config.validation)
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError
"""

from fluent_optional.errors.base import OptionalError
from fluent_optional.errors.lookup import NoSuchElementError

__all__ = ["NoSuchElementError", "OptionalError"]
