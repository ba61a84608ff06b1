"""Value-presence types — public re-export surface.

Modules:
  optional.py — Optional, Some, Nothing, MISSING
"""

from fluent_optional.types.optional import MISSING, Nothing, Optional, Some, is_absent

__all__ = ["MISSING", "Nothing", "Optional", "Some", "is_absent"]
