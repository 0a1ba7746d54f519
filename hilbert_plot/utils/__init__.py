"""Cross-cutting utilities (lowest dependency layer).

    - Atomic I/O and output naming (fs)
    - Unified logging (logging_config)

No module in utils/ may import from geometry, drawing or scripts.
"""

from . import fs
from . import logging_config

from .logging_config import push_context, setup_logging

__all__ = [
    'fs',
    'logging_config',
    'setup_logging',
    'push_context',
]
