"""CLI helpers for WRAPTEST.

Utilities used by the command-line interface: option callbacks for logger
levels and test markers, and message emitters that write to stderr with
emoji→ASCII fallbacks.
"""

from .log_level_parser import parse_log_level
from .markers import parse_markers
from .messages import error, success, warn

__all__ = ["parse_log_level", "parse_markers", "error", "success", "warn"]
