from __future__ import annotations

"""Line, interact and binary buffer helpers for open I/O handles.

The public surface is re-exported here so callers can import every helper
from ``lzh`` directly.
"""

from .version import VERSION
from .errors import HandleError, HandleModeError, InvalidCountError
from .configs import HandleSettings, get_settings
from .lines import read_lines, write_lines
from .interact import interact, line_interact, line_interact_on
from .buffers import read_buffer, read_buffer_full, write_buffer

__version__ = VERSION

__all__ = [
    "HandleError",
    "HandleModeError",
    "InvalidCountError",
    "HandleSettings",
    "get_settings",
    "write_lines",
    "read_lines",
    "interact",
    "line_interact",
    "line_interact_on",
    "write_buffer",
    "read_buffer",
    "read_buffer_full",
]
