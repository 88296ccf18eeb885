"""jpegmarkers - list the marker segments of JPEG files."""

__all__ = [
    'get_option', 'set_option', 'reset_option',
    'Codestream', 'Jpeg', 'read_jpeg',
    'decode', 'scan_all', 'has_restart_markers', 'is_restart',
    'InvalidJPEGError', 'TruncatedSegmentError', 'UnknownMarkerError',
    'LoadError',
]

# Local imports
from jpegmarkers import version
from .options import get_option, set_option, reset_option
from .core import is_restart
from .codestream import (
    Codestream, decode, scan_all, has_restart_markers,
    InvalidJPEGError, TruncatedSegmentError, UnknownMarkerError,
)
from .jpeg import Jpeg, LoadError, read_jpeg

__version__ = version.version
