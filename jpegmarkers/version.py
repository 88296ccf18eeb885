"""
This file is part of jpegmarkers, a Python tool for listing the marker
segments of JPEG files.

License:  MIT
"""

# Standard library imports ...
import sys

# Third party library imports ...
from packaging.version import parse
import numpy as np

# Do not change the format of this next line!  Doing so risks breaking
# setup.py
version = "0.3.0"

version_tuple = parse(version).release

__doc__ = f"""\
This is jpegmarkers **{version}**
"""

info = f"""\
Summary of jpegmarkers configuration
------------------------------------

jpegmarkers   {version}
Python        {sys.version}
sys.platform  {sys.platform}
sys.maxsize   {sys.maxsize}
numpy         {np.__version__}
"""
