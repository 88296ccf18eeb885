"""
Test fixtures common to more than one test point.
"""

# Standard library imports
import pathlib
import shutil
import struct
import tempfile
import unittest

# Local imports
import jpegmarkers


def segment(marker_id, payload=b''):
    """Build a length-prefixed marker segment around a payload."""
    return struct.pack('>HH', marker_id, len(payload) + 2) + payload


SOI = b'\xff\xd8'
EOI = b'\xff\xd9'

# JFIF 1.02, no density units, 1x1 aspect ratio, no thumbnail
JFIF_APP0 = bytes.fromhex('FFE000104A46494600010200000100010000')

# One 8-bit quantization table, destination 0
DQT = segment(0xffdb, b'\x00' + bytes(range(1, 65)))

# Baseline frame, 8-bit precision, 16 lines, 24 samples per line, 1 component
SOF0 = segment(0xffc0, struct.pack('>BHHB', 8, 16, 24, 1) + b'\x01\x11\x00')

# DC table 0 with a single one-bit code
DHT = segment(0xffc4, b'\x00' + b'\x01' + b'\x00' * 15 + b'\x05')

# One MCU between restart markers
DRI = segment(0xffdd, struct.pack('>H', 1))

# One component scan, full spectral selection
SOS = segment(0xffda, b'\x01\x01\x00\x00\x3f\x00')

# Entropy-coded data with a stuffed 0xff
SCAN_DATA = b'\x12\xff\x00\x34'
RST0 = b'\xff\xd0'
RST_DATA = b'\x56\x78'


def minimal_jpeg(restart=True):
    """A structurally complete, if meaningless, JPEG codestream.

    With restart markers, the markers and their offsets are

        SOI 0, APP0 2, DQT 20, SOF0 89, DHT 102, DRI 124, SOS 130, RST0 144,
        EOI 148
    """
    lst = [SOI, JFIF_APP0, DQT, SOF0, DHT]
    if restart:
        lst += [DRI, SOS, SCAN_DATA, RST0, RST_DATA]
    else:
        lst += [SOS, SCAN_DATA + RST_DATA]
    lst.append(EOI)
    return b''.join(lst)


class TestCommon(unittest.TestCase):
    """
    Common setup for many if not all tests.
    """

    def setUp(self):
        self.jpeg = minimal_jpeg()

        # Create a temporary directory to be cleaned up following each test, as
        # well as a name for a JPEG file.
        self.test_dir = tempfile.mkdtemp()
        self.test_dir_path = pathlib.Path(self.test_dir)
        self.temp_jpeg_filename = self.test_dir_path / 'test.jpg'

        # Reset options for every test.
        jpegmarkers.reset_option('all')

    def tearDown(self):
        shutil.rmtree(self.test_dir)
        jpegmarkers.reset_option('all')

    def write_jpeg(self, buffer=None):
        """Write the codestream to the temporary JPEG file."""
        if buffer is None:
            buffer = self.jpeg
        with self.temp_jpeg_filename.open(mode='wb') as f:
            f.write(buffer)
        return self.temp_jpeg_filename
