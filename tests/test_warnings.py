"""
Test suite for warnings and errors issued on unrecognized markers.
"""
# Standard library imports
import unittest
import warnings

# Local imports
import jpegmarkers
from jpegmarkers import decode, scan_all, UnknownMarkerError, InvalidJPEGError

from . import fixtures


class TestSuite(fixtures.TestCommon):

    def tearDown(self):
        super().tearDown()
        warnings.resetwarnings()

    def test_unrecognized_marker(self):
        """
        SCENARIO:  There is a reserved marker between SOI and EOI.

        EXPECTED RESULT:  A warning is issued and the scan picks up again at
        the EOI marker.
        """
        buffer = b'\xff\xd8\xff\x02\x00\x01\x02\xff\xd9'
        with self.assertWarns(UserWarning):
            markers = scan_all(buffer)

        self.assertEqual(
            [m.marker_id for m in markers], [0xffd8, 0xff02, 0xffd9]
        )

    def test_unrecognized_marker_strict_option(self):
        """
        SCENARIO:  There is a reserved marker between SOI and EOI, and the
        parse.strict option is set.

        EXPECTED RESULT:  UnknownMarkerError
        """
        jpegmarkers.set_option('parse.strict', True)

        buffer = b'\xff\xd8\xff\x02\x00\x01\x02\xff\xd9'
        with self.assertRaises(UnknownMarkerError):
            scan_all(buffer)

    def test_unrecognized_marker_strict_keyword(self):
        """the keyword takes precedence over the option"""
        with self.assertRaises(UnknownMarkerError):
            decode(b'\xff\x02\x00\x01\xff\xd9', strict=True)

        jpegmarkers.set_option('parse.strict', True)
        with self.assertWarns(UserWarning):
            consumed, _ = decode(b'\xff\x02\x00\x01\xff\xd9', strict=False)
        self.assertEqual(consumed, 4)

    def test_fill_bytes_outside_scan(self):
        """
        SCENARIO:  0xff 0xff fill bytes directly follow SOI.

        EXPECTED RESULT:  The fill bytes are an unexpected marker, the scan
        continues with EOI.
        """
        buffer = b'\xff\xd8\xff\xff\xff\xd9'
        with self.assertWarns(UserWarning):
            markers = scan_all(buffer)

        actual = [(m.marker_id, m.offset, m.length) for m in markers]
        expected = [(0xffd8, 0, 2), (0xffff, 2, 2), (0xffd9, 4, 0)]
        self.assertEqual(actual, expected)

    def test_single_fill_byte_after_soi(self):
        """
        SCENARIO:  A single 0xff fill byte precedes EOI.

        EXPECTED RESULT:  The fill byte consumes one byte, and EOI is still
        found.
        """
        buffer = b'\xff\xd8\xff\xff\xd9'
        with self.assertWarns(UserWarning):
            markers = scan_all(buffer)

        actual = [(m.marker_id, m.offset, m.length) for m in markers]
        expected = [(0xffd8, 0, 2), (0xffff, 2, 1), (0xffd9, 3, 0)]
        self.assertEqual(actual, expected)
        self.assertEqual(
            markers[1].description, '0xFFFF: unexpected marker (1 fill bytes)'
        )

    def test_single_fill_byte_after_scan(self):
        """
        SCENARIO:  The entropy-coded data is followed by a single fill byte
        and then EOI.

        EXPECTED RESULT:  The scan data ends at the fill byte, which consumes
        one byte, and the last marker is EOI.
        """
        buffer = b'\xff\xd8' + fixtures.SOS + b'\x01\x02' + b'\xff\xff\xd9'
        with self.assertWarns(UserWarning):
            markers = scan_all(buffer)

        self.assertEqual(
            [m.marker_id for m in markers], [0xffd8, 0xffda, 0xffff, 0xffd9]
        )
        self.assertEqual(markers[2].length, 1)
        self.assertEqual(markers[-1].offset, len(buffer) - 2)

    def test_fill_bytes_at_end_of_buffer(self):
        """
        SCENARIO:  The codestream ends with fill bytes and no EOI.

        EXPECTED RESULT:  The fill bytes consume the rest of the buffer.
        """
        buffer = b'\xff\xd8\xff\xff'
        with self.assertWarns(UserWarning):
            markers = scan_all(buffer)

        actual = [(m.marker_id, m.offset, m.length) for m in markers]
        self.assertEqual(actual, [(0xffd8, 0, 2), (0xffff, 2, 2)])

    def test_stuffed_byte_outside_scan(self):
        """0xff 0x00 is not a marker outside of entropy-coded data"""
        with self.assertRaises(UnknownMarkerError):
            scan_all(b'\xff\xd8\xff\x00\xff\xd9', strict=True)

    def test_missing_lead_byte(self):
        """
        SCENARIO:  The bytes where a marker is expected do not start with
        0xff.

        EXPECTED RESULT:  Warning in permissive mode, the description names
        the bytes found.
        """
        buffer = b'\xff\xd8\x12\x34\xff\xd9'
        with self.assertWarns(UserWarning):
            markers = scan_all(buffer)

        self.assertEqual(markers[1].description,
                         '0x1234: unexpected marker (0 bytes)')
        self.assertEqual(markers[2].marker_id, 0xffd9)

    def test_unknown_marker_is_invalid_jpeg(self):
        """the specific errors share a base class"""
        self.assertTrue(issubclass(UnknownMarkerError, InvalidJPEGError))
        self.assertTrue(issubclass(InvalidJPEGError, IOError))

    def test_entropy_data_runs_to_end(self):
        """
        SCENARIO:  A restart marker is followed by data that never reaches
        another marker.

        EXPECTED RESULT:  A warning is issued.
        """
        with self.assertWarns(UserWarning):
            consumed, _ = decode(b'\xff\xd0\x01\x02\x03')
        self.assertEqual(consumed, 5)


class TestSuiteStrictDefault(unittest.TestCase):
    """Verify the default policy without the fixtures' option resets."""

    def test_default_is_permissive(self):
        self.assertFalse(jpegmarkers.get_option('parse.strict'))
