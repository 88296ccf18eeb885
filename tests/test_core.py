"""
Tests for the marker lexicon.
"""
# Standard library imports ...
import unittest

# Local imports ...
from jpegmarkers import core, is_restart


class TestSuite(unittest.TestCase):

    def test_restart_markers(self):
        """RST0 through RST7 are restart markers"""
        for marker_id in range(0xffd0, 0xffd8):
            with self.subTest(marker_id=marker_id):
                self.assertTrue(is_restart(marker_id))

    def test_adjacent_codes(self):
        """The codes either side of the restart range are not"""
        self.assertFalse(is_restart(0xffcf))
        self.assertFalse(is_restart(0xffd8))

    def test_exactly_eight(self):
        """Of all the 16-bit values, only eight are restart markers"""
        restarts = [x for x in range(0x10000) if is_restart(x)]
        self.assertEqual(restarts, list(range(0xffd0, 0xffd8)))

    def test_sof_markers(self):
        """SOF4, SOF8, SOF12 are DHT, JPG, DAC"""
        self.assertEqual(len(core.SOF_MARKERS), 13)
        for marker_id in (core.DHT, core.JPG, core.DAC):
            self.assertNotIn(marker_id, core.SOF_MARKERS)

    def test_names(self):
        self.assertEqual(core.MARKER_NAME_DISPLAY[0xffe5], 'APP5')
        self.assertEqual(core.MARKER_NAME_DISPLAY[0xffd7], 'RST7')
        self.assertEqual(core.MARKER_NAME_DISPLAY[0xffcf], 'SOF15')
        self.assertEqual(core.MARKER_NAME_DISPLAY[0xfffd], 'JPG13')

    def test_unknown_name(self):
        """Codes outside the lexicon get a generic name"""
        for marker_id in (0xff00, 0xff02, 0xffff):
            self.assertEqual(
                core.MARKER_NAME_DISPLAY[marker_id], 'unexpected marker'
            )
