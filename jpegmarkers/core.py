"""Core definitions to be shared amongst the modules.

Marker codes are taken from table B.1 of ITU T.81 (ISO/IEC 10918-1).
"""
import collections


class _Keydefaultdict(collections.defaultdict):
    """Unlisted keys help form their own error message.

    Normally defaultdict uses a factory function with no input arguments, but
    that's not quite the behavior we want.
    """
    def __missing__(self, key):
        if self.default_factory is None:
            raise KeyError(key)
        else:
            ret = self[key] = self.default_factory(key)
            return ret


# Marker-only codes, no length field.
SOI = 0xffd8  # Start Of Image
EOI = 0xffd9  # End Of Image
TEM = 0xff01  # For temporary private use in arithmetic coding

# Length-prefixed codes.
DHT = 0xffc4  # Define Huffman Table(s)
JPG = 0xffc8  # Reserved for JPEG extensions
DAC = 0xffcc  # Define arithmetic coding conditioning(s)
SOS = 0xffda  # Start Of Scan
DQT = 0xffdb  # Define Quantization Table(s)
DNL = 0xffdc  # Define number of lines
DRI = 0xffdd  # Define Restart Interval
DHP = 0xffde  # Define hierarchical progression
EXP = 0xffdf  # Expand reference component(s)
COM = 0xfffe  # Comment

# Start of frame, non-differential, Huffman coding
SOF0 = 0xffc0
SOF1 = 0xffc1
SOF2 = 0xffc2
SOF3 = 0xffc3

# Start of frame, differential, Huffman coding.  SOF4 would be DHT.
SOF5 = 0xffc5
SOF6 = 0xffc6
SOF7 = 0xffc7

# Start of frame, non-differential, arithmetic coding.  SOF8 would be JPG.
SOF9 = 0xffc9
SOF10 = 0xffca
SOF11 = 0xffcb

# Start of frame, differential, arithmetic coding.  SOF12 would be DAC.
SOF13 = 0xffcd
SOF14 = 0xffce
SOF15 = 0xffcf

# Application segments.  APP1 is where Exif and XMP usually live.
APP0 = 0xffe0
APP1 = 0xffe1
APP15 = 0xffef

# JPEG extensions, JPG0 through JPG13.
JPG0 = 0xfff0
JPG13 = 0xfffd

# Restart markers.  The low three bits cycle from 0 to 7.
RST0 = 0xffd0
RST7 = 0xffd7

SOF_MARKERS = (
    SOF0, SOF1, SOF2, SOF3,
    SOF5, SOF6, SOF7,
    SOF9, SOF10, SOF11,
    SOF13, SOF14, SOF15,
)
APP_MARKERS = tuple(range(APP0, APP15 + 1))
RST_MARKERS = tuple(range(RST0, RST7 + 1))
JPGN_MARKERS = tuple(range(JPG0, JPG13 + 1))

# How to display the frame type of each SOFn marker.
_SOF_DISPLAY = {
    SOF0: 'Baseline DCT',
    SOF1: 'Extended sequential DCT',
    SOF2: 'Progressive DCT, Huffman coding',
    SOF3: 'Lossless (sequential)',
    SOF5: 'Differential sequential DCT',
    SOF6: 'Differential progressive DCT',
    SOF7: 'Differential lossless (sequential)',
    SOF9: 'Extended sequential DCT',
    SOF10: 'Progressive DCT',
    SOF11: 'Lossless (sequential)',
    SOF13: 'Differential sequential DCT',
    SOF14: 'Differential progressive DCT',
    SOF15: 'Differential lossless (sequential)',
}

_MARKER_NAMES = {
    SOI: 'Start Of Image',
    EOI: 'End Of Image',
    TEM: 'Temporary private use (TEM)',
    DHT: 'Define Huffman Table(s)',
    JPG: 'Reserved for JPEG extensions',
    DAC: 'Define arithmetic coding conditioning(s)',
    SOS: 'Start Of Scan',
    DQT: 'Define Quantization Table(s)',
    DNL: 'Define number of lines',
    DRI: 'Define Restart Interval',
    DHP: 'Define hierarchical progression',
    EXP: 'Expand reference component(s)',
    COM: 'Comment',
}
for _marker in SOF_MARKERS:
    _MARKER_NAMES[_marker] = f'SOF{_marker - SOF0}'
for _marker in APP_MARKERS:
    _MARKER_NAMES[_marker] = f'APP{_marker - APP0}'
for _marker in RST_MARKERS:
    _MARKER_NAMES[_marker] = f'RST{_marker - RST0}'
for _marker in JPGN_MARKERS:
    _MARKER_NAMES[_marker] = f'JPG{_marker - JPG0}'

_factory = lambda x: 'unexpected marker'  # noqa : E731
MARKER_NAME_DISPLAY = _Keydefaultdict(_factory, _MARKER_NAMES)


def is_restart(marker_id):
    """Is the marker one of the eight restart markers RST0 through RST7?"""
    return RST0 <= marker_id <= RST7
