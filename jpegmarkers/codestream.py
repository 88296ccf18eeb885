"""Codestream information.

The module contains classes used to store information parsed from the marker
segments of JPEG (ISO/IEC 10918-1) codestreams, along with the functions that
walk a codestream buffer.

A JPEG codestream is a sequence of segments, each beginning with a two-byte
marker whose first byte is 0xff.  Some markers consist of just those two
bytes.  Others are followed by a two-byte big-endian length that counts
itself plus the payload, but not the marker.  Start of scan and restart
markers are further followed by entropy-coded data that runs until the next
marker, with any literal 0xff byte in that data stuffed as 0xff 0x00.

References
----------
.. [JPEG10918-1] International Organization for Standardication.  ISO/IEC
   10918-1:1994 - Information technology -- Digital compression and coding of
   continuous-tone still images: Requirements and guidelines
"""

import logging
import struct
import warnings

import numpy as np

from .core import (
    SOI, EOI, TEM, DHT, JPG, DAC, SOS, DQT, DNL, DRI, DHP, EXP, COM, APP0,
    SOF0, SOF_MARKERS, APP_MARKERS, RST_MARKERS, JPGN_MARKERS, RST0,
    MARKER_NAME_DISPLAY, _SOF_DISPLAY, is_restart,
)
from .options import get_option


logger = logging.getLogger(__name__)

# Number of bytes examined at a time when looking for the end of
# entropy-coded data.
_BOUNDARY_CHUNK_SIZE = 65536

# Identifiers commonly found at the start of APPn payloads.
_APP_IDENTIFIERS = (
    (b'JFIF\x00', 'JFIF'),
    (b'JFXX\x00', 'JFIF extension'),
    (b'Exif\x00', 'Exif'),
    (b'http://ns.adobe.com/xap/1.0/\x00', 'XMP'),
    (b'ICC_PROFILE\x00', 'ICC profile'),
    (b'Adobe', 'Adobe'),
    (b'Ducky', 'Ducky'),
)


class InvalidJPEGError(IOError):
    """The codestream does not have a valid marker structure."""


class TruncatedSegmentError(InvalidJPEGError):
    """A length or payload field would be read beyond the available bytes."""


class UnknownMarkerError(InvalidJPEGError):
    """The two bytes at the current position are not a recognized marker."""


def find_marker_boundary(buffer, start):
    """Find the end of entropy-coded data.

    Parameters
    ----------
    buffer : bytes-like
        Codestream bytes.
    start : int
        Position of the first byte of entropy-coded data.

    Returns
    -------
    int or None
        Position of the first byte pair at or after start that is 0xff
        followed by anything other than 0x00, or None if the data runs to the
        end of the buffer.
    """
    data = np.frombuffer(buffer, dtype=np.uint8)
    last = len(data) - 1

    # A pair starting at position j needs data[j + 1], so the final byte can
    # never begin one.  Each chunk looks at pairs starting in [pos, stop).
    pos = start
    while pos < last:
        stop = min(pos + _BOUNDARY_CHUNK_SIZE, last)
        leading = data[pos:stop] == 0xff
        trailing = data[pos + 1:stop + 1] != 0x00
        indices = np.flatnonzero(leading & trailing)
        if indices.size > 0:
            return pos + int(indices[0])
        pos = stop

    return None


class SegmentDecoder(object):
    """Decode a single marker segment at the head of a buffer.

    Parameters
    ----------
    strict : bool, optional
        If True, an unrecognized marker raises UnknownMarkerError.  If False,
        it is reported with a warning and skipped.  Defaults to the
        parse.strict option.
    """
    def __init__(self, strict=None):
        self.strict = get_option('parse.strict') if strict is None else strict

        # Map each of the known markers to a method that processes them.
        self._process_marker_segment = {
            SOI: self._parse_marker_only,
            EOI: self._parse_eoi_marker,
            TEM: self._parse_marker_only,
            DHT: self._parse_dht_segment,
            JPG: self._parse_generic_segment,
            DAC: self._parse_dac_segment,
            SOS: self._parse_sos_segment,
            DQT: self._parse_dqt_segment,
            DNL: self._parse_dnl_segment,
            DRI: self._parse_dri_segment,
            DHP: self._parse_dhp_segment,
            EXP: self._parse_exp_segment,
            COM: self._parse_com_segment,
        }
        for marker_id in SOF_MARKERS:
            self._process_marker_segment[marker_id] = self._parse_sof_segment
        for marker_id in APP_MARKERS:
            self._process_marker_segment[marker_id] = self._parse_app_segment
        for marker_id in RST_MARKERS:
            self._process_marker_segment[marker_id] = self._parse_rst_marker
        for marker_id in JPGN_MARKERS:
            self._process_marker_segment[marker_id] = (
                self._parse_generic_segment
            )

    def decode(self, buffer, offset=0):
        """Decode the marker segment at the start of the buffer.

        Parameters
        ----------
        buffer : bytes-like
            Codestream bytes beginning with the 0xff of a marker.
        offset : int, optional
            Position of the buffer within the whole codestream.  It is
            recorded in the returned marker and used in messages.

        Returns
        -------
        tuple
            Number of bytes consumed by the segment (zero for EOI) and the
            Marker describing it.

        Raises
        ------
        TruncatedSegmentError
            If the segment extends beyond the end of the buffer.
        UnknownMarkerError
            If the marker is not recognized and parsing is strict.
        """
        self._offset = offset
        if len(buffer) < 2:
            msg = (
                f'Expected to find a marker at byte offset {offset}, but only '
                f'{len(buffer)} byte(s) remain.'
            )
            raise TruncatedSegmentError(msg)

        marker_id, = struct.unpack_from('>H', buffer, 0)

        # Fill bytes and a missing 0xff lead byte fall through to here.
        try:
            parse = self._process_marker_segment[marker_id]
        except KeyError:
            return self._parse_unrecognized_marker(buffer, marker_id)

        consumed, marker = parse(buffer, marker_id)
        marker.offset = offset
        marker.length = consumed
        return consumed, marker

    def _read_length(self, buffer, marker_id, nbytes=0):
        """Read and verify the length field of a marker segment.

        Parameters
        ----------
        buffer : bytes-like
            Codestream bytes beginning with the marker.
        marker_id : int
            The marker.
        nbytes : int, optional
            Number of fixed payload bytes following the length field that the
            caller intends to read.

        Returns
        -------
        int
            Value of the length field.
        """
        name = MARKER_NAME_DISPLAY[marker_id]
        if len(buffer) < 4:
            msg = (
                f'The length field of the 0x{marker_id:X} ({name}) marker at '
                f'byte offset {self._offset} is truncated.'
            )
            raise TruncatedSegmentError(msg)

        length, = struct.unpack_from('>H', buffer, 2)
        if length < 2 + nbytes:
            msg = (
                f'The 0x{marker_id:X} ({name}) marker segment at byte offset '
                f'{self._offset} has a length of {length}, too short to hold '
                f'the {2 + nbytes} bytes that must be read.'
            )
            raise TruncatedSegmentError(msg)

        if 2 + length > len(buffer):
            msg = (
                f'The 0x{marker_id:X} ({name}) marker segment at byte offset '
                f'{self._offset} has a length of {length}, but only '
                f'{len(buffer) - 2} bytes remain.'
            )
            raise TruncatedSegmentError(msg)

        return length

    def _payload(self, buffer, length):
        """Payload bytes following the length field."""
        return bytes(buffer[4:2 + length])

    def _entropy_coded_end(self, buffer, marker_id, start):
        """Position of the marker following entropy-coded data."""
        end = find_marker_boundary(buffer, start)
        if end is None:
            msg = (
                f'The entropy-coded data following the 0x{marker_id:X} marker '
                f'at byte offset {self._offset} runs to the end of the buffer '
                f'without reaching another marker.'
            )
            warnings.warn(msg, UserWarning)
            end = len(buffer)
        return end

    def _parse_marker_only(self, buffer, marker_id):
        """SOI and TEM have no segment associated with them."""
        return 2, Marker(marker_id)

    def _parse_eoi_marker(self, buffer, marker_id):
        """EOI consumes nothing, signalling the end of the codestream."""
        return 0, Marker(marker_id)

    def _parse_unrecognized_marker(self, buffer, marker_id):
        """Either error out or skip ahead to the next marker."""
        if self.strict:
            msg = (
                f'Invalid marker ID 0x{marker_id:X} encountered at byte '
                f'offset {self._offset}.'
            )
            raise UnknownMarkerError(msg)

        if marker_id == 0xffff:
            # Fill bytes.  The last 0xff of the run leads the next marker.
            end = 1
            while end + 1 < len(buffer) and buffer[end + 1] == 0xff:
                end += 1
            if end + 1 >= len(buffer):
                end = len(buffer)

            msg = (
                f'{end} fill byte(s) encountered at byte offset '
                f'{self._offset}, skipping to the next marker.'
            )
            warnings.warn(msg, UserWarning)
            description = (
                f'0x{marker_id:X}: unexpected marker ({end} fill bytes)'
            )
            return end, Marker(
                marker_id, offset=self._offset, length=end,
                description=description
            )

        msg = (
            f'Unrecognized marker 0x{marker_id:X} encountered at byte offset '
            f'{self._offset}, skipping to the next marker.'
        )
        warnings.warn(msg, UserWarning)

        end = self._entropy_coded_end(buffer, marker_id, 2)
        description = f'0x{marker_id:X}: unexpected marker ({end - 2} bytes)'
        return end, Marker(
            marker_id, offset=self._offset, length=end, description=description
        )

    def _parse_generic_segment(self, buffer, marker_id):
        """Valid marker segment, but the payload is not interpreted."""
        length = self._read_length(buffer, marker_id)
        return 2 + length, Marker(
            marker_id,
            description=(
                f'0x{marker_id:X}: {MARKER_NAME_DISPLAY[marker_id]} '
                f'(length {length})'
            )
        )

    def _parse_app_segment(self, buffer, marker_id):
        """Parse an APPn segment.

        APP0 is interpreted as a JFIF header when it carries the JFIF
        identifier.  Otherwise only the identifier, if a common one, and the
        length are reported.
        """
        length = self._read_length(buffer, marker_id)
        payload = self._payload(buffer, length)

        if marker_id == APP0 and payload.startswith(b'JFIF\x00'):
            if len(payload) < 14:
                msg = (
                    f'The JFIF APP0 segment at byte offset {self._offset} has '
                    f'a length of {length}, too short to hold the 16 bytes of '
                    f'the JFIF header.'
                )
                raise TruncatedSegmentError(msg)
            return 2 + length, _parse_jfif_payload(payload)

        identifier = None
        for prefix, name in _APP_IDENTIFIERS:
            if payload.startswith(prefix):
                identifier = name
                break

        return 2 + length, APPmarker(marker_id, identifier, length)

    def _parse_sof_segment(self, buffer, marker_id):
        """Parse any of the SOFn frame header segments."""
        length = self._read_length(buffer, marker_id, nbytes=6)
        precision, height, width, ncomps = struct.unpack_from(
            '>BHHB', buffer, 4
        )
        return 2 + length, SOFmarker(marker_id, precision, height, width,
                                     ncomps)

    def _parse_dhp_segment(self, buffer, marker_id):
        """The DHP segment has the same layout as a frame header."""
        length = self._read_length(buffer, marker_id, nbytes=6)
        precision, height, width, ncomps = struct.unpack_from(
            '>BHHB', buffer, 4
        )
        return 2 + length, DHPmarker(precision, height, width, ncomps)

    def _parse_dqt_segment(self, buffer, marker_id):
        """Parse the DQT segment for the table identifiers.

        Each table is a precision/destination byte followed by 64 elements of
        either 8 or 16 bits.
        """
        length = self._read_length(buffer, marker_id, nbytes=1)
        payload = self._payload(buffer, length)

        tables = []
        pos = 0
        while pos < len(payload):
            pq = payload[pos] >> 4
            tq = payload[pos] & 0x0f
            nbytes = 1 + 64 * (2 if pq else 1)
            if pos + nbytes > len(payload):
                msg = (
                    f'Quantization table {tq} in the DQT segment at byte '
                    f'offset {self._offset} extends past the segment length '
                    f'of {length}.'
                )
                raise TruncatedSegmentError(msg)
            tables.append((pq, tq))
            pos += nbytes

        return 2 + length, DQTmarker(tables, length)

    def _parse_dht_segment(self, buffer, marker_id):
        """Parse the DHT segment for the table classes and identifiers.

        Each table is a class/destination byte, sixteen code counts, and then
        as many symbol values as the counts add up to.
        """
        length = self._read_length(buffer, marker_id, nbytes=17)
        payload = self._payload(buffer, length)

        tables = []
        pos = 0
        while pos < len(payload):
            tc = payload[pos] >> 4
            th = payload[pos] & 0x0f
            nbytes = 17
            if pos + nbytes <= len(payload):
                nbytes += sum(payload[pos + 1:pos + 17])
            if pos + nbytes > len(payload):
                msg = (
                    f'Huffman table {tc}/{th} in the DHT segment at byte '
                    f'offset {self._offset} extends past the segment length '
                    f'of {length}.'
                )
                raise TruncatedSegmentError(msg)
            tables.append((tc, th))
            pos += nbytes

        return 2 + length, DHTmarker(tables, length)

    def _parse_dac_segment(self, buffer, marker_id):
        """Parse the DAC segment.

        Each conditioning is a class/destination byte followed by the
        conditioning table value.
        """
        length = self._read_length(buffer, marker_id, nbytes=2)
        payload = self._payload(buffer, length)
        if len(payload) % 2:
            msg = (
                f'The DAC segment at byte offset {self._offset} has a length '
                f'of {length}, which leaves a partial conditioning entry.'
            )
            raise TruncatedSegmentError(msg)

        conditionings = [
            (payload[j] >> 4, payload[j] & 0x0f, payload[j + 1])
            for j in range(0, len(payload), 2)
        ]
        return 2 + length, DACmarker(conditionings, length)

    def _parse_dnl_segment(self, buffer, marker_id):
        length = self._read_length(buffer, marker_id, nbytes=2)
        num_lines, = struct.unpack_from('>H', buffer, 4)
        return 2 + length, DNLmarker(num_lines)

    def _parse_dri_segment(self, buffer, marker_id):
        length = self._read_length(buffer, marker_id, nbytes=2)
        interval, = struct.unpack_from('>H', buffer, 4)
        return 2 + length, DRImarker(interval)

    def _parse_exp_segment(self, buffer, marker_id):
        length = self._read_length(buffer, marker_id, nbytes=1)
        eh = buffer[4] >> 4
        ev = buffer[4] & 0x0f
        return 2 + length, EXPmarker(eh, ev)

    def _parse_com_segment(self, buffer, marker_id):
        length = self._read_length(buffer, marker_id)
        return 2 + length, COMmarker(self._payload(buffer, length), length)

    def _parse_sos_segment(self, buffer, marker_id):
        """Parse the scan header, then run through the entropy-coded data."""
        length = self._read_length(buffer, marker_id, nbytes=1)
        ns = buffer[4]

        header_end = 2 + length
        end = self._entropy_coded_end(buffer, marker_id, header_end)
        return end, SOSmarker(ns, end - header_end)

    def _parse_rst_marker(self, buffer, marker_id):
        """RSTm has no header, just entropy-coded data."""
        end = self._entropy_coded_end(buffer, marker_id, 2)
        return end, RSTmarker(marker_id, end - 2)


def _parse_jfif_payload(payload):
    """Interpret the payload of a JFIF APP0 segment."""
    lst = struct.unpack_from('>5sBBBHHBB', payload, 0)
    identifier, major, minor, units, xdensity, ydensity, xthumb, ythumb = lst
    return JFIFmarker(
        identifier=identifier.rstrip(b'\x00').decode('latin-1'),
        version=(major, minor),
        units=units,
        density=(xdensity, ydensity),
        thumbnail=(xthumb, ythumb),
    )


def decode(buffer, offset=0, strict=None):
    """Decode the marker segment at the start of a buffer.

    Parameters
    ----------
    buffer : bytes-like
        Codestream bytes beginning with the 0xff of a marker.
    offset : int, optional
        Position of the buffer within the whole codestream.
    strict : bool, optional
        Whether unrecognized markers are fatal.  Defaults to the parse.strict
        option.

    Returns
    -------
    tuple
        Number of bytes consumed (zero for EOI) and the Marker.
    """
    return SegmentDecoder(strict=strict).decode(buffer, offset=offset)


def scan_all(buffer, strict=None):
    """Walk the codestream, collecting every marker.

    The walk stops after the EOI marker or when the buffer is exhausted,
    whichever comes first.  A codestream without EOI is therefore not an
    error; the markers found up until the end are returned.

    Parameters
    ----------
    buffer : bytes-like
        The entire codestream.
    strict : bool, optional
        Whether unrecognized markers are fatal.  Defaults to the parse.strict
        option.

    Returns
    -------
    list
        Marker objects in the order that they occur.
    """
    decoder = SegmentDecoder(strict=strict)
    view = memoryview(buffer)

    markers = []
    offset = 0
    while offset < len(view):
        consumed, marker = decoder.decode(view[offset:], offset=offset)
        logger.debug('%s @ (%d, %d)', marker.description, offset, consumed)
        markers.append(marker)

        if consumed == 0:
            # EOI
            break
        offset += consumed

    return markers


def has_restart_markers(buffer, strict=None):
    """Was the image encoded with a restart interval?

    Returns
    -------
    bool
        True if any RSTm marker occurs in the codestream.
    """
    return any(is_restart(marker.marker_id)
               for marker in scan_all(buffer, strict=strict))


class Codestream(object):
    """Container for codestream information.

    Attributes
    ----------
    segment : iterable
        list of markers
    offset : int
        Offset of the codestream from start of the file in bytes.
    length : int
        Length of the codestream in bytes.

    Raises
    ------
    InvalidJPEGError
        If the codestream does not parse properly.
    """
    def __init__(self, buffer, offset=0, strict=None):
        """
        Parameters
        ----------
        buffer : bytes-like
            The codestream.
        offset : int, optional
            Offset of the codestream within its file.
        strict : bool, optional
            Whether unrecognized markers are fatal.
        """
        self.offset = offset
        self.length = len(buffer)
        self.segment = scan_all(buffer, strict=strict)

    @property
    def has_restart_markers(self):
        return any(is_restart(marker.marker_id) for marker in self.segment)

    def __str__(self):
        msg = 'Codestream:\n'
        short = get_option('print.short')
        for marker in self.segment:
            if short:
                line = (
                    f'{marker.offset:6x} - 0x{marker.marker_id:X} '
                    f'({marker.length})'
                )
            else:
                line = f'{marker.offset:6x} - {marker.description}'
            msg += '    ' + line + '\n'
        return msg.rstrip()


class Marker(object):
    """Marker information.

    Attributes
    ----------
    marker_id : int
        Marker code, 0xff00 through 0xffff for any valid marker.
    offset : int
        Offset of the marker in bytes from the beginning of the codestream.
    length : int
        Number of bytes spanned by the marker segment, including the two
        bytes constituting the marker and any entropy-coded data that
        follows.  Zero for EOI.
    description : str
        Summary of the marker and its decoded fields.
    """
    def __init__(self, marker_id, offset=-1, length=-1, description=None):
        self.marker_id = marker_id
        self.offset = offset
        self.length = length
        if description is None:
            description = (
                f'0x{marker_id:X}: {MARKER_NAME_DISPLAY[marker_id]}'
            )
        self.description = description

    def __repr__(self):
        msg = (
            f'jpegmarkers.codestream.Marker(0x{self.marker_id:x}, '
            f'offset={self.offset}, length={self.length}, '
            f'description={self.description!r})'
        )
        return msg

    def __str__(self):
        return self.description


class APPmarker(Marker):
    """APPn (application data) segment information.

    Attributes
    ----------
    identifier : str or None
        Name of the application data format, if recognized.
    segment_length : int
        Value of the length field.
    """
    def __init__(self, marker_id, identifier, segment_length):
        self.identifier = identifier
        self.segment_length = segment_length

        msg = f'0x{marker_id:X}: {MARKER_NAME_DISPLAY[marker_id]}'
        if identifier is not None:
            msg += f' ({identifier})'
        msg += f' (length {segment_length})'
        super().__init__(marker_id, description=msg)


class JFIFmarker(Marker):
    """JFIF APP0 segment information.

    Attributes
    ----------
    identifier : str
        Always 'JFIF'.
    version : str
        JFIF version, e.g. '1.02'.
    units : int
        Density units, 0 for none (aspect ratio only), 1 for dots per inch,
        2 for dots per centimeter.
    xdensity, ydensity : int
        Horizontal, vertical pixel density.
    xthumbnail, ythumbnail : int
        Width, height of the embedded thumbnail, zero if there is none.

    References
    ----------
    .. [JFIF] Hamilton, E.  JPEG File Interchange Format, Version 1.02, 1992.
    """
    def __init__(self, identifier, version, units, density, thumbnail):
        self.identifier = identifier
        self.version = '{0}.{1:02d}'.format(*version)
        self.units = units
        self.xdensity, self.ydensity = density
        self.xthumbnail, self.ythumbnail = thumbnail

        msg = (
            f'0x{APP0:X}: JFIF ['
            f'Identifier:{self.identifier}, '
            f'JFIF version:{self.version}, '
            f'Density units:{self.units}, '
            f'Xdensity:{self.xdensity}, '
            f'Ydensity:{self.ydensity}, '
            f'Xthumbnail:{self.xthumbnail}, '
            f'Ythumbnail:{self.ythumbnail}'
            f']'
        )
        super().__init__(APP0, description=msg)


class SOFmarker(Marker):
    """Container for Start of Frame (SOFn) segment information.

    Attributes
    ----------
    precision : int
        Sample precision in bits.
    height, width : int
        Number of lines and number of samples per line.
    num_components : int
        Number of image components in the frame.
    """
    def __init__(self, marker_id, precision, height, width, num_components):
        self.precision = precision
        self.height = height
        self.width = width
        self.num_components = num_components

        fields = f'[P:{precision}, Y:{height}, X:{width}, Nf:{num_components}]'
        if marker_id == SOF0:
            msg = f'0x{SOF0:X}: Start Of Frame (Baseline DCT) {fields}'
        else:
            msg = (
                f'0x{marker_id:X}: Start Of Frame (SOF{marker_id - SOF0}) '
                f'({_SOF_DISPLAY[marker_id]}) {fields}'
            )
        super().__init__(marker_id, description=msg)


class DHPmarker(Marker):
    """Define hierarchical progression (DHP) segment information.

    Same fields as a frame header, describing the final image size.
    """
    def __init__(self, precision, height, width, num_components):
        self.precision = precision
        self.height = height
        self.width = width
        self.num_components = num_components

        msg = (
            f'0x{DHP:X}: {MARKER_NAME_DISPLAY[DHP]} '
            f'[P:{precision}, Y:{height}, X:{width}, Nf:{num_components}]'
        )
        super().__init__(DHP, description=msg)


class DQTmarker(Marker):
    """Define quantization table(s) (DQT) segment information.

    Attributes
    ----------
    tables : list
        (precision, destination) pair for each table, precision being 0 for
        8-bit and 1 for 16-bit elements.
    segment_length : int
        Value of the length field.
    """
    def __init__(self, tables, segment_length):
        self.tables = tables
        self.segment_length = segment_length

        pairs = ', '.join(f'{pq}/{tq}' for pq, tq in tables)
        msg = (
            f'0x{DQT:X}: {MARKER_NAME_DISPLAY[DQT]} [Pq/Tq:{pairs}] '
            f'(length {segment_length})'
        )
        super().__init__(DQT, description=msg)


class DHTmarker(Marker):
    """Define Huffman table(s) (DHT) segment information.

    Attributes
    ----------
    tables : list
        (class, destination) pair for each table, class being 0 for DC and 1
        for AC tables.
    segment_length : int
        Value of the length field.
    """
    def __init__(self, tables, segment_length):
        self.tables = tables
        self.segment_length = segment_length

        pairs = ', '.join(f'{tc}/{th}' for tc, th in tables)
        msg = (
            f'0x{DHT:X}: {MARKER_NAME_DISPLAY[DHT]} [Tc/Th:{pairs}] '
            f'(length {segment_length})'
        )
        super().__init__(DHT, description=msg)


class DACmarker(Marker):
    """Define arithmetic coding conditioning(s) (DAC) segment information.

    Attributes
    ----------
    conditionings : list
        (table class, destination, conditioning value) for each entry.
    segment_length : int
        Value of the length field.
    """
    def __init__(self, conditionings, segment_length):
        self.conditionings = conditionings
        self.segment_length = segment_length

        entries = '; '.join(f'Tc:{tc}, Tb:{tb}, Cs:{cs}'
                            for tc, tb, cs in conditionings)
        msg = (
            f'0x{DAC:X}: {MARKER_NAME_DISPLAY[DAC]} [{entries}] '
            f'(length {segment_length})'
        )
        super().__init__(DAC, description=msg)


class DNLmarker(Marker):
    """Define number of lines (DNL) segment information."""
    def __init__(self, num_lines):
        self.num_lines = num_lines
        msg = f'0x{DNL:X}: {MARKER_NAME_DISPLAY[DNL]} [NL:{num_lines}]'
        super().__init__(DNL, description=msg)


class DRImarker(Marker):
    """Define restart interval (DRI) segment information.

    Attributes
    ----------
    interval : int
        Number of MCUs between restart markers, zero to disable them.
    """
    def __init__(self, interval):
        self.interval = interval
        msg = f'0x{DRI:X}: {MARKER_NAME_DISPLAY[DRI]} [Ri:{interval}]'
        super().__init__(DRI, description=msg)


class EXPmarker(Marker):
    """Expand reference component(s) (EXP) segment information."""
    def __init__(self, eh, ev):
        self.eh = eh
        self.ev = ev
        msg = f'0x{EXP:X}: {MARKER_NAME_DISPLAY[EXP]} [Eh:{eh}, Ev:{ev}]'
        super().__init__(EXP, description=msg)


class COMmarker(Marker):
    """Comment (COM) segment information.

    Attributes
    ----------
    comment : bytes
        Raw bytes of the comment.
    segment_length : int
        Value of the length field.
    """
    def __init__(self, comment, segment_length):
        self.comment = comment
        self.segment_length = segment_length

        msg = f'0x{COM:X}: {MARKER_NAME_DISPLAY[COM]}'
        text = comment.decode('latin-1')
        if text.isprintable():
            msg += f' "{text}"'
        msg += f' (length {segment_length})'
        super().__init__(COM, description=msg)


class SOSmarker(Marker):
    """Container for Start of Scan (SOS) segment information.

    Attributes
    ----------
    num_components : int
        Number of image components in the scan.
    data_length : int
        Number of bytes of entropy-coded data following the scan header.
    """
    def __init__(self, num_components, data_length):
        self.num_components = num_components
        self.data_length = data_length

        msg = (
            f'0x{SOS:X}: {MARKER_NAME_DISPLAY[SOS]} [Ns:{num_components}] '
            f'({data_length} bytes)'
        )
        super().__init__(SOS, description=msg)


class RSTmarker(Marker):
    """Restart (RSTm) marker information.

    Attributes
    ----------
    data_length : int
        Number of bytes of entropy-coded data following the marker.
    """
    def __init__(self, marker_id, data_length):
        self.data_length = data_length

        msg = (
            f'0x{marker_id:X}: RST{marker_id - RST0} ({data_length} bytes)'
        )
        super().__init__(marker_id, description=msg)
