# standard library imports
import logging
import pathlib
import urllib.error
import urllib.request

# local imports
from .codestream import Codestream
from .options import get_option


logger = logging.getLogger(__name__)


class LoadError(IOError):
    """The JPEG could not be read from the filesystem or downloaded."""


def is_url(path):
    """Does the string name a remote http or https resource?"""
    return str(path).startswith(('http://', 'https://'))


def read_file(path):
    """Read an entire JPEG file from the filesystem.

    Parameters
    ----------
    path : str or path
        Location of the JPEG file.

    Returns
    -------
    bytes
        File contents.
    """
    path = pathlib.Path(path)
    try:
        with path.open(mode='rb') as f:
            buffer = f.read()
    except OSError as e:
        msg = f'Unable to read {path}:  {e}'
        raise LoadError(msg) from e

    logger.info(f'Read {len(buffer)} bytes from {path}.')
    return buffer


def download_file(url, timeout=None):
    """Download a JPEG over http or https.

    Parameters
    ----------
    url : str
        The link.
    timeout : float, optional
        Seconds to wait on the server, defaults to the lib.http_timeout
        option.

    Returns
    -------
    bytes
        Response body.
    """
    if timeout is None:
        timeout = get_option('lib.http_timeout')

    # Some servers refuse the urllib default user agent.
    request = urllib.request.Request(url, headers={'User-Agent': ''})
    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:
            status = response.status
            buffer = response.read()
    except urllib.error.HTTPError as e:
        msg = f'Error downloading {url}:  status code is {e.code}.'
        raise LoadError(msg) from e
    except OSError as e:
        # URLError and timeouts
        msg = f'Error downloading {url}:  {e}'
        raise LoadError(msg) from e

    if status != 200:
        msg = f'Error downloading {url}:  status code is {status}.'
        raise LoadError(msg)

    logger.info(f'Downloaded {len(buffer)} bytes from {url}.')
    return buffer


def read_jpeg(path, timeout=None):
    """Load the JPEG bytes from either a file or a URL.

    Parameters
    ----------
    path : str or path
        Filesystem path or http(s) link.
    timeout : float, optional
        Seconds to wait on a remote server.

    Returns
    -------
    bytes
        The JPEG codestream.

    Raises
    ------
    LoadError
        If the file is missing or unreadable, or the download fails.
    """
    if is_url(path):
        return download_file(str(path), timeout=timeout)
    else:
        return read_file(path)


class Jpeg(object):
    """Access the marker structure of a JPEG file.

    Attributes
    ----------
    path : str or path
        Filesystem path or URL of the JPEG.
    buffer : bytes
        Contents of the JPEG.
    codestream : Codestream
        Markers found in the JPEG.

    Examples
    --------
    >>> from jpegmarkers import Jpeg
    >>> jpg = Jpeg('image.jpg')  # doctest: +SKIP
    >>> jpg.codestream.segment[0].description  # doctest: +SKIP
    '0xFFD8: Start Of Image'
    """
    def __init__(self, path, timeout=None, strict=None):
        """
        Parameters
        ----------
        path : str or path
            Filesystem path or http(s) link.
        timeout : float, optional
            Seconds to wait on a remote server.
        strict : bool, optional
            Whether unrecognized markers are fatal.
        """
        self.path = path if is_url(path) else pathlib.Path(path)
        self.buffer = read_jpeg(path, timeout=timeout)
        self.codestream = Codestream(self.buffer, strict=strict)

    def __repr__(self):
        return f"jpegmarkers.Jpeg('{self.path}')"

    def __str__(self):
        if isinstance(self.path, pathlib.Path):
            name = self.path.name
        else:
            name = self.path
        return f'File:  {name}\n' + str(self.codestream)
