"""
Manage jpegmarkers configuration settings.
"""
# Standard library imports
import copy

# Local imports
from . import config


_original_options = {
    'lib.http_timeout': 180.0,
    'parse.strict': False,
    'print.short': False,
}
_original_options.update(config.read_config_file())
_options = copy.deepcopy(_original_options)


def set_option(key, value):
    """Set the value of the specified option.

    Available options:

        lib.http_timeout
        parse.strict
        print.short

    Parameters
    ----------
    key : str
        Name of a single option.
    value :
        New value of option.

    Option Descriptions
    -------------------
    lib.http_timeout : float
        Number of seconds to wait on a remote server when the JPEG is given as
        an http or https URL. [default: 180]
    parse.strict : bool
        When True, an unrecognized marker aborts the scan with
        UnknownMarkerError.  When False, a warning is issued, an "unexpected
        marker" record is produced and the scan resumes at the next marker.
        [default: False]
    print.short : bool
        When True, only the marker ID, offset, and length are displayed.
        Useful for displaying only the skeleton of a JPEG file.
        [default: False]

    See also
    --------
    get_option
    """
    if key not in _options.keys():
        raise KeyError('{key} not valid.'.format(key=key))

    if key == 'lib.http_timeout' and value <= 0:
        msg = f'The HTTP timeout must be positive, not {value}.'
        raise ValueError(msg)

    _options[key] = value


def get_option(key):
    """Return the value of the specified option

    Available options:

        lib.http_timeout
        parse.strict
        print.short

    Parameter
    ---------
    key : str
        Name of a single option.

    Returns
    -------
    result : the value of the option.

    See also
    --------
    set_option
    """
    return _options[key]


def reset_option(key):
    """
    Reset one or more options to their default value.

    Pass "all" as argument to reset all options.

    Parameter
    ---------
    key : str
        Name of a single option.
    """
    global _options
    if key == 'all':
        _options = copy.deepcopy(_original_options)
    else:
        if key not in _options.keys():
            raise KeyError('{key} not valid.'.format(key=key))
        _options[key] = _original_options[key]
