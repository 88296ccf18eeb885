"""
Read default option values from a jpegmarkersrc file, if there is one.
"""
from configparser import ConfigParser
import os
import pathlib
import platform
import warnings

# Option keys in the configuration file and how to interpret their values.
_CONVERTERS = {
    'lib.http_timeout': ConfigParser.getfloat,
    'parse.strict': ConfigParser.getboolean,
    'print.short': ConfigParser.getboolean,
}


def jpegmarkersrc_fname():
    """Return the path to the configuration file.

    Search order:
        1) current working directory
        2) environ var XDG_CONFIG_HOME
        3) $HOME/.config/jpegmarkers/jpegmarkersrc
    """

    # Current directory.
    path = pathlib.Path.cwd() / 'jpegmarkersrc'
    if path.exists():
        return path

    confdir_path = get_configdir()
    if confdir_path is not None:
        path = confdir_path / 'jpegmarkersrc'
        if path.exists():
            return path

    # didn't find a configuration file.
    return None


def read_config_file():
    """
    Extract option defaults from a configuration file.

    The file is in INI format, with the options listed in an "options"
    section, e.g.

        [options]
        parse.strict = true
        lib.http_timeout = 30

    Returns
    -------
    dict
        Option values found in the file, empty if there is no file.
    """
    filename = jpegmarkersrc_fname()
    if filename is None:
        return {}

    parser = ConfigParser()
    parser.read(filename)
    if not parser.has_section('options'):
        return {}

    options = {}
    for key in parser.options('options'):
        try:
            converter = _CONVERTERS[key]
        except KeyError:
            msg = f'Unrecognized option "{key}" in {filename}, ignoring it.'
            warnings.warn(msg, UserWarning)
            continue

        try:
            value = converter(parser, 'options', key)
        except ValueError:
            msg = (
                f'Could not interpret the value of "{key}" in {filename}, '
                'ignoring it.'
            )
            warnings.warn(msg, UserWarning)
            continue

        if key == 'lib.http_timeout' and value <= 0:
            msg = (
                f'The value of "{key}" in {filename} must be positive, not '
                f'{value}, ignoring it.'
            )
            warnings.warn(msg, UserWarning)
            continue

        options[key] = value

    return options


def get_configdir():
    """Return string representing the configuration directory.

    Default is $HOME/.config/jpegmarkers.  You can override this with the
    XDG_CONFIG_HOME environment variable.
    """
    if 'XDG_CONFIG_HOME' in os.environ:
        return pathlib.Path(os.environ['XDG_CONFIG_HOME']) / 'jpegmarkers'

    if 'HOME' in os.environ and platform.system() != 'Windows':
        # HOME is set by WinPython to something unusual, so we don't
        # necessarily want that.
        return pathlib.Path(os.environ['HOME']) / '.config' / 'jpegmarkers'

    # Last stand.  Should handle windows... others?
    return pathlib.Path.home() / 'jpegmarkers'
