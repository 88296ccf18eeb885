# Standard library imports ...
import pathlib
import re

# Third party library imports ...
from setuptools import setup

kwargs = {
    'name': 'jpegmarkers',
    'description': 'Tools for listing the marker segments of JPEG files',
    'long_description': open('README.md').read(),
    'long_description_content_type': 'text/markdown',
    'packages': ['jpegmarkers'],
    'entry_points': {
        'console_scripts': ['jpegdump=jpegmarkers.command_line:main'],
    },
    'license': 'MIT',
    'test_suite': 'tests',
    'python_requires': '>=3.8',
    'install_requires': ['numpy', 'packaging'],
    'extras_require': {'test': ['pytest']},
}

kwargs['classifiers'] = [
    "Programming Language :: Python",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: Implementation :: CPython",
    "License :: OSI Approved :: MIT License",
    "Operating System :: MacOS",
    "Operating System :: POSIX :: Linux",
    "Operating System :: Microsoft :: Windows",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Information Technology",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules"
]

# Get the version string.  Cannot do this by importing jpegmarkers!
p = pathlib.Path('jpegmarkers') / 'version.py'
contents = p.read_text()
pattern = r'''version\s=\s"(?P<version>\d*.\d*.\d*.*)"\s'''
match = re.search(pattern, contents)
kwargs['version'] = match.group('version')

setup(**kwargs)
