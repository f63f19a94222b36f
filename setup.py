#!/usr/bin/env python3
# Always prefer setuptools over distutils
from setuptools import setup, find_packages
# To use a consistent encoding
from codecs import open
import os
import re

here = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()


def find_version(fname):
    with open(os.path.join(here, fname), 'rt') as fd:
        contents = fd.read()
        match = re.search(r"^PNGME_VERSION = ['\"]([^'\"]*)['\"]",
                          contents, re.M)
        if match:
            return match.group(1)
        raise RuntimeError('Unable to find version string')


setup(
    name='pngme',
    version=find_version('pngme/__main__.py'),
    description='Hide messages in PNG chunks',
    long_description=long_description,
    long_description_content_type='text/markdown',
    classifiers=[
        # How mature is this project? Common values are
        #   3 - Alpha
        #   4 - Beta
        #   5 - Production/Stable
        'Development Status :: 3 - Alpha',
    ],
    packages=find_packages(exclude=['tests', 'tests.*']),
    keywords='steganography png',
    python_requires='>=3.6',
    entry_points={
        'console_scripts': [
            'pngme = pngme.__main__:main',
        ]
    },
    install_requires=[
        'cryptography',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
