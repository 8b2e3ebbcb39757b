#!/usr/bin/env python
"""
Copyright 2025 Hathor Labs

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import re
from pathlib import Path

from setuptools import find_packages, setup

# the package can't be imported before its requirements are installed
with open(Path(__file__).parent / 'idlcodec' / 'version.py') as fp:
    __version__ = re.search(r"^__version__ = '([^']+)'", fp.read(), re.MULTILINE).group(1)

setup(
    name='idlcodec',
    version=__version__,
    description='Borsh account data codec for Anchor IDLs',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache License 2.0',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    packages=find_packages(exclude=('idlcodec_tests', 'idlcodec_tests.*')),
    package_data={
        'idlcodec.conf': ['*.yml'],
    },
    python_requires='>=3.11',
    install_requires=[
        'base58>=2.1',
        'pydantic>=2.0',
        'PyYAML>=6.0',
        'structlog>=22.3',
        'typing_extensions>=4.5',
    ],
    extras_require={
        'test': [
            'pytest>=7.2',
        ],
    },
)
