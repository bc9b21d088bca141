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

from setuptools import find_packages, setup

# importing the package would require its dependencies to be installed already
with open('xmlrpc_codec/version.py') as fp:
    __version__ = re.search(r"^BASE_VERSION = '([^']+)'", fp.read(), re.MULTILINE).group(1)

install_requires = [
    'pydantic>=2.0,<3',
    'pyyaml>=6.0',
    'structlog>=22.3',
    'typing_extensions>=4.12',
    'xmlschema>=3.0',
]

setup(
    name='xmlrpc-codec',
    version=__version__,
    description='XML-RPC encoder and decoder with grammar validation of untrusted input',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache License 2.0',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    packages=find_packages(exclude=('tests', 'tests.*')),
    package_data={'xmlrpc_codec.conf': ['*.yml']},
    python_requires='>=3.11',
    install_requires=install_requires,
    extras_require={
        'test': ['pytest>=7.2'],
    },
)
