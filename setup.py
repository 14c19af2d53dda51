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

import os

from setuptools import find_packages, setup

# read the version without importing strmap, its dependencies may not be installed yet
_version_globals: dict = {}
with open(os.path.join(os.path.dirname(__file__), 'strmap', 'version.py')) as fp:
    exec(fp.read(), _version_globals)

setup(
    name='strmap',
    version=_version_globals['__version__'],
    description='Convert records (dataclasses) to and from flat string maps',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache License 2.0',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    python_requires='>=3.11',
    packages=find_packages(exclude=('tests', 'tests.*')),
    install_requires=[
        'pydantic>=2',
        'PyYAML',
        'structlog',
        'typing_extensions',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
