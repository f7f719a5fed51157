#!/usr/bin/env python3
# FDLAYOUT: Intel Flash Descriptor Layout Utility
# Copyright (c) 2010-2021, Intel Corporation
#
# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU General Public License
# as published by the Free Software Foundation; Version 2.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301, USA.
#


"""
Setup module to install fdlayout package via setuptools
"""

import os
from setuptools import setup, find_packages


def long_description():
    with open('README') as readme:
        return readme.read()


def version():
    with open(os.path.join('fdlayout', 'VERSION')) as version_file:
        return version_file.read().strip()


package_data = {
    'fdlayout': ['VERSION', 'options/*.ini'],
}
install_requires = []

setup(
    name='fdlayout',
    version=version(),
    description='FDLAYOUT: Intel Flash Descriptor Layout Utility',
    license='GNU General Public License v2 (GPLv2)',
    platforms=['any'],
    long_description=long_description(),
    long_description_content_type='text/plain',

    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'License :: OSI Approved :: GNU General Public License v2 (GPLv2)',
        'Natural Language :: English',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Security',
        'Topic :: System :: Hardware'
    ],

    python_requires='>=3.7',
    packages=find_packages(exclude=['tests.*', 'tests']),
    package_data=package_data,
    py_modules=['fdlayout_util'],
    install_requires=install_requires,
    test_suite='tests',
    entry_points={
        'console_scripts': [
            'fdlayout_util=fdlayout_util:main',
        ],
    },
)
