#!/usr/bin/env python3
#
# DecoPlan - dive decompression planning library.
#
# Copyright (C) 2013-2014 by Artur Wroblewski <wrobell@pld-linux.org>
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.
#

from setuptools import setup, find_packages

import decoplan

setup(
    name='decoplan',
    version=decoplan.__version__,
    description='DecoPlan - dive decompression planning library',
    author='Artur Wroblewski',
    author_email='wrobell@pld-linux.org',
    packages=find_packages('.', include=['decoplan', 'decoplan.*']),
    scripts=('bin/dp-plan',),
    include_package_data=True,
    long_description=\
"""\
DecoPlan is Python dive decompression planning library implementing
Buhlmann ZH-L16 decompression model with Erik Baker's gradient factors.
It calculates ascent profile with decompression stops and gas mixes
consumption for a dive.
""",
    classifiers=[
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
        'Programming Language :: Python :: 3',
        'Development Status :: 4 - Beta',
    ],
    keywords='diving dive decompression planner',
    license='GPL',
    install_requires=[],
    extras_require={'test': ['pytest']},
)

# vim: sw=4:et:ai
