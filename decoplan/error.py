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

"""
DecoPlan exceptions.

Configuration errors are raised when a value is constructed, engine errors
are raised during dive plan calculation.
"""

class DecoPlanError(Exception):
    """
    Base class for all DecoPlan errors.
    """


class ConfigError(DecoPlanError):
    """
    Invalid configuration of DecoPlan planner or its input data.
    """


class EngineError(DecoPlanError):
    """
    Dive plan calculation failure.
    """


class InvalidComposition(ConfigError):
    """
    Gas mix fractions are not physically consistent.
    """


class InvalidSegment(ConfigError):
    """
    Dive segment with invalid depth or time.
    """


class DegenerateGas(ConfigError):
    """
    Maximum operating depth of a gas mix is undefined.
    """


class NoBottomSegments(ConfigError):
    """
    Dive plan requested without bottom segments.
    """


class UnreachableCeiling(EngineError):
    """
    Ascent does not reach the surface within decompression stop time or
    ascent iterations limit.
    """


# vim: sw=4:et:ai
