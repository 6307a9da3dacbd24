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
Dive environment - water density and altitude.

The environment determines the surface pressure and how depth in meters is
converted to absolute pressure in bars.
"""

import logging

from .error import ConfigError
from . import const

logger = logging.getLogger(__name__)


def altitude_pressure(altitude):
    """
    Calculate surface pressure at altitude using the barometric formula.

    :param altitude: Altitude above sea level [m].
    """
    return const.SURFACE_PRESSURE * (1 - 2.25577e-5 * altitude) ** 5.25588


class Environment(object):
    """
    Dive environment.

    :var density: Water density [kg/m^3].
    :var altitude: Altitude of dive site [m].
    :var surface_pressure: Surface pressure [bar].
    :var meter_to_bar: Pressure change per meter of depth [bar/m].
    """
    def __init__(self, density=const.SALTWATER, altitude=0):
        """
        Create dive environment.

        :param density: Water density [kg/m^3].
        :param altitude: Altitude of dive site [m].
        """
        super().__init__()
        if density <= 0:
            raise ConfigError('Water density has to be positive')
        if altitude < 0:
            raise ConfigError('Altitude below sea level is not supported')

        self.density = density
        self.altitude = altitude
        self.surface_pressure = altitude_pressure(altitude)
        self.meter_to_bar = density * const.GRAVITY / 10 ** 5

        if __debug__:
            logger.debug(
                'environment: surface pressure {:.5f}bar, {:.5f}bar/m'
                .format(self.surface_pressure, self.meter_to_bar)
            )


    def to_pressure(self, depth):
        """
        Convert depth in meters to absolute pressure in bars.

        :param depth: Depth in meters.
        """
        return depth * self.meter_to_bar + self.surface_pressure


    def to_depth(self, abs_p):
        """
        Convert absolute pressure to depth.

        :param abs_p: Absolute pressure of depth [bar].
        """
        depth = (abs_p - self.surface_pressure) / self.meter_to_bar
        return round(depth, const.SCALE)


    def __repr__(self):
        return 'Environment(density={}, altitude={})'.format(
            self.density, self.altitude
        )


# vim: sw=4:et:ai
