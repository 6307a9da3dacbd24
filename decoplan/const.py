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
DecoPlan constants.
"""

LOG_2 = 0.6931471805599453

# rounding precision of depth and time values
SCALE = 10
EPSILON = 10 ** -SCALE

NUM_COMPARTMENTS = 16

# one minute [min]
MINUTE = 1

# surface pressure at sea level [bar]
SURFACE_PRESSURE = 1.01325

# water density [kg/m^3]
SALTWATER = 1030
FRESHWATER = 1000

# standard gravity [m/s^2]
GRAVITY = 9.80665

# inspired gas is dry by default, use 0.0627 for alveolar correction [bar]
WATER_VAPOUR_PRESSURE_DEFAULT = 0.0

# nitrogen fraction of air, tissues start saturated with it
AIR_N2 = 0.79

# depth interval between decompression stops [m]
STOP_INTERVAL = 3

# oxygen partial pressure limit for decompression gas mixes [bar]
DECO_PPO2 = 1.6

# default rates [m/min]; ascent is negative
ASCENT_RATE = -18
DESCENT_RATE = 30

# default surface air consumption [l/min]
BOTTOM_SAC = 20
DECO_SAC = 20

# linear search step of decompression stop length [min]
DECO_STOP_SEARCH_TIME = 8

# safety guards of the ascent loop
MAX_STOP_TIME = 24 * 60
MAX_ASCENT_ITERATIONS = 1000

# vim: sw=4:et:ai
