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
DecoPlan unit tests tools.
"""

from decoplan.engine import Planner
from decoplan.environment import Environment
from decoplan.gas import Gas

AIR = Gas(21)
EAN50 = Gas(50)
O2 = Gas(100)


def _environment():
    """
    Create dive environment with unit test friendly pressure parameters.
    """
    env = Environment()
    env.surface_pressure = 1.0
    env.meter_to_bar = 0.1
    return env


def _planner(air=False):
    planner = Planner()
    planner.environment = _environment()
    if air:
        planner.add_segment(30, 20, 21)
    return planner


# vim: sw=4:et:ai
