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
Breathing gas consumption.

Gas volume used during a dive segment is surface air consumption (SAC)
rate scaled by absolute pressure at depth in atmospheres. The SAC rate is
measured at 1 atm, so breathing at sea level surface for 10 minutes with
20 l/min SAC rate uses 200 litres of gas. For ascent and descent the mean
of pressure at start and end of a segment is used, which is exact for
linear depth change.
"""

from collections import OrderedDict
import logging

from .segment import SegmentType, Phase
from . import const

logger = logging.getLogger(__name__)


class GasUsage(OrderedDict):
    """
    Volume of gas mixes used during a dive [l].

    The gas mixes are ordered by first usage.
    """
    @property
    def total(self):
        """
        Total volume of all gas mixes [l].
        """
        return sum(self.values())



def consumption(segment, sac_rate, environment):
    """
    Calculate volume of gas used during a dive segment.

    :param segment: Dive segment.
    :param sac_rate: Surface air consumption rate [l/min].
    :param environment: Dive environment.
    """
    to_pressure = environment.to_pressure
    if segment.type == SegmentType.ASC_DESC:
        abs_p = (to_pressure(segment.start_depth) + to_pressure(segment.end_depth)) / 2
    else:
        abs_p = to_pressure(segment.end_depth)
    return abs_p / const.SURFACE_PRESSURE * segment.time * sac_rate


def gas_usage(plan, bottom_sac, deco_sac, environment):
    """
    Calculate volume of each gas mix used during a dive.

    Bottom SAC rate is applied to bottom phase of a dive and deco SAC rate
    to its decompression phase.

    :param plan: Dive plan.
    :param bottom_sac: Surface air consumption rate at the bottom [l/min].
    :param deco_sac: Surface air consumption rate during ascent [l/min].
    :param environment: Dive environment.
    """
    usage = GasUsage()
    for segment, gas, phase in plan.phases():
        sac = bottom_sac if phase == Phase.BOTTOM else deco_sac
        usage[gas] = usage.get(gas, 0) + consumption(segment, sac, environment)

    if __debug__:
        logger.debug('gas usage: {}'.format(
            ', '.join('{}={:.1f}l'.format(g, v) for g, v in usage.items())
        ))
    return usage


# vim: sw=4:et:ai
