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
DecoPlan mods.

DecoPlan mods process dive segments while a dive plan is calculated.
Currently supported mods are

- dive plan validator

More mods can be implemented, i.e. to calculate CNS or to track PPO2.
"""

import logging

from .engine import State
from .error import EngineError
from .flow import coroutine
from . import const

logger = logging.getLogger(__name__)


class PlanValidator(object):
    """
    Dive plan validator (coroutine class).

    The validator verifies that

    - dive starts at the surface and depth of dive segments is continuous
    - ascent is not shallower than ascent ceiling
    - decompression gas mix is not used deeper than its maximum operating
      depth

    Tissue state is calculated by the validator independently of the
    planner.

    Create coroutine object, then call it to start the coroutine.

    :var planner: DecoPlan dive planner.
    """
    def __init__(self, planner):
        """
        Create coroutine object.

        :param planner: DecoPlan dive planner.
        """
        self.planner = planner


    @coroutine
    def __call__(self):
        """
        Start the coroutine.
        """
        logger.debug('started dive plan validator')
        planner = self.planner
        tissues = planner.model.init(planner.environment)
        depth = 0
        while True:
            segment, gas = yield
            self._continuity(depth, segment)
            tissues.expose(segment, gas)
            if planner.state in (State.ASCENDING, State.AT_STOP, State.SURFACED):
                self._ceiling_limit(tissues, segment)
                self._gas_mod(segment, gas)
            depth = segment.end_depth


    def _continuity(self, depth, segment):
        """
        Verify that dive segment starts at the end of previous one.

        :param depth: End depth of previous dive segment [m].
        :param segment: Dive segment to verify.
        """
        if abs(segment.start_depth - depth) > const.EPSILON:
            raise EngineError(
                'Dive segment {} does not start at {}m'.format(segment, depth)
            )


    def _ceiling_limit(self, tissues, segment):
        """
        Verify that end of dive segment is deeper than ascent ceiling.

        The ceiling is calculated with gradient factor high parameter.

        :param tissues: Tissue state after the dive segment.
        :param segment: Dive segment to verify.
        """
        model = self.planner.model
        env = self.planner.environment
        limit = model.ceiling_limit(tissues, model.gf.high / 100)
        ceiling = env.to_depth(limit)
        if ceiling > segment.end_depth + const.EPSILON:
            raise EngineError(
                'Ascent ceiling validation error at {} (ceiling={}m)'
                .format(segment, ceiling)
            )


    def _gas_mod(self, segment, gas):
        """
        Verify that decompression gas mix is used within its maximum
        operating depth.
        Bottom gas mixes are not verified.

        :param segment: Dive segment to verify.
        :param gas: Gas mix breathed during the segment.
        """
        bottom_gases = set(g for _, g in self.planner._segments)
        if gas in bottom_gases:
            return

        depth = max(segment.start_depth, segment.end_depth)
        for m in self.planner.deco_gases:
            if m.gas == gas and depth > m.mod + const.EPSILON:
                raise EngineError(
                    'Gas mix {} used at {}m deeper than its maximum operating'
                    ' depth {}m'.format(gas, depth, m.mod)
                )


# vim: sw=4:et:ai
