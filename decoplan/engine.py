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
DecoPlan dive planning engine.

The planner runs requested bottom segments through tissue compartments
model, then ascends to the surface performing decompression stops when
required by ascent ceiling.

[mpdfd] Powell, Mark. Deco for Divers, United Kingdom, 2010
"""

from collections import namedtuple
import math
import logging

from .model import ZH_L16_GF
from .environment import Environment
from .gas import Gas, deco_gas, best_gas
from .segment import Phase, SegmentType, bottom, deco_stop, transit
from .consumption import GasUsage, gas_usage
from .error import ConfigError, NoBottomSegments, UnreachableCeiling
from . import const

logger = logging.getLogger(__name__)


class State(object):
    """
    Dive planner state enumeration.

    DESCENDING
        Transit to depth of next bottom segment.
    AT_BOTTOM
        Bottom segment requested by a diver.
    ASCENDING
        Ascent to next decompression stop or to the surface.
    AT_STOP
        Decompression stop.
    SURFACED
        The dive is finished.
    """
    DESCENDING = 'descending'
    AT_BOTTOM = 'at_bottom'
    ASCENDING = 'ascending'
    AT_STOP = 'at_stop'
    SURFACED = 'surfaced'


DecoStop = namedtuple('DecoStop', 'depth time')
DecoStop.__doc__ = """
Dive decompression stop information.

:var depth: Depth of decompression stop [m].
:var time: Length of decompression stop [min].
"""


class Plan(list):
    """
    Dive plan.

    The class is a list of pairs - dive segment and gas mix breathed during
    the segment.

    :var ascent_start: Index of first segment of ascent to the surface.
    :var gas_usage: Volume of gas mixes used during the dive.
    """
    def __init__(self, legs=(), ascent_start=None):
        """
        Create dive plan.

        :param legs: Collection of dive segment and gas mix pairs.
        :param ascent_start: Index of first segment of ascent to the
            surface (all segments are bottom phase if null).
        """
        super().__init__(legs)
        self.ascent_start = len(self) if ascent_start is None else ascent_start
        self.gas_usage = GasUsage()


    @property
    def runtime(self):
        """
        Total time of the dive [min].
        """
        return sum(s.time for s, _ in self)


    @property
    def deco_stops(self):
        """
        List of decompression stops.
        """
        return [
            DecoStop(s.end_depth, s.time) for s, _ in self
            if s.type == SegmentType.DECO_STOP
        ]


    @property
    def deco_time(self):
        """
        Total decompression stops time [min].
        """
        return sum(s.time for s in self.deco_stops)


    def phases(self):
        """
        Iterate over dive segments with gas mix and dive phase.
        """
        for k, (segment, gas) in enumerate(self):
            phase = Phase.BOTTOM if k < self.ascent_start else Phase.DECO
            yield segment, gas, phase



class Planner(object):
    """
    DecoPlan dive planner.

    Use the planner to calculate dive plan - descent, bottom segments and
    ascent with decompression stops.

    :var model: Decompression model.
    :var environment: Dive environment.
    :var ascent_rate: Ascent rate during a dive, negative value [m/min].
    :var descent_rate: Descent rate during a dive [m/min].
    :var bottom_sac: Surface air consumption at the bottom [l/min].
    :var deco_sac: Surface air consumption during ascent [l/min].
    :var last_stop_6m: If true, then last deco stop is at 6m (not default 3m).
    :var state: Current state of the planner.
    :var first_stop_depth: Depth of first decompression stop [m].
    :var deco_gases: Decompression gas mixes of current calculation.
    :var _segments: Requested bottom segments with gas mixes.
    :var _gas_list: Decompression gas mixes and their maximum operating
        depth overrides.
    :var _deco_stop_search_time: Time step of decompression stop length
        linear search.
    """
    def __init__(self):
        super().__init__()
        self.model = ZH_L16_GF()
        self.environment = Environment()
        self.ascent_rate = const.ASCENT_RATE
        self.descent_rate = const.DESCENT_RATE
        self.bottom_sac = const.BOTTOM_SAC
        self.deco_sac = const.DECO_SAC
        self.last_stop_6m = False

        self.state = None
        self.first_stop_depth = None
        self.deco_gases = []

        self._segments = []
        self._gas_list = []
        self._ascent_start = None
        self._deco_stop_search_time = const.DECO_STOP_SEARCH_TIME


    def add_segment(self, depth, time, o2, he=0):
        """
        Add bottom segment of a dive.

        :param depth: Bottom depth [m].
        :param time: Bottom time [min].
        :param o2: O2 percentage of bottom gas mix, i.e. 21.
        :param he: Helium percentage of bottom gas mix, i.e. 35.
        """
        self._segments.append((bottom(depth, time), Gas(o2, he)))


    def add_gas(self, o2, he=0, mod=None):
        """
        Add decompression gas mix.

        If maximum operating depth is not specified, then it is calculated
        when dive plan calculation starts, so the dive environment can be
        changed after the gas mix is added. `DegenerateGas` is raised
        immediately for gas mix without oxygen and without maximum operating
        depth override or for negative override.

        :param o2: O2 percentage, i.e. 80.
        :param he: Helium percentage, i.e. 18.
        :param mod: Maximum operating depth override [m].
        """
        gas = Gas(o2, he)
        deco_gas(gas, self.environment, mod)
        self._gas_list.append((gas, mod))


    def _transit(self, start, end):
        """
        Create ascent or descent segment using configured rates.

        :param start: Starting depth [m].
        :param end: Destination depth [m].
        """
        return transit(start, end, self.ascent_rate, self.descent_rate)


    def _expose(self, tissues, segment, gas):
        """
        Expose tissues to a dive segment and return segment and gas mix
        pair.

        :param tissues: Tissue state.
        :param segment: Dive segment.
        :param gas: Gas mix breathed during the segment.
        """
        tissues.expose(segment, gas)
        if __debug__:
            logger.debug('{}: {} on {}'.format(self.state, segment, gas))
        return segment, gas


    def _round_stop(self, depth):
        """
        Round ceiling depth to deeper decompression stop depth.

        :param depth: Ceiling depth [m].
        """
        n = math.ceil(round(depth / const.STOP_INTERVAL, const.SCALE))
        stop = n * const.STOP_INTERVAL
        if self.last_stop_6m and 0 < stop < 2 * const.STOP_INTERVAL:
            stop = 2 * const.STOP_INTERVAL
        return stop


    def _next_stop(self, depth):
        """
        Calculate depth of decompression stop following a depth.

        :param depth: Current depth [m].
        """
        depth = depth - const.STOP_INTERVAL
        if depth <= 0 or self.last_stop_6m and depth < 2 * const.STOP_INTERVAL:
            depth = 0
        return depth


    def _stop_ceiling(self, tissues, depth):
        """
        Calculate ascent ceiling rounded to decompression stop depth.

        The gradient factor of next decompression stop is used.

        :param tissues: Tissue state.
        :param depth: Current depth [m].
        """
        gf_depth = self._next_stop(depth)
        ceiling = self.model.ceiling(tissues, self.first_stop_depth, gf_depth)
        return self._round_stop(ceiling)


    def _can_ascend(self, tissues, depth):
        """
        Check if ascent from a decompression stop is allowed.

        :param tissues: Tissue state.
        :param depth: Depth of decompression stop [m].
        """
        return self._stop_ceiling(tissues, depth) < depth


    def _stay(self, tissues, depth, time, gas):
        """
        Calculate tissue state after staying at a decompression stop.

        The tissue state is copied, the passed state is not changed.

        :param tissues: Tissue state at start of the stay.
        :param depth: Depth of decompression stop [m].
        :param time: Time of the stay [min].
        :param gas: Gas mix breathed during the stay.
        """
        state = tissues.copy()
        state.expose(deco_stop(depth, time), gas)
        return state


    def _stop_search(self, tissues, depth, gas):
        """
        Find time chunk of decompression stop, within which ascent becomes
        possible.

        The stop is extended by ``_deco_stop_search_time`` minutes until
        ascent is allowed at the end of a chunk. The time and tissue state
        at start of the last chunk are returned.

        `UnreachableCeiling` is raised if decompression stop would be
        longer than `const.MAX_STOP_TIME`.

        :param tissues: Tissue state on arrival at decompression stop.
        :param depth: Depth of decompression stop [m].
        :param gas: Gas mix breathed during the stop.
        """
        step = self._deco_stop_search_time
        time = 0
        while True:
            if time + step > const.MAX_STOP_TIME:
                raise UnreachableCeiling(
                    'Decompression stop at {}m longer than {}min'
                    .format(depth, const.MAX_STOP_TIME)
                )
            state = self._stay(tissues, depth, step, gas)
            if self._can_ascend(state, depth):
                return time, tissues
            time += step
            tissues = state


    def _stop_minutes(self, tissues, depth, gas):
        """
        Find the shortest stay in full minutes after which ascent from
        decompression stop is possible.

        Ascent has to be possible after ``_deco_stop_search_time`` minutes,
        the minutes before are searched with bisection.

        :param tissues: Tissue state at start of the search.
        :param depth: Depth of decompression stop [m].
        :param gas: Gas mix breathed during the stop.
        """
        lo = 1
        hi = self._deco_stop_search_time
        while lo < hi:
            k = (lo + hi) // 2
            if self._can_ascend(self._stay(tissues, depth, k, gas), depth):
                hi = k
            else:
                lo = k + 1

        if __debug__:
            logger.debug('deco stop: ascent after {}min of last chunk'.format(hi))
        return hi


    def _deco_stop(self, tissues, depth, gas):
        """
        Calculate decompression stop.

        The length of decompression stop is time in full minutes until
        ascent ceiling allows to ascend to next decompression stop. The
        length is searched linearly with time steps of
        ``_deco_stop_search_time`` minutes, then narrowed with bisection.

        Tissue state is updated with the decompression stop exposure and
        the stop segment is returned. Zero length stop is returned when
        ascent is possible on arrival.

        :param tissues: Tissue state.
        :param depth: Depth of decompression stop [m].
        :param gas: Gas mix breathed during the stop.
        """
        if self._can_ascend(tissues, depth):
            return deco_stop(depth, 0)

        time, state = self._stop_search(tissues, depth, gas)
        if __debug__:
            logger.debug(
                'deco stop: linear search finished after {}min'.format(time)
            )

        k = self._stop_minutes(state, depth, gas)
        tissues.tissues = self._stay(state, depth, k, gas).tissues
        time += k

        if __debug__:
            logger.debug('deco stop: {}m for {}min on {}'.format(depth, time, gas))
            assert time % 1 == 0 and time > 0, time

        return deco_stop(depth, time)


    def _dive_bottom(self, tissues):
        """
        Descend to each requested bottom segment and stay there.

        :param tissues: Tissue state.
        """
        depth = 0
        for segment, gas in self._segments:
            self.state = State.DESCENDING
            if segment.start_depth != depth:
                s = self._transit(depth, segment.start_depth)
                yield self._expose(tissues, s, gas)

            self.state = State.AT_BOTTOM
            yield self._expose(tissues, segment, gas)
            depth = segment.end_depth


    def _dive_ascent(self, tissues, depth, bottom_gas):
        """
        Ascend from a depth to the surface performing decompression stops.

        :param tissues: Tissue state.
        :param depth: Starting depth [m].
        :param bottom_gas: Gas mix used when no decompression gas mix can
            be used.
        """
        deco_gases = self.deco_gases
        for i in range(const.MAX_ASCENT_ITERATIONS):
            self.state = State.ASCENDING
            gas = best_gas(depth, deco_gases, bottom_gas)
            target = min(self._stop_ceiling(tissues, depth), depth)

            if target <= 0:
                yield self._expose(tissues, self._transit(depth, 0), gas)
                self.state = State.SURFACED
                if __debug__:
                    logger.debug('surfaced after {} ascent stages'.format(i + 1))
                return

            if self.first_stop_depth is None:
                self.first_stop_depth = target
                if __debug__:
                    logger.debug('first deco stop at {}m'.format(target))

            if target < depth:
                yield self._expose(tissues, self._transit(depth, target), gas)
                depth = target
                gas = best_gas(depth, deco_gases, bottom_gas)

            self.state = State.AT_STOP
            stop = self._deco_stop(tissues, depth, gas)
            # zero length stops are omitted
            if stop.time > 0:
                yield stop, gas

        raise UnreachableCeiling(
            'Surface not reached after {} ascent stages'
            .format(const.MAX_ASCENT_ITERATIONS)
        )


    def _validate(self):
        """
        Validate planner configuration.

        `ConfigError` is raised if ascent rate is not negative or descent
        rate is not positive. `NoBottomSegments` is raised if no bottom
        segments are requested.
        """
        if not self._segments:
            raise NoBottomSegments('No bottom segments requested')
        if self.ascent_rate >= 0:
            raise ConfigError(
                'Ascent rate {}m/min is not negative'.format(self.ascent_rate)
            )
        if self.descent_rate <= 0:
            raise ConfigError(
                'Descent rate {}m/min is not positive'.format(self.descent_rate)
            )


    def segments(self):
        """
        Start dive plan calculation.

        The method returns an iterator of pairs - dive segment and gas mix
        breathed during the segment.

        .. seealso:: :func:`decoplan.Planner.calculate`
        """
        self._validate()

        env = self.environment
        self.deco_gases = [deco_gas(g, env, mod) for g, mod in self._gas_list]
        self.first_stop_depth = None
        self._ascent_start = None

        tissues = self.model.init(env)

        n = 0
        for n, (segment, gas) in enumerate(self._dive_bottom(tissues), 1):
            yield segment, gas

        self._ascent_start = n
        depth = segment.end_depth
        if __debug__:
            logger.debug('bottom finished at {}m after {} segments'.format(depth, n))

        yield from self._dive_ascent(tissues, depth, gas)


    def calculate(self):
        """
        Calculate dive plan.

        The dive plan is returned with gas mixes usage calculated.

        .. seealso:: :func:`decoplan.Planner.add_segment`
        .. seealso:: :func:`decoplan.Planner.add_gas`
        """
        legs = list(self.segments())
        plan = Plan(legs, self._ascent_start)
        plan.gas_usage = gas_usage(
            plan, self.bottom_sac, self.deco_sac, self.environment
        )
        logger.info(
            'dive plan: {} segments, runtime {:.1f}min, deco {}min'
            .format(len(plan), plan.runtime, plan.deco_time)
        )
        return plan


# vim: sw=4:et:ai
