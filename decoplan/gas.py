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
Breathing gas mixes.

A gas mix is described by oxygen and helium percentage, the rest is
nitrogen::

    >>> air = Gas(21)
    >>> air.n2
    79
    >>> Gas(18, 45)
    Gas(o2=18, he=45)

Gas mix fractions are validated on construction::

    >>> Gas(80, 30)
    Traceback (most recent call last):
        ...
    decoplan.error.InvalidComposition: Gas mix 80/30 exceeds 100%

"""

from collections import namedtuple
import logging

from .error import InvalidComposition, DegenerateGas
from . import const

logger = logging.getLogger(__name__)


class Gas(namedtuple('Gas', 'o2 he')):
    """
    Gas mix composition.

    :var o2: O2 percentage, i.e. 21.
    :var he: Helium percentage, i.e. 35.
    """
    __slots__ = ()

    def __new__(cls, o2, he=0):
        if not 0 <= o2 <= 100 or not 0 <= he <= 100:
            raise InvalidComposition(
                'Gas mix fraction out of range in {}/{}'.format(o2, he)
            )
        if o2 + he > 100:
            raise InvalidComposition(
                'Gas mix {}/{} exceeds 100%'.format(o2, he)
            )
        return super().__new__(cls, o2, he)


    @property
    def n2(self):
        """
        N2 percentage.
        """
        return 100 - self.o2 - self.he


    def mod(self, ppo2, environment):
        """
        Calculate maximum operating depth of the gas mix.

        The depth is where partial pressure of oxygen reaches `ppo2`.

        :param ppo2: Maximum partial pressure of oxygen [bar].
        :param environment: Dive environment.
        """
        if self.o2 == 0:
            raise DegenerateGas(
                'Maximum operating depth undefined for {}'.format(self)
            )
        abs_p = ppo2 * 100 / self.o2
        depth = environment.to_depth(abs_p)
        return max(depth, 0)


    def __str__(self):
        return '{}/{}'.format(self.o2, self.he)



DecoGas = namedtuple('DecoGas', 'gas mod')
DecoGas.__doc__ = """
Decompression gas mix available for ascent.

:var gas: Gas mix composition.
:var mod: Maximum operating depth of the gas mix [m].
"""


def deco_gas(gas, environment, mod=None):
    """
    Create decompression gas mix entry.

    If maximum operating depth is not specified, then it is calculated
    for oxygen partial pressure limit of decompression gas mixes.

    :param gas: Gas mix composition.
    :param environment: Dive environment.
    :param mod: Explicit maximum operating depth [m].
    """
    if mod is None:
        mod = gas.mod(const.DECO_PPO2, environment)
    elif mod < 0:
        raise DegenerateGas(
            'Negative maximum operating depth {}m of {}'.format(mod, gas)
        )
    return DecoGas(gas, mod)


def best_gas(depth, deco_gases, default):
    """
    Find best decompression gas mix for a depth.

    The best gas mix is the one with the highest oxygen percentage (and
    lowest helium percentage) and which maximum operating depth is not
    shallower than the depth. If no decompression gas mix can be used at
    the depth, then default gas mix is returned.

    :param depth: Current depth [m].
    :param deco_gases: Collection of decompression gas mixes.
    :param default: Gas mix used when no decompression gas mix qualifies.
    """
    mixes = [m.gas for m in deco_gases if m.mod >= depth]
    if not mixes:
        return default
    return max(mixes, key=lambda g: (g.o2, -g.he))


# vim: sw=4:et:ai
