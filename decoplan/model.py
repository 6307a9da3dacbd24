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
Introduction
------------
DecoPlan implements Buhlmann decompression model ZH-L16 with gradient
factors by Erik Baker (ZH-L16-GF). Human body is described by 16 tissue
compartments, each loaded with nitrogen and helium independently.

Two published sets of compartment constants are supported

ZH-L16B
    used for dive table calculations (default)
ZH-L16C
    more conservative, used by dive computers

The constant sets are looked up by name with :data:`COEFFICIENTS`
mapping.

Equations
---------
Inert gas pressure in a tissue compartment is calculated with Schreiner
equation

    .. math::

        P = P_{alv} + R * (t - 1 / k) - (P_{alv} - P_{i} - R / k) * e^{-k * t}

where :math:`P_{alv} = F_{gas} * (P_{abs} - P_{wvp})` is pressure of
inspired inert gas, :math:`R = F_{gas} * P_{rate}` is rate of change of
inspired inert gas pressure and :math:`k = ln(2) / T_{hl}` is gas decay
constant of a compartment. For constant depth, :math:`R = 0` and the
equation is reduced to Haldane equation

    .. math::

        P = P_{i} + (P_{alv} - P_{i}) * (1 - 2^{-t / T_{hl}})

The ascent ceiling of a tissue compartment is calculated with Buhlmann
equation extended with gradient factors

    .. math::

        P_l = (P - A * gf) / (gf / B + 1.0 - gf)

where :math:`P = P_{n2} + P_{he}` and coefficients :math:`A` and :math:`B`
are weighted by nitrogen and helium pressure in the compartment. For
:math:`gf = 1` the equation is :math:`P_l = (P - A) * B`, which is
unmodified Buhlmann tolerated ambient pressure.

Current gradient factor changes linearly from *gf low* at first
decompression stop to *gf high* at the surface.

References
----------
* Baker, Erik. Understanding M-values.
* Baker, Erik. Clearing Up The Confusion About "Deep Stops".
* Powell, Mark. *Deco for Divers*, United Kingdom, 2010.
"""

from collections import namedtuple
import copy
import math
import logging

from .error import ConfigError
from . import const

logger = logging.getLogger(__name__)


Coefficients = namedtuple(
    'Coefficients',
    'name n2_a n2_b he_a he_b n2_half_life he_half_life'
)
Coefficients.__doc__ = """
Buhlmann ZH-L16 constants for 16 tissue compartments.

:var name: Name of constant set.
:var n2_a: Nitrogen Buhlmann coefficients A.
:var n2_b: Nitrogen Buhlmann coefficients B.
:var he_a: Helium Buhlmann coefficients A.
:var he_b: Helium Buhlmann coefficients B.
:var n2_half_life: Nitrogen half-life times [min].
:var he_half_life: Helium half-life times [min].
"""

ZH_L16B = Coefficients( # source: gfdeco.f by Baker
    name='ZH-L16B',
    n2_a=(
        1.1696, 1.0000, 0.8618, 0.7562, 0.6667, 0.5600, 0.4947, 0.4500,
        0.4187, 0.3798, 0.3497, 0.3223, 0.2850, 0.2737, 0.2523, 0.2327,
    ),
    n2_b=(
        0.5578, 0.6514, 0.7222, 0.7825, 0.8126, 0.8434, 0.8693, 0.8910,
        0.9092, 0.9222, 0.9319, 0.9403, 0.9477, 0.9544, 0.9602, 0.9653,
    ),
    he_a=(
        1.6189, 1.3830, 1.1919, 1.0458, 0.9220, 0.8205, 0.7305, 0.6502,
        0.5950, 0.5545, 0.5333, 0.5189, 0.5181, 0.5176, 0.5172, 0.5119,
    ),
    he_b=(
        0.4770, 0.5747, 0.6527, 0.7223, 0.7582, 0.7957, 0.8279, 0.8553,
        0.8757, 0.8903, 0.8997, 0.9073, 0.9122, 0.9171, 0.9217, 0.9267,
    ),
    n2_half_life=(
        5.0, 8.0, 12.5, 18.5, 27.0, 38.3, 54.3, 77.0, 109.0,
        146.0, 187.0, 239.0, 305.0, 390.0, 498.0, 635.0,
    ),
    he_half_life=(
        1.88, 3.02, 4.72, 6.99, 10.21, 14.48, 20.53, 29.11,
        41.20, 55.19, 70.69, 90.34, 115.29, 147.42, 188.24, 240.03,
    ),
)

ZH_L16C = Coefficients( # source: ostc firmware code
    name='ZH-L16C',
    n2_a=(
        1.2599, 1.0000, 0.8618, 0.7562, 0.6200, 0.5043, 0.4410, 0.4000,
        0.3750, 0.3500, 0.3295, 0.3065, 0.2835, 0.2610, 0.2480, 0.2327,
    ),
    n2_b=(
        0.5050, 0.6514, 0.7222, 0.7825, 0.8126, 0.8434, 0.8693, 0.8910,
        0.9092, 0.9222, 0.9319, 0.9403, 0.9477, 0.9544, 0.9602, 0.9653,
    ),
    he_a=(
        1.7424, 1.3830, 1.1919, 1.0458, 0.9220, 0.8205, 0.7305, 0.6502,
        0.5950, 0.5545, 0.5333, 0.5189, 0.5181, 0.5176, 0.5172, 0.5119,
    ),
    he_b=(
        0.4245, 0.5747, 0.6527, 0.7223, 0.7582, 0.7957, 0.8279, 0.8553,
        0.8757, 0.8903, 0.8997, 0.9073, 0.9122, 0.9171, 0.9217, 0.9267,
    ),
    n2_half_life=(
        4.0, 8.0, 12.5, 18.5, 27.0, 38.3, 54.3, 77.0, 109.0,
        146.0, 187.0, 239.0, 305.0, 390.0, 498.0, 635.0,
    ),
    he_half_life=(
        1.51, 3.02, 4.72, 6.99, 10.21, 14.48, 20.53, 29.11,
        41.20, 55.19, 70.69, 90.34, 115.29, 147.42, 188.24, 240.03,
    ),
)

COEFFICIENTS = {
    'zh-l16b': ZH_L16B,
    'zh-l16c': ZH_L16C,
}


class GradientFactor(namedtuple('GradientFactor', 'low high')):
    """
    Gradient factors by Erik Baker.

    :var low: Gradient factor low percentage - controls depth of first
        decompression stop.
    :var high: Gradient factor high percentage - controls length of
        decompression stops.
    """
    __slots__ = ()

    def __new__(cls, low=100, high=100):
        if not 0 <= low <= 100 or not 0 <= high <= 100:
            raise ConfigError(
                'Gradient factors {}/{} out of range'.format(low, high)
            )
        if low > high:
            raise ConfigError(
                'Gradient factor low {} greater than high {}'.format(low, high)
            )
        return super().__new__(cls, low, high)


    def value(self, depth, first_stop_depth=None):
        """
        Calculate gradient factor value at a depth.

        The value is `low` at the first decompression stop and `high` at
        the surface. If depth of first decompression stop is not known,
        then `low` is used.

        The returned value is a fraction, i.e. 0.3 for 30%.

        :param depth: Depth at which gradient factor is calculated [m].
        :param first_stop_depth: Depth of first decompression stop [m].
        """
        if not first_stop_depth or depth >= first_stop_depth:
            return self.low / 100
        gf = self.high - (self.high - self.low) * depth / first_stop_depth
        return gf / 100


    def __str__(self):
        return '{}/{}'.format(self.low, self.high)



def eq_schreiner(p_i, p_alv, rate, time, k):
    """
    Calculate inert gas pressure in a tissue compartment using Schreiner
    equation.

    :param p_i: Initial inert gas pressure in tissue compartment [bar].
    :param p_alv: Pressure of inspired inert gas at start [bar].
    :param rate: Rate of change of inspired inert gas pressure [bar/min].
    :param time: Time of exposure [min].
    :param k: Gas decay constant of tissue compartment.
    """
    return p_alv + rate * (time - 1 / k) \
        - (p_alv - p_i - rate / k) * math.exp(-k * time)


def eq_haldane(p_i, p_alv, time, k):
    """
    Calculate inert gas pressure in a tissue compartment at constant
    depth.

    :param p_i: Initial inert gas pressure in tissue compartment [bar].
    :param p_alv: Pressure of inspired inert gas [bar].
    :param time: Time of exposure [min].
    :param k: Gas decay constant of tissue compartment.
    """
    return p_i + (p_alv - p_i) * (1 - math.exp(-k * time))


def eq_gf_limit(gf, p_n2, p_he, a_n2, b_n2, a_he, b_he):
    """
    Calculate ascent ceiling limit of a tissue compartment using Buhlmann
    equation extended with gradient factors by Erik Baker.

    The returned value is absolute pressure of depth of the ascent ceiling.

    :param gf: Gradient factor value.
    :param p_n2: Current tissue pressure for nitrogen.
    :param p_he: Current tissue pressure for helium.
    :param a_n2: Nitrox Buhlmann coefficient A.
    :param b_n2: Nitrox Buhlmann coefficient B.
    :param a_he: Helium Buhlmann coefficient A.
    :param b_he: Helium Buhlmann coefficient B.
    """
    assert 0 <= gf <= 1
    p = p_n2 + p_he
    a = (a_n2 * p_n2 + a_he * p_he) / p
    b = (b_n2 * p_n2 + b_he * p_he) / p
    return (p - a * gf) / (gf / b + 1 - gf)



class TissueState(object):
    """
    Inert gas loading of tissue compartments.

    The state is initialized to equilibrium with air at the surface and
    changed in place by exposing it to dive segments. The order of
    exposures matters, so use :py:meth:`TissueState.copy` to calculate
    alternative ascents.

    :var model: Decompression model.
    :var environment: Dive environment.
    :var tissues: List of pairs - nitrogen and helium pressure in a tissue
        compartment [bar].
    """
    def __init__(self, model, environment):
        """
        Create tissue state saturated with air at the surface.

        :param model: Decompression model.
        :param environment: Dive environment.
        """
        super().__init__()
        self.model = model
        self.environment = environment

        abs_p = environment.surface_pressure - model.water_vapour_pressure
        p_n2 = const.AIR_N2 * abs_p
        self.tissues = [[p_n2, 0.0] for _ in range(const.NUM_COMPARTMENTS)]


    def copy(self):
        """
        Create independent copy of the tissue state.
        """
        state = copy.copy(self)
        state.tissues = [list(p) for p in self.tissues]
        return state


    def expose(self, segment, gas):
        """
        Load tissue compartments with inert gas during a dive segment.

        Zero time segment does not change the state.

        :param segment: Dive segment.
        :param gas: Gas mix breathed during the segment.
        """
        if segment.time == 0:
            return
        env = self.environment
        abs_p = env.to_pressure(segment.start_depth)
        rate = segment.rate * env.meter_to_bar
        self.load(abs_p, segment.time, gas, rate)


    def load(self, abs_p, time, gas, rate):
        """
        Load tissue compartments with inert gas.

        :param abs_p: Absolute pressure at start of exposure [bar].
        :param time: Time of exposure [min].
        :param gas: Gas mix configuration.
        :param rate: Pressure rate change [bar/min].
        """
        assert time > 0
        model = self.model
        n2_loader = model._tissue_loader(abs_p, gas.n2 / 100, rate, model.n2_k_const)
        he_loader = model._tissue_loader(abs_p, gas.he / 100, rate, model.he_k_const)
        for i, p in enumerate(self.tissues):
            p[0] = n2_loader(time, p[0], i)
            p[1] = he_loader(time, p[1], i)


    def __eq__(self, other):
        return isinstance(other, TissueState) and self.tissues == other.tissues


    def __repr__(self):
        return 'TissueState({})'.format(
            ', '.join('{:.4f}'.format(n2 + he) for n2, he in self.tissues)
        )



class ZH_L16_GF(object):
    """
    Buhlmann ZH-L16 decompression model with gradient factors by Erik
    Baker.

    :var coefficients: Compartment constants of the model.
    :var gf: Gradient factors.
    :var water_vapour_pressure: Water vapour pressure [bar].
    :var n2_k_const: Gas decay constants :math:`k` for nitrogen for each
        tissue compartment.
    :var he_k_const: Gas decay constants :math:`k` for helium for each
        tissue compartment.
    """
    def __init__(self, coefficients=ZH_L16B, gf=None):
        """
        Create instance of the model.

        :param coefficients: Compartment constants, ZH-L16B by default.
        :param gf: Gradient factors, 100/100 by default.
        """
        super().__init__()
        self.coefficients = coefficients
        self.gf = GradientFactor() if gf is None else gf
        self.water_vapour_pressure = const.WATER_VAPOUR_PRESSURE_DEFAULT

        self.n2_k_const = self._k_const(coefficients.n2_half_life)
        self.he_k_const = self._k_const(coefficients.he_half_life)


    def init(self, environment):
        """
        Create tissue state saturated with air at the surface.

        :param environment: Dive environment.
        """
        return TissueState(self, environment)


    def _k_const(self, half_life):
        """
        Calculate gas decay constant :math:`k` for each tissue compartment
        half-life value.

        :param half_life: Collection of half-life values for each tissue
            compartment.
        """
        return tuple(const.LOG_2 / v for v in half_life)


    def _tissue_loader(self, abs_p, f_gas, rate, k_const):
        """
        Create function to load tissue compartment with inert gas.

        The created function accepts time of exposure, initial pressure of
        inert gas in tissue compartment and number of tissue compartment
        (starting with zero).

        :param abs_p: Absolute pressure of current depth [bar].
        :param f_gas: Inert gas fraction, i.e. for air it is 0.79.
        :param rate: Pressure rate change [bar/min].
        :param k_const: Collection of gas decay constants for each tissue
            compartment.
        """
        p_alv = f_gas * (abs_p - self.water_vapour_pressure)
        r = f_gas * rate
        if r == 0:
            return lambda time, p_i, n: eq_haldane(p_i, p_alv, time, k_const[n])
        else:
            return lambda time, p_i, n: \
                eq_schreiner(p_i, p_alv, r, time, k_const[n])


    def gf_limit(self, gf, state):
        """
        Calculate pressure of ascent ceiling for each tissue compartment.

        The method returns a tuple of values - a pressure value for each
        tissue compartment.

        :param gf: Gradient factor value (fraction).
        :param state: Tissue state.
        """
        c = self.coefficients
        data = zip(state.tissues, c.n2_a, c.n2_b, c.he_a, c.he_b)
        return tuple(
            eq_gf_limit(gf, p_n2, p_he, n2_a, n2_b, he_a, he_b)
            for (p_n2, p_he), n2_a, n2_b, he_a, he_b in data
        )


    def ceiling_limit(self, state, gf):
        """
        Calculate pressure of ascent ceiling limit.

        The pressure is the shallowest depth a diver can reach without
        decompression sickness.

        :param state: Tissue state.
        :param gf: Gradient factor value (fraction).
        """
        return max(self.gf_limit(gf, state))


    def ceiling(self, state, first_stop_depth=None, depth=0):
        """
        Calculate depth of ascent ceiling.

        The gradient factor value is interpolated for `depth` between
        first decompression stop and the surface. The ceiling depth is not
        rounded and is never shallower than the surface.

        :param state: Tissue state.
        :param first_stop_depth: Depth of first decompression stop, if
            known [m].
        :param depth: Depth at which gradient factor is evaluated [m].
        """
        gf = self.gf.value(depth, first_stop_depth)
        limit = self.ceiling_limit(state, gf)
        return max(state.environment.to_depth(limit), 0)


# vim: sw=4:et:ai
