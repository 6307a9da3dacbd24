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
Basic Usage
-----------

The DecoPlan dive decompression planning library exports its main API via
``decoplan`` module.

The calculation of dive plan can be performed in few simple steps by using
:func:`~decoplan.create` function, which creates :class:`DecoPlan planner
<Planner>` object. Having the planner, we need to instruct it what bottom
segments and decompression gas mixes are planned, after which we can start
calculations. The following example executes calculations for a dive to 30
meters for 25 minutes on air::

    >>> import decoplan
    >>> planner = decoplan.create()
    >>> planner.add_segment(30, 25, 21)
    >>> plan = planner.calculate()

The :func:`planner calculation <Planner.calculate>` method returns a dive
plan - a list of dive segments and gas mixes breathed during the
segments::

    >>> for segment, gas in plan:
    ...     print(segment, gas)     # doctest:+ELLIPSIS
    Segment(type="asc_desc", start_depth=0, end_depth=30, time=1.0000) 21/0
    Segment(type="bottom", start_depth=30, end_depth=30, time=25.0000) 21/0
    ...
    Segment(type="asc_desc", start_depth=..., end_depth=0, time=...) 21/0

Decompression stops and volume of used gas mixes are available as well::

    >>> plan.deco_stops        # doctest:+ELLIPSIS
    [DecoStop(depth=..., time=...)...]
    >>> plan.gas_usage.total   # doctest:+ELLIPSIS
    2...
    >>> list(plan.gas_usage)
    [Gas(o2=21, he=0)]

Configuring Planner
-------------------
The default decompression model is Buhlmann ZH-L16B with gradient factors
100/100 (no added conservatism). The model and the gradient factors can be
changed::

    >>> planner.model = decoplan.ZH_L16_GF(
    ...     decoplan.ZH_L16C, decoplan.GradientFactor(30, 85)
    ... )

Decompression gas mixes are added with :func:`Planner.add_gas` method.
The gas mix is used from its maximum operating depth, which is calculated
for 1.6 bar oxygen partial pressure unless specified explicitly::

    >>> planner.add_gas(50)
    >>> planner.add_gas(100, mod=6)

Ascent and descent rates, surface air consumption rates and dive
environment are planner attributes::

    >>> planner.ascent_rate = -9
    >>> planner.bottom_sac = 25
    >>> planner.environment = decoplan.Environment(decoplan.const.FRESHWATER)

"""

from .engine import Planner, Plan, DecoStop, State
from .environment import Environment
from .gas import Gas
from .model import ZH_L16_GF, ZH_L16B, ZH_L16C, GradientFactor
from .segment import Segment, SegmentType
from .mod import PlanValidator
from .flow import sender
from . import const

__version__ = '0.1.0'


def create(validate=True):
    """
    Create dive planner.

    The dive plan validation is enabled by default.

    Usage

    >>> import decoplan
    >>> planner = decoplan.create()
    >>> planner.add_segment(15, 30, 21)
    >>> plan = planner.calculate()
    >>> plan.deco_stops
    []

    :param validate: Validate dive plan with dive plan validator.
    """
    planner = Planner()

    pipeline = []
    if validate:
        pipeline.append(PlanValidator(planner))

    planner.segments = sender(planner.segments, *pipeline)
    return planner


__all__ = [
    'create', 'Planner', 'Plan', 'Gas', 'Segment', 'SegmentType',
    'Environment', 'ZH_L16_GF', 'ZH_L16B', 'ZH_L16C', 'GradientFactor',
]

# vim: sw=4:et:ai
