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
DecoPlan command line interface.

Dive plan request is read in JSON format from a file or standard input,
for example::

    {
        "gfl": 30, "gfh": 85,
        "segments": [{"depth": 40, "time": 25, "o2": 21, "he": 35}],
        "deco_gases": [{"o2": 50, "he": 0}, {"o2": 100, "he": 0}]
    }

Optional request attributes are

- `gfl`, `gfh` - gradient factors (both have to be specified)
- `asc`, `desc` - ascent and descent rates [m/min]
- `bottom_sac`, `deco_sac` - surface air consumption rates [l/min]
- `water` - `salt` or `fresh`
- `altitude` - altitude of dive site [m]
- `model` - `zh-l16b` or `zh-l16c`
- `max_operating_depth` of a decompression gas mix [m]
"""

from functools import partial
import argparse
import json
import logging
import sys

from .environment import Environment
from .model import GradientFactor, ZH_L16_GF, COEFFICIENTS
from .output import plan_table, gas_table, csv_writer
from .flow import sender
from .error import ConfigError, DecoPlanError
from . import const
import decoplan

logger = logging.getLogger(__name__)

WATER = {
    'salt': const.SALTWATER,
    'fresh': const.FRESHWATER,
}


def planner_from_request(request, validate=True):
    """
    Create dive planner configured with dive plan request.

    :param request: Dive plan request (dictionary).
    :param validate: Validate dive plan with dive plan validator.
    """
    planner = decoplan.create(validate=validate)
    try:
        name = request.get('model', 'zh-l16b')
        if name not in COEFFICIENTS:
            raise ConfigError('Unknown decompression model {}'.format(name))

        gf = None
        if request.get('gfl') is not None and request.get('gfh') is not None:
            gf = GradientFactor(request['gfl'], request['gfh'])
        planner.model = ZH_L16_GF(COEFFICIENTS[name], gf)

        water = request.get('water', 'salt')
        if water not in WATER:
            raise ConfigError('Unknown water type {}'.format(water))
        planner.environment = Environment(
            WATER[water], request.get('altitude', 0)
        )

        planner.ascent_rate = request.get('asc', const.ASCENT_RATE)
        planner.descent_rate = request.get('desc', const.DESCENT_RATE)
        planner.bottom_sac = request.get('bottom_sac', const.BOTTOM_SAC)
        planner.deco_sac = request.get('deco_sac', const.DECO_SAC)

        for s in request['segments']:
            planner.add_segment(s['depth'], s['time'], s['o2'], s.get('he', 0))
        for g in request.get('deco_gases', []):
            planner.add_gas(g['o2'], g.get('he', 0), g.get('max_operating_depth'))
    except (KeyError, TypeError, AttributeError) as ex:
        raise ConfigError('Invalid dive plan request: {!r}'.format(ex)) from ex

    return planner


def print_plan(planner, plan, f=sys.stdout):
    """
    Print dive plan and gas usage tables.

    :param planner: Dive planner used to calculate the plan.
    :param plan: Dive plan.
    :param f: File object.
    """
    print('Ascent rate: {}m/min'.format(planner.ascent_rate), file=f)
    print('Descent rate: {}m/min'.format(planner.descent_rate), file=f)
    print('GFL/GFH: {}\n'.format(planner.model.gf), file=f)
    print(plan_table(plan), file=f)
    print(file=f)
    print(gas_table(plan.gas_usage), file=f)


def main(argv=None):
    """
    Run DecoPlan command line interface.

    Exit status is returned.

    :param argv: Command line arguments.
    """
    parser = argparse.ArgumentParser(
        description='DecoPlan - dive decompression planner'
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true', default=False,
        help='show debug information'
    )
    parser.add_argument(
        '--no-validate', dest='validate', action='store_false', default=True,
        help='do not validate dive plan'
    )
    parser.add_argument(
        '--csv', metavar='FILE', help='save dive segments in CSV file'
    )
    parser.add_argument(
        'input', nargs='?', type=argparse.FileType('r'), default=sys.stdin,
        help='dive plan request in JSON format (standard input by default)'
    )
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level)

    try:
        with args.input:
            request = json.load(args.input)
        planner = planner_from_request(request, args.validate)
        if args.csv:
            with open(args.csv, 'w', newline='') as f:
                planner.segments = sender(
                    planner.segments, partial(csv_writer, f)
                )
                plan = planner.calculate()
        else:
            plan = planner.calculate()
    except ValueError as ex:
        logger.error('cannot read dive plan request: {}'.format(ex))
        return 1
    except DecoPlanError as ex:
        logger.error('dive plan calculation failed: {}'.format(ex))
        return 1

    print_plan(planner, plan, sys.stdout)
    return 0


# vim: sw=4:et:ai
