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
DecoPlan output functions and coroutines.

The implemented functions and coroutines

- format dive plan and gas usage as text tables
- save dive segments in CSV file
"""

import csv
import logging

from .segment import SegmentType
from .flow import coroutine

logger = logging.getLogger(__name__)

SEGMENT_NAMES = {
    SegmentType.ASC_DESC: 'AscDesc',
    SegmentType.BOTTOM: 'Bottom',
    SegmentType.DECO_STOP: 'DecoStop',
}


def pretty_time(time):
    """
    Format time in minutes as `m:ss` string.

    :param time: Time [min].
    """
    seconds = int(round(time * 60))
    return '{}:{:0>2}'.format(seconds // 60, seconds % 60)


def pretty_depth(depth):
    """
    Format depth in meters, decimal part is shown only when necessary.

    :param depth: Depth [m].
    """
    return '{:g}m'.format(round(depth, 1))


def format_table(rows):
    """
    Format rows as text table with right aligned columns.

    :param rows: Collection of rows, first row is header.
    """
    rows = [[str(v) for v in r] for r in rows]
    widths = [max(len(v) for v in col) for col in zip(*rows)]
    return '\n'.join(
        '  '.join(v.rjust(w) for v, w in zip(r, widths)) for r in rows
    )


def plan_table(plan):
    """
    Format dive plan as text table.

    Ascent and descent segments show destination depth.

    :param plan: Dive plan.
    """
    rows = [('Segment', 'Depth', 'Time', 'Runtime', 'Gas')]
    runtime = 0
    for segment, gas in plan:
        runtime += segment.time
        depth = pretty_depth(segment.end_depth)
        if segment.type == SegmentType.ASC_DESC:
            depth = '-> ' + depth
        rows.append((
            SEGMENT_NAMES[segment.type], depth, pretty_time(segment.time),
            pretty_time(runtime), gas
        ))
    return format_table(rows)


def gas_table(usage):
    """
    Format gas usage as text table.

    Gas mixes are sorted by volume, the largest first.

    :param usage: Gas usage.
    """
    rows = [('Gas', 'Amount')]
    items = sorted(usage.items(), key=lambda v: v[1], reverse=True)
    rows.extend((g, '{:.0f} litres'.format(v)) for g, v in items)
    rows.append(('Total', '{:.0f} litres'.format(usage.total)))
    return format_table(rows)


@coroutine
def csv_writer(f, target=None):
    """
    Write dive segments into a CSV file.

    The coroutine receives pairs of dive segment and gas mix.

    :param f: File object.
    :param target: Optional coroutine to forward dive segments to.
    """
    header = [
        'type', 'start_depth', 'end_depth', 'time', 'runtime',
        'gas_o2', 'gas_he', 'gas_n2'
    ]

    fcsv = csv.writer(f)
    fcsv.writerow(header)

    runtime = 0
    while True:
        segment, gas = yield
        runtime += segment.time

        fcsv.writerow([
            segment.type, segment.start_depth, segment.end_depth,
            segment.time, runtime, gas.o2, gas.he, gas.n2
        ])

        if target:
            target.send((segment, gas))


# vim: sw=4:et:ai
