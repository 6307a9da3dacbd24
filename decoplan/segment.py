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
Dive segments.

A dive profile is a sequence of segments. A segment is a leg of a dive -
transit between two depths, time spent at the bottom or at
a decompression stop.
"""

from collections import namedtuple

from .error import InvalidSegment


class SegmentType(object):
    """
    Dive segment type enumeration.

    ASC_DESC
        Ascent or descent between two depths. The time of the segment is
        determined by depth change rate.
    BOTTOM
        Constant depth part of a dive requested by a diver.
    DECO_STOP
        Decompression stop. Constant depth part of a dive, where ascent is
        not possible until allowed by decompression model.
    """
    ASC_DESC = 'asc_desc'
    BOTTOM = 'bottom'
    DECO_STOP = 'deco_stop'


class Phase(object):
    """
    Dive phase enumeration used to choose surface air consumption rate.

    BOTTOM
        Descent and bottom segments requested by a diver.
    DECO
        Ascent to the surface including decompression stops.
    """
    BOTTOM = 'bottom'
    DECO = 'deco'


class Segment(namedtuple('Segment', 'type start_depth end_depth time')):
    """
    Dive segment.

    :var type: Segment type.
    :var start_depth: Depth at start of segment [m].
    :var end_depth: Depth at end of segment [m].
    :var time: Duration of segment [min].
    """
    __slots__ = ()

    def __new__(cls, type, start_depth, end_depth, time):
        if start_depth < 0 or end_depth < 0:
            raise InvalidSegment(
                'Negative depth of {} segment'.format(type)
            )
        if time < 0:
            raise InvalidSegment('Negative time of {} segment'.format(type))

        if type == SegmentType.ASC_DESC:
            if start_depth == end_depth:
                raise InvalidSegment('No depth change of transit segment')
        elif type in (SegmentType.BOTTOM, SegmentType.DECO_STOP):
            if start_depth != end_depth:
                raise InvalidSegment(
                    'Depth change of constant depth {} segment'.format(type)
                )
        else:
            raise InvalidSegment('Unknown segment type {}'.format(type))

        if type == SegmentType.BOTTOM and (end_depth <= 0 or time <= 0):
            raise InvalidSegment(
                'Bottom segment requires positive depth and time, got {}m'
                ' for {}min'.format(end_depth, time)
            )
        return super().__new__(cls, type, start_depth, end_depth, time)


    @property
    def rate(self):
        """
        Depth change rate of the segment [m/min].

        The rate is negative for ascent and zero for constant depth
        segments.
        """
        if self.time == 0:
            return 0
        return (self.end_depth - self.start_depth) / self.time


    def __repr__(self):
        return 'Segment(type="{}", start_depth={}, end_depth={},' \
            ' time={:.4f})'.format(
                self.type, self.start_depth, self.end_depth, self.time
            )


def bottom(depth, time):
    """
    Create bottom segment.

    :param depth: Bottom depth [m].
    :param time: Bottom time [min].
    """
    return Segment(SegmentType.BOTTOM, depth, depth, time)


def deco_stop(depth, time):
    """
    Create decompression stop segment.

    :param depth: Depth of decompression stop [m].
    :param time: Length of decompression stop [min].
    """
    return Segment(SegmentType.DECO_STOP, depth, depth, time)


def transit(start, end, ascent_rate, descent_rate):
    """
    Create ascent or descent segment between two depths.

    The time of the segment is calculated using ascent rate when going
    shallower and descent rate when going deeper.

    :param start: Starting depth [m].
    :param end: Destination depth [m].
    :param ascent_rate: Ascent rate, negative value [m/min].
    :param descent_rate: Descent rate, positive value [m/min].
    """
    rate = descent_rate if end > start else ascent_rate
    if end > start and rate <= 0 or end < start and rate >= 0:
        raise InvalidSegment(
            'Invalid rate {}m/min from {}m to {}m'.format(rate, start, end)
        )
    time = (end - start) / rate
    return Segment(SegmentType.ASC_DESC, start, end, time)


# vim: sw=4:et:ai
