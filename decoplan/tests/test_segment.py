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
Dive segment tests.
"""

from decoplan.segment import Segment, SegmentType, bottom, deco_stop, transit
from decoplan.error import InvalidSegment

import unittest


class SegmentTestCase(unittest.TestCase):
    """
    Dive segment tests.
    """
    def test_bottom(self):
        """
        Test bottom segment creation
        """
        s = bottom(30, 25)
        self.assertEqual(SegmentType.BOTTOM, s.type)
        self.assertEqual(30, s.start_depth)
        self.assertEqual(30, s.end_depth)
        self.assertEqual(25, s.time)
        self.assertEqual(0, s.rate)


    def test_deco_stop(self):
        """
        Test decompression stop creation
        """
        s = deco_stop(6, 2)
        self.assertEqual(Segment(SegmentType.DECO_STOP, 6, 6, 2), s)

        s = deco_stop(3, 0)
        self.assertEqual(0, s.time)
        self.assertEqual(0, s.rate)


    def test_descent(self):
        """
        Test descent segment creation
        """
        s = transit(0, 30, -10, 20)
        self.assertEqual(SegmentType.ASC_DESC, s.type)
        self.assertEqual(0, s.start_depth)
        self.assertEqual(30, s.end_depth)
        self.assertEqual(1.5, s.time)
        self.assertEqual(20, s.rate)


    def test_ascent(self):
        """
        Test ascent segment creation
        """
        s = transit(30, 10, -10, 20)
        self.assertEqual(2, s.time)
        self.assertEqual(-10, s.rate)


    def test_transit_invalid_rate(self):
        """
        Test transit segment with invalid rate sign
        """
        self.assertRaises(InvalidSegment, transit, 0, 30, -10, -20)
        self.assertRaises(InvalidSegment, transit, 30, 0, 10, 20)
        self.assertRaises(InvalidSegment, transit, 30, 0, 0, 20)


    def test_transit_no_depth_change(self):
        """
        Test transit segment without depth change
        """
        self.assertRaises(InvalidSegment, transit, 10, 10, -10, 20)
        self.assertRaises(
            InvalidSegment, Segment, SegmentType.ASC_DESC, 10, 10, 1
        )


    def test_constant_depth_change(self):
        """
        Test constant depth segment with depth change
        """
        self.assertRaises(
            InvalidSegment, Segment, SegmentType.BOTTOM, 10, 12, 1
        )
        self.assertRaises(
            InvalidSegment, Segment, SegmentType.DECO_STOP, 6, 3, 1
        )


    def test_invalid_bottom(self):
        """
        Test bottom segment with invalid depth or time
        """
        self.assertRaises(InvalidSegment, bottom, 0, 10)
        self.assertRaises(InvalidSegment, bottom, 10, 0)
        self.assertRaises(InvalidSegment, bottom, -10, 10)


    def test_negative_values(self):
        """
        Test dive segment with negative depth or time
        """
        self.assertRaises(InvalidSegment, deco_stop, -3, 1)
        self.assertRaises(InvalidSegment, deco_stop, 3, -1)
        self.assertRaises(
            InvalidSegment, Segment, SegmentType.ASC_DESC, 0, -3, 1
        )


    def test_unknown_type(self):
        """
        Test dive segment with unknown type
        """
        self.assertRaises(InvalidSegment, Segment, 'surface', 0, 0, 10)


    def test_repr(self):
        """
        Test dive segment representation
        """
        s = transit(0, 30, -10, 20)
        self.assertEqual(
            'Segment(type="asc_desc", start_depth=0, end_depth=30,'
            ' time=1.5000)',
            repr(s)
        )


# vim: sw=4:et:ai
