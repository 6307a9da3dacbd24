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
DecoPlan output functions and coroutines tests.
"""

from decoplan.consumption import GasUsage
from decoplan.engine import Plan
from decoplan.output import pretty_time, pretty_depth, format_table, \
    plan_table, gas_table, csv_writer
from decoplan.segment import bottom, deco_stop, transit

from .tools import AIR, EAN50

import io
import unittest
from unittest import mock


class FormatTestCase(unittest.TestCase):
    """
    Output formatting functions tests.
    """
    def test_pretty_time(self):
        """
        Test time formatting
        """
        self.assertEqual('1:30', pretty_time(1.5))
        self.assertEqual('0:10', pretty_time(10 / 60))
        self.assertEqual('61:00', pretty_time(61))
        self.assertEqual('0:00', pretty_time(0))


    def test_pretty_depth(self):
        """
        Test depth formatting
        """
        self.assertEqual('30m', pretty_depth(30))
        self.assertEqual('4.5m', pretty_depth(4.5))


    def test_format_table(self):
        """
        Test text table formatting
        """
        v = format_table([('a', 'bb'), ('ccc', 1)])
        self.assertEqual('  a  bb\nccc   1', v)


    def test_plan_table(self):
        """
        Test dive plan table
        """
        plan = Plan([
            (transit(0, 30, -10, 30), AIR),
            (bottom(30, 20), AIR),
            (transit(30, 3, -10, 30), EAN50),
            (deco_stop(3, 2), EAN50),
        ])
        lines = plan_table(plan).split('\n')
        self.assertEqual(5, len(lines))
        self.assertTrue(lines[0].startswith('Segment'), lines[0])
        self.assertIn('AscDesc', lines[1])
        self.assertIn('-> 30m', lines[1])
        self.assertIn('Bottom', lines[2])
        self.assertIn('21:00', lines[2])
        self.assertIn('-> 3m', lines[3])
        self.assertIn('DecoStop', lines[4])
        self.assertTrue(lines[4].endswith('25:42  50/0'), lines[4])


    def test_gas_table(self):
        """
        Test gas usage table
        """
        usage = GasUsage([(EAN50, 200), (AIR, 1650.4)])
        lines = gas_table(usage).split('\n')
        self.assertEqual(4, len(lines))
        self.assertIn('21/0', lines[1])
        self.assertIn('1650 litres', lines[1])
        self.assertIn('50/0', lines[2])
        self.assertTrue(lines[3].strip().startswith('Total'), lines[3])
        self.assertIn('1850 litres', lines[3])



class CSVWriterTestCase(unittest.TestCase):
    """
    CSV writer coroutine tests.
    """
    def test_csv_writer(self):
        """
        Test saving dive segments in CSV file
        """
        f = io.StringIO()
        w = csv_writer(f)
        w.send((transit(0, 30, -10, 30), AIR))
        w.send((bottom(30, 20), AIR))

        lines = f.getvalue().splitlines()
        self.assertEqual(3, len(lines))
        self.assertEqual(
            'type,start_depth,end_depth,time,runtime,gas_o2,gas_he,gas_n2',
            lines[0]
        )
        self.assertEqual('asc_desc,0,30,1.0,1.0,21,0,79', lines[1])
        self.assertEqual('bottom,30,30,20,21.0,21,0,79', lines[2])


    def test_csv_writer_target(self):
        """
        Test CSV writer forwarding dive segments
        """
        f = io.StringIO()
        target = mock.MagicMock()
        w = csv_writer(f, target)
        s = bottom(30, 20)
        w.send((s, AIR))
        target.send.assert_called_once_with((s, AIR))


# vim: sw=4:et:ai
