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
Dive environment tests.
"""

from decoplan.environment import Environment, altitude_pressure
from decoplan.error import ConfigError
from decoplan import const

import unittest


class EnvironmentTestCase(unittest.TestCase):
    """
    Dive environment tests.
    """
    def test_default(self):
        """
        Test default dive environment (salt water at sea level)
        """
        env = Environment()
        self.assertEqual(const.SURFACE_PRESSURE, env.surface_pressure)
        self.assertAlmostEqual(0.101008495, env.meter_to_bar)


    def test_fresh_water(self):
        """
        Test fresh water pressure change per meter
        """
        env = Environment(const.FRESHWATER)
        self.assertAlmostEqual(0.0980665, env.meter_to_bar)


    def test_to_pressure(self):
        """
        Test depth to absolute pressure conversion
        """
        env = Environment()
        v = env.to_pressure(10)
        self.assertAlmostEqual(2.02333495, v)

        v = env.to_pressure(0)
        self.assertEqual(const.SURFACE_PRESSURE, v)


    def test_to_depth(self):
        """
        Test absolute pressure to depth conversion
        """
        env = Environment()
        v = env.to_depth(env.to_pressure(21.5))
        self.assertAlmostEqual(21.5, v)

        v = env.to_depth(env.surface_pressure)
        self.assertEqual(0, v)


    def test_altitude(self):
        """
        Test surface pressure at altitude
        """
        self.assertAlmostEqual(const.SURFACE_PRESSURE, altitude_pressure(0))

        env = Environment(altitude=1000)
        self.assertAlmostEqual(0.8987, env.surface_pressure, 3)
        self.assertEqual(0, env.to_depth(env.surface_pressure))


    def test_invalid_density(self):
        """
        Test dive environment with invalid water density
        """
        self.assertRaises(ConfigError, Environment, 0)
        self.assertRaises(ConfigError, Environment, -1000)


    def test_invalid_altitude(self):
        """
        Test dive environment below sea level
        """
        self.assertRaises(ConfigError, Environment, altitude=-10)


# vim: sw=4:et:ai
