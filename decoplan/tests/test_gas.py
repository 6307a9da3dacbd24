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
Gas mix tests.
"""

from decoplan.gas import Gas, DecoGas, deco_gas, best_gas
from decoplan.error import InvalidComposition, DegenerateGas, ConfigError

from .tools import _environment, AIR, EAN50, O2

import unittest


class GasTestCase(unittest.TestCase):
    """
    Gas mix composition tests.
    """
    def test_gas(self):
        """
        Test gas mix fractions
        """
        gas = Gas(18, 45)
        self.assertEqual(18, gas.o2)
        self.assertEqual(45, gas.he)
        self.assertEqual(37, gas.n2)

        self.assertEqual(79, AIR.n2)
        self.assertEqual(0, AIR.he)
        self.assertEqual(0, O2.n2)


    def test_gas_sum(self):
        """
        Test gas mix fractions sum up to 100%
        """
        for gas in (AIR, EAN50, O2, Gas(10, 70), Gas(0, 100)):
            self.assertEqual(100, gas.o2 + gas.he + gas.n2)


    def test_invalid_composition(self):
        """
        Test gas mix with invalid composition
        """
        self.assertRaises(InvalidComposition, Gas, 80, 30)
        self.assertRaises(InvalidComposition, Gas, -1)
        self.assertRaises(InvalidComposition, Gas, 101)
        self.assertRaises(InvalidComposition, Gas, 21, -5)


    def test_invalid_composition_config_error(self):
        """
        Test gas mix composition error is configuration error
        """
        self.assertRaises(ConfigError, Gas, 60, 60)


    def test_gas_key(self):
        """
        Test gas mix as dictionary key
        """
        data = {Gas(21): 1, Gas(50): 2}
        self.assertEqual(1, data[Gas(21, 0)])
        self.assertEqual(2, data[EAN50])
        self.assertNotEqual(Gas(21), Gas(21, 35))


    def test_str(self):
        """
        Test gas mix string representation
        """
        self.assertEqual('18/45', str(Gas(18, 45)))
        self.assertEqual('21/0', str(AIR))



class MaximumOperatingDepthTestCase(unittest.TestCase):
    """
    Gas mix maximum operating depth tests.
    """
    def setUp(self):
        self.env = _environment()


    def test_mod(self):
        """
        Test maximum operating depth of gas mix
        """
        self.assertAlmostEqual(22, EAN50.mod(1.6, self.env))
        self.assertAlmostEqual(6, O2.mod(1.6, self.env))
        self.assertAlmostEqual(56.6666666667, AIR.mod(1.4, self.env))


    def test_mod_surface(self):
        """
        Test maximum operating depth of hypoxic gas mix
        """
        self.assertEqual(0, Gas(10, 70).mod(0.05, self.env))


    def test_mod_no_oxygen(self):
        """
        Test maximum operating depth of gas mix without oxygen
        """
        self.assertRaises(DegenerateGas, Gas(0, 100).mod, 1.6, self.env)


    def test_deco_gas(self):
        """
        Test decompression gas mix creation
        """
        m = deco_gas(EAN50, self.env)
        self.assertEqual(EAN50, m.gas)
        self.assertAlmostEqual(22, m.mod)


    def test_deco_gas_mod(self):
        """
        Test decompression gas mix with maximum operating depth override
        """
        m = deco_gas(EAN50, self.env, 21)
        self.assertEqual(DecoGas(EAN50, 21), m)


    def test_deco_gas_negative_mod(self):
        """
        Test decompression gas mix with negative maximum operating depth
        """
        self.assertRaises(DegenerateGas, deco_gas, EAN50, self.env, -1)



class BestGasTestCase(unittest.TestCase):
    """
    Decompression gas mix selection tests.
    """
    def setUp(self):
        self.gases = [DecoGas(O2, 6), DecoGas(EAN50, 22)]


    def test_no_deco_gas(self):
        """
        Test gas mix selection below maximum operating depth of deco gases
        """
        self.assertEqual(AIR, best_gas(30, self.gases, AIR))
        self.assertEqual(AIR, best_gas(22.1, self.gases, AIR))
        self.assertEqual(AIR, best_gas(3, [], AIR))


    def test_deco_gas(self):
        """
        Test gas mix selection within maximum operating depth
        """
        self.assertEqual(EAN50, best_gas(22, self.gases, AIR))
        self.assertEqual(EAN50, best_gas(9, self.gases, AIR))
        self.assertEqual(O2, best_gas(6, self.gases, AIR))
        self.assertEqual(O2, best_gas(0, self.gases, AIR))


    def test_helium_tie(self):
        """
        Test gas mix selection with the same oxygen percentage
        """
        gases = [DecoGas(Gas(50, 10), 22), DecoGas(EAN50, 22)]
        self.assertEqual(EAN50, best_gas(21, gases, AIR))


# vim: sw=4:et:ai
