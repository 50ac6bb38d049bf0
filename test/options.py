"""
Option definition tests (emitters, attributes, shape checks).

Scope
- Each emitter pairs the expected actions, slots and default description.
- Definitions are read-only and hand out tuples.
- Construction rejects wrong types and shapes; name rules are left to
  the table validator.

Conventions
- Test method names follow CamelCase per project convention.
"""
import unittest
from unittest import TestCase

from commandline.actions import StoreValues, StoreInverseBool, DoNothing, store_constants
from commandline.options import (
    Flags,
    REQUIRED,
    OptionDefinition,
    switch_option,
    complement_switch_option,
    valued_option,
    default_valued_option,
    multivalued_option,
    default_multivalued_option,
)
from commandline.parameters import BooleanParameter, integer, string


class TestEmitters(TestCase):

    def testSwitchOption(self):
        option = switch_option(["--help", "--usage"], "ShowHelp", "Print help.", short_names=["-h", "-?"])
        self.assertTrue(option.is_switch)
        self.assertIsInstance(option.parameters[0], BooleanParameter)
        self.assertIsInstance(option.if_found, StoreValues)
        self.assertEqual(option.if_not_found, store_constants("false"))
        self.assertEqual(option.names, ("--help", "--usage", "-h", "-?"))
        self.assertEqual(option.primary_name, "--help")
        self.assertEqual(option.default_values_description, "")

    def testComplementSwitchHasNoDefault(self):
        option = complement_switch_option("--quiet", "Verbose", "Opposite of --verbose.")
        self.assertTrue(option.is_switch)
        self.assertIsInstance(option.if_found, StoreInverseBool)
        self.assertIsInstance(option.if_not_found, DoNothing)

    def testValuedOption(self):
        option = valued_option("--model", string("path"), "Model.Path", "Model.", REQUIRED)
        self.assertFalse(option.is_switch)
        self.assertTrue(option.is_required)
        self.assertIsInstance(option.if_not_found, DoNothing)
        self.assertEqual(option.config_key, "Model.Path")

    def testDefaultValuedOption(self):
        option = default_valued_option("--port", integer("port", 1, 65535), "8080", "Server.Port", "Port.")
        self.assertEqual(option.if_not_found, store_constants("8080"))
        self.assertEqual(option.default_values_description, "8080")
        self.assertFalse(option.is_required)

    def testMultivaluedOptionDelimiter(self):
        option = multivalued_option("--range", [integer("percent"), string("direction")], "Range", "Range.", delimiter=";")
        self.assertEqual(option.delimiter, ";")
        self.assertEqual(len(option.parameters), 2)
        self.assertIsInstance(option.if_not_found, DoNothing)

    def testDefaultMultivaluedOption(self):
        option = default_multivalued_option(
            "--context", [integer("size"), integer("batch")], "2048,512", "Context", "Context."
        )
        self.assertEqual(option.if_not_found, store_constants("2048,512"))
        self.assertEqual(option.default_values_description, "2048,512")


class TestOptionDefinition(TestCase):

    def testDefaults(self):
        option = OptionDefinition("--flag", config_key="Flag")
        self.assertEqual(option.short_names, ())
        self.assertEqual(option.parameters, ())
        self.assertEqual(option.delimiter, ",")
        self.assertIsInstance(option.if_found, StoreValues)
        self.assertIsInstance(option.if_not_found, DoNothing)
        self.assertEqual(option.flags, Flags.NONE)
        self.assertFalse(option.is_switch)

    def testAttributesAreReadOnly(self):
        option = switch_option("--verbose", "Verbose", "Chatty.")
        with self.assertRaises(AttributeError):
            option.config_key = "Other"
        self.assertIsInstance(option.long_names, tuple)

    def testMatchesLongAndShortNames(self):
        option = switch_option("--verbose", "Verbose", "Chatty.", short_names="-v")
        self.assertTrue(option.matches("--verbose"))
        self.assertTrue(option.matches("-v"))
        self.assertFalse(option.matches("--verb"))

    def testShapeChecks(self):
        with self.assertRaises(ValueError):
            OptionDefinition("--pair", (), (), ",,", config_key="Pair")
        with self.assertRaises(TypeError):
            OptionDefinition("--pair", (), ("not a parameter",), config_key="Pair")
        with self.assertRaises(TypeError):
            OptionDefinition(["--pair", 3], config_key="Pair")
        with self.assertRaises(ValueError):
            OptionDefinition("--pair", config_key=" ")
        with self.assertRaises(TypeError):
            OptionDefinition("--pair", (), (), ",", "store", config_key="Pair")

    def testNameRulesAreNotCheckedHere(self):
        option = OptionDefinition(["--a=b"], config_key="A")
        self.assertEqual(option.primary_name, "--a=b")
        self.assertEqual(OptionDefinition((), config_key="A").primary_name, "")


if __name__ == "__main__":
    unittest.main()
