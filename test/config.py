"""
Configuration tree tests (dotted keys, children, typed reads).

Scope
- get() creates nodes, [] lookups never do.
- add()/remove_children() keep insertion order and allow repeats.
- value_as_default() converts to the default's type or falls back to it.

Conventions
- Test method names follow CamelCase per project convention.
"""
import unittest
from unittest import TestCase

from commandline.config import Node
from commandline.options import switch_option
from commandline.parser import parse_command_line


class TestNode(TestCase):

    def setUp(self):
        self.root = Node("CommandLine")

    def testSetCreatesIntermediateNodes(self):
        self.root.set("Server.Port", "8080")
        self.assertIn("Server", self.root)
        self.assertIn("Server.Port", self.root)
        self.assertEqual(self.root["Server.Port"].value, "8080")
        self.assertEqual(self.root["Server"].value, None)

    def testGetIsGetOrCreate(self):
        node = self.root.get("Model.Path")
        self.assertIs(self.root.get("Model.Path"), node)
        self.assertEqual(len(self.root), 1)

    def testLookupNeverCreates(self):
        node = self.root["Missing.Key"]
        self.assertEqual(node.name, "Key")
        self.assertIsNone(node.value)
        self.assertNotIn("Missing", self.root)
        self.assertEqual(len(self.root), 0)

    def testAddAppendsRepeatedNames(self):
        node = self.root.get("Range")
        node.add("value", "1")
        node.add("value", "2")
        self.assertEqual([child.value for child in node], ["1", "2"])
        self.assertEqual(self.root["Range.value"].value, "1")

    def testRemoveChildren(self):
        node = self.root.get("Range")
        node.add("percent", "42")
        node.remove_children()
        self.assertEqual(len(node), 0)
        self.assertEqual(node.children, ())

    def testValueAsDefaultConverts(self):
        self.root.set("Verbose", "on")
        self.root.set("Port", "8080")
        self.root.set("Ratio", "0.5")
        self.root.set("Host", "localhost")
        self.assertIs(self.root["Verbose"].value_as_default(False), True)
        self.assertEqual(self.root["Port"].value_as_default(0), 8080)
        self.assertEqual(self.root["Ratio"].value_as_default(1.0), 0.5)
        self.assertEqual(self.root["Host"].value_as_default(""), "localhost")

    def testValueAsDefaultFallsBack(self):
        self.root.set("Verbose", "notabool")
        self.assertIs(self.root["Verbose"].value_as_default(True), True)
        self.assertEqual(self.root["Absent"].value_as_default(7), 7)

    def testEmptySegmentsAreRejected(self):
        with self.assertRaises(ValueError):
            self.root.get("Server..Port")
        with self.assertRaises(TypeError):
            self.root.set(1, "x")

    def testToDict(self):
        self.root.set("Range", "42,east")
        self.root["Range"].add("percent", "42")
        self.root["Range"].add("direction", "east")
        self.assertEqual(self.root.to_dict(), {
            "children": {
                "Range": {
                    "value": "42,east",
                    "children": {"percent": {"value": "42"}, "direction": {"value": "east"}},
                },
            },
        })

    def testToDictKeepsValueBesideChildNamedValue(self):
        config, _ = parse_command_line([switch_option("--verbose", "Verbose", "Chatty.")], ["prog"])
        view = config.to_dict()["children"]["Verbose"]
        self.assertEqual(view["value"], "false")
        self.assertEqual(view["children"], {"value": {"value": "false"}})


if __name__ == "__main__":
    unittest.main()
