import unittest
import sys
import os
import io
import json

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from seqdiff import diff, diff_sectioned, EditScript
from formatters import create_formatter, get_available_formatters, format_diff
from formatters.base import (
    FormatterConfig, FormatterFactory, ColorScheme, OutputWriter, OutputTarget,
    SimpleFormatter, is_sectioned
)
from formatters.compact import CompactFormatter
from formatters.structured import JSONFormatter, step_to_dict, section_step_to_dict


class TestFormatterConfig(unittest.TestCase):
    def test_config(self):
        c = FormatterConfig()
        self.assertTrue(c.use_color)
        self.assertEqual(c.indent, 2)
        self.assertFalse(c.with_color(False).use_color)
        self.assertTrue(c.use_color)
        self.assertFalse(c.with_header(False).show_header)
        self.assertEqual(c.with_indent(4).indent, 4)
        self.assertEqual(c.copy().encoding, 'utf-8')


class TestColorSchemeAndWriter(unittest.TestCase):
    def test_colors_writer(self):
        s = ColorScheme()
        self.assertEqual(s.reset, '\033[0m')
        self.assertEqual(ColorScheme.no_color().green, '')
        w = OutputWriter(OutputTarget.STRING)
        w.write("a")
        w.writeln("b")
        self.assertEqual(w.get_output(), "ab\n")

    def test_file_target(self):
        buf = io.StringIO()
        out = CompactFormatter().format(diff('ab', 'b'), output=buf)
        self.assertEqual(out, "")
        self.assertEqual(buf.getvalue(), "[-'a'@0]\n")


class TestCompactFormatter(unittest.TestCase):
    def test_flat(self):
        self.assertEqual(CompactFormatter().format(diff([1, 2, 3], [1, 3, 2])), "[-2@1, +2@2]\n")
        self.assertEqual(CompactFormatter().format(EditScript()), "[]\n")

    def test_sectioned(self):
        steps = diff_sectioned([['a', 'b'], ['c']], [['a'], ['c', 'd']])
        self.assertEqual(CompactFormatter().format(steps), "[d(0 1), i(1 1)]\n")


class TestSimpleFormatter(unittest.TestCase):
    def setUp(self):
        self.formatter = SimpleFormatter(FormatterConfig(use_color=False))

    def test_flat(self):
        out = self.formatter.format(diff(['a', 'old'], ['a', 'new']), "f1", "f2")
        self.assertEqual(out.splitlines(), ["--- f1", "+++ f2", "-old @1", "+new @1"])

    def test_no_changes(self):
        self.assertEqual(self.formatter.format(diff('abc', 'abc')), "")

    def test_without_header(self):
        formatter = SimpleFormatter(FormatterConfig(use_color=False, show_header=False))
        self.assertEqual(formatter.format(diff('a', 'b')), "-a @0\n+b @0\n")

    def test_sectioned(self):
        out = self.formatter.format(diff_sectioned([['a'], ['b']], [['a']]))
        self.assertEqual(out.splitlines()[2:], ["-- section 1", "-b @1:0"])
        out = self.formatter.format(diff_sectioned([['a']], [['a'], ['b']]))
        self.assertEqual(out.splitlines()[2:], ["+b @1:0", "++ section 1"])

    def test_colors(self):
        out = SimpleFormatter(FormatterConfig(use_color=True)).format(diff('a', 'b'))
        self.assertIn('\033[31m-a @0', out)
        self.assertIn('\033[32m+b @0', out)


class TestJSONFormatter(unittest.TestCase):
    def test_flat(self):
        doc = json.loads(JSONFormatter().format(diff([1, 2, 3], [1, 3, 2]), "x", "y"))
        self.assertFalse(doc["sectioned"])
        self.assertEqual((doc["file1"], doc["file2"]), ("x", "y"))
        self.assertEqual(doc["steps"][0], {"type": "delete", "index": 1, "value": 2})
        self.assertEqual(doc["stats"], {"insertions": 1, "deletions": 1})

    def test_sectioned(self):
        doc = json.loads(JSONFormatter().format(diff_sectioned([['a', 'b'], ['c']], [['a'], ['c', 'd']])))
        self.assertTrue(doc["sectioned"])
        self.assertEqual(doc["steps"], [
            {"type": "delete", "section": 0, "row": 1, "value": "b"},
            {"type": "insert", "section": 1, "row": 1, "value": "d"},
        ])
        self.assertEqual(doc["stats"]["section_insertions"], 0)

    def test_step_dicts(self):
        steps = diff_sectioned([['a']], [['a'], []])
        self.assertEqual(section_step_to_dict(steps[0]), {"type": "section_insert", "section": 1, "row": 0})
        steps = diff_sectioned([['a'], []], [['a']])
        self.assertEqual(section_step_to_dict(steps[0]), {"type": "section_delete", "section": 1})
        self.assertEqual(step_to_dict(diff('', 'z')[0]), {"type": "insert", "index": 0, "value": "z"})

    def test_unserializable_values(self):
        doc = json.loads(JSONFormatter().format(diff([], [{1, 2}])))
        self.assertIsInstance(doc["steps"][0]["value"], str)


class TestFactory(unittest.TestCase):
    def test_factory(self):
        self.assertTrue({"compact", "simple", "json"} <= set(get_available_formatters()))
        self.assertIsInstance(FormatterFactory.create("simple"), SimpleFormatter)
        self.assertIsInstance(create_formatter("json"), JSONFormatter)
        with self.assertRaises(ValueError):
            create_formatter("unknown")

    def test_format_diff(self):
        script = diff('ab', 'ac')
        self.assertEqual(format_diff(script), repr(script) + "\n")
        self.assertIn("--- l", format_diff(script, "l", "r", "simple", FormatterConfig(use_color=False)))

    def test_is_sectioned(self):
        self.assertTrue(is_sectioned(diff_sectioned([], [])))
        self.assertFalse(is_sectioned(diff([], [])))


if __name__ == '__main__':
    unittest.main()
