"""
Test suite for hofkit sink adapters.
"""

import io
import unittest

from hofkit.core import for_each
from hofkit.sinks import Collector, collector, stream_sink
from hofkit.types import InvocationError


class TestStreamSink(unittest.TestCase):
    """Test stream_sink."""

    def test_writes_one_line_per_value(self):
        out = io.StringIO()
        for_each(["John", "Jane"], stream_sink(out))
        self.assertEqual(out.getvalue(), "John\nJane\n")

    def test_custom_end(self):
        out = io.StringIO()
        for_each([1, 2, 3], stream_sink(out, end=","))
        self.assertEqual(out.getvalue(), "1,2,3,")

    def test_non_string_values_are_formatted(self):
        out = io.StringIO()
        stream_sink(out)((1, "a"))
        self.assertEqual(out.getvalue(), "(1, 'a')\n")

    def test_rejects_objects_without_write(self):
        with self.assertRaises(TypeError):
            stream_sink(object())

    def test_write_failure_propagates(self):
        out = io.StringIO()
        sink = stream_sink(out)
        out.close()
        with self.assertRaises(InvocationError) as ctx:
            for_each(["x"], sink)
        self.assertIsInstance(ctx.exception.cause, ValueError)


class TestCollector(unittest.TestCase):
    """Test the closure-bundle collector."""

    def test_collects_in_order(self):
        c = collector()
        for_each(["a", "b", "c"], c.append)
        self.assertEqual(c.items(), ["a", "b", "c"])
        self.assertEqual(c.count(), 3)

    def test_items_returns_copy(self):
        c = collector()
        c.append(1)
        snapshot = c.items()
        snapshot.append(2)
        self.assertEqual(c.items(), [1])

    def test_clear(self):
        c = collector()
        c.append(1)
        c.clear()
        self.assertEqual(c.items(), [])
        self.assertEqual(c.count(), 0)

    def test_collectors_are_independent(self):
        a = collector()
        b = collector()
        a.append("only a")
        self.assertEqual(b.items(), [])

    def test_is_named_bundle(self):
        c = collector()
        self.assertIsInstance(c, Collector)
        self.assertEqual(Collector._fields, ("append", "items", "clear", "count"))


if __name__ == "__main__":
    unittest.main()
