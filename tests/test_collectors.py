#!/usr/bin/env python3
"""
Unit tests for collector extraction.
"""

import unittest

from subexport import CollectionValidationError, DuplicateCollectionError, ExporterConfig
from subexport.collectors import collect_collections


class TestCollectCollections(unittest.TestCase):
    """Test pulling collector entries out of a request."""

    def setUp(self):
        self.validated = []

        def validator(value):
            self.validated.append(value)
            return isinstance(value, dict)

        self.config = ExporterConfig.build(
            exports=["a", "b"],
            collectors=["plain", "checked", validator],
        )

    def test_collector_removed_from_request(self):
        """Collected entries disappear from the request, the rest stays in order."""
        value = {"x": 1}
        request = [("a", None), ("plain", value), ("b", None)]

        collection = collect_collections(self.config, request)

        self.assertEqual(request, [("a", None), ("b", None)])
        self.assertIs(collection["plain"], value)

    def test_absent_collector(self):
        """A collector that is not requested is absent and never validated."""
        collection = collect_collections(self.config, [("a", None)])

        self.assertEqual(collection, {})
        self.assertEqual(self.validated, [])

    def test_collector_without_value(self):
        """A bare collector name is present with a None value."""
        collection = collect_collections(self.config, [("plain", None)])
        self.assertIn("plain", collection)
        self.assertIsNone(collection["plain"])

    def test_duplicate_collector(self):
        """A collector may only be given once per request."""
        request = [("plain", {"x": 1}), ("a", None), ("plain", {"x": 2})]
        with self.assertRaises(DuplicateCollectionError) as ctx:
            collect_collections(self.config, request)
        self.assertIn("plain", str(ctx.exception))

    def test_validator_accepts(self):
        """A passing validator lets the value through unmodified."""
        value = {"ok": True}
        collection = collect_collections(self.config, [("checked", value)])

        self.assertIs(collection["checked"], value)
        self.assertEqual(self.validated, [value])

    def test_validator_rejects(self):
        """A failing validator aborts extraction."""
        with self.assertRaises(CollectionValidationError) as ctx:
            collect_collections(self.config, [("checked", ["not", "a", "dict"])])
        self.assertEqual(ctx.exception.collector, "checked")
        self.assertIn("failed validation", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
