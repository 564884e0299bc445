#!/usr/bin/env python3
"""
Unit tests for the ready-made generators.
"""

import unittest

from recording import make_requester

from subexport import ResolutionError, build_exporter, curry_method, like, merge_defaults, setup_exporter


class Database:
    @classmethod
    def connect(cls, dsn):
        return f"{cls.__name__} connected to {dsn}"

    @classmethod
    def close(cls):
        return f"{cls.__name__} closed"


class TestCurryMethod(unittest.TestCase):
    """Test exporting methods of the requester as plain functions."""

    def test_curry_own_name(self):
        exporter = build_exporter({"exports": {"connect": curry_method()}})
        target = {}
        exporter(Database, "connect", into=target)
        self.assertEqual(target["connect"]("db://x"), "Database connected to db://x")

    def test_curry_named_method(self):
        exporter = build_exporter({"exports": {"shutdown": curry_method("close")}})
        target = {}
        exporter(Database, "shutdown", into=target)
        self.assertEqual(target["shutdown"](), "Database closed")
        self.assertEqual(target["shutdown"].__name__, "close")

    def test_curry_follows_subclass_requester(self):
        """The requester decides which class the method runs on."""

        class Replica(Database):
            pass

        exporter = build_exporter({"exports": {"connect": curry_method()}})
        target = {}
        exporter(Replica, "connect", into=target)
        self.assertEqual(target["connect"]("db://y"), "Replica connected to db://y")


class TestMergeDefaults(unittest.TestCase):
    """Test collector-supplied default args."""

    def setUp(self):
        self.seen = []

        def generator(requester, name, args, collection):
            self.seen.append(dict(args))
            return lambda: args

        self.exporter = build_exporter(
            {
                "exports": {"tool": merge_defaults("defaults", generator)},
                "collectors": ["defaults"],
            }
        )
        self.requester = make_requester("Test.Util")

    def test_defaults_merged_under_args(self):
        self.exporter(
            self.requester,
            "defaults",
            {"color": "red", "size": 1},
            "tool",
            {"size": 2},
            into={},
        )
        self.assertEqual(self.seen, [{"color": "red", "size": 2}])

    def test_without_collector(self):
        self.exporter(self.requester, "tool", {"size": 2}, into={})
        self.assertEqual(self.seen, [{"size": 2}])


def foo_one():
    return 1


def foo_two():
    return 2


def bar():
    return 3


class TestLike(unittest.TestCase):
    """Test regular expression selection of routines."""

    def setUp(self):
        self.requester = make_requester("Test.Like", foo_one=foo_one, foo_two=foo_two, bar=bar)

    def test_like_public_attributes(self):
        exporter = build_exporter({"groups": {"like": like()}})
        target = {}
        exporter(self.requester, "-like", {"-like": "^foo", "-prefix": "x_"}, into=target)
        self.assertEqual(target, {"x_foo_one": foo_one, "x_foo_two": foo_two})

    def test_like_skips_import_routine(self):
        """The routine bound by setup_exporter is never selected."""
        module = make_requester("Test.LikeImport", import_thing=foo_one)
        setup_exporter({"groups": {"L": like()}}, into=module)
        target = {}
        module.import_("-L", {"-like": "^imp"}, into=target)
        self.assertEqual(target, {"import_thing": foo_one})

    def test_like_several_patterns(self):
        exporter = build_exporter({"groups": {"like": like()}})
        target = {}
        exporter(self.requester, "-like", {"-like": ["one$", "^bar"]}, into=target)
        self.assertEqual(set(target), {"foo_one", "bar"})

    def test_like_restricted_candidates(self):
        exporter = build_exporter({"groups": {"like": like(["foo_one", "bar"])}})
        target = {}
        exporter(self.requester, ":like", {"-like": "o"}, into=target)
        self.assertEqual(set(target), {"foo_one"})

    def test_like_requires_pattern(self):
        exporter = build_exporter({"groups": {"like": like()}})
        with self.assertRaises(ResolutionError):
            exporter(self.requester, "-like", into={})


if __name__ == "__main__":
    unittest.main()
