#!/usr/bin/env python3
"""
Unit tests for opt list normalization.
"""

import unittest

from subexport import (
    ConfigurationError,
    DuplicateNameError,
    InvalidOptionKindError,
    OutputSlot,
    ValueKind,
    canonicalize_opt_list,
    expand_opt_list,
)


def _gen(requester, name, args, collection):
    return lambda: name


class TestCanonicalizeSequence(unittest.TestCase):
    """Test the flat sequence form."""

    def test_empty_inputs(self):
        """None and empty sequences canonicalize to an empty list."""
        self.assertEqual(canonicalize_opt_list(None), [])
        self.assertEqual(canonicalize_opt_list([]), [])
        self.assertEqual(canonicalize_opt_list({}), [])

    def test_bare_names(self):
        """Names not followed by structured values get None options."""
        self.assertEqual(
            canonicalize_opt_list(["a", "b", "c"]),
            [("a", None), ("b", None), ("c", None)],
        )

    def test_name_followed_by_mapping(self):
        """A mapping after a name becomes that name's options."""
        result = canonicalize_opt_list(["a", "b", {"-as": "x"}, "c"])
        self.assertEqual(result, [("a", None), ("b", {"-as": "x"}), ("c", None)])

    def test_explicit_none_is_skipped(self):
        """A None after a name means no options and is not a name itself."""
        result = canonicalize_opt_list(["a", None, "b"])
        self.assertEqual(result, [("a", None), ("b", None)])

    def test_trailing_none(self):
        """A trailing None is swallowed by the last name."""
        self.assertEqual(canonicalize_opt_list(["-D", None]), [("-D", None)])

    def test_structured_values(self):
        """Sequences, callables and output slots all count as options."""
        slot = OutputSlot()
        result = canonicalize_opt_list(["a", ("x", "y"), "b", _gen, "c", slot])
        self.assertEqual(result, [("a", ("x", "y")), ("b", _gen), ("c", slot)])

    def test_scalars_are_not_options(self):
        """Strings and numbers following a name are not its options."""
        result = canonicalize_opt_list(["a", "b"])
        self.assertEqual(result, [("a", None), ("b", None)])

    def test_duplicates_allowed_by_default(self):
        """The same name may appear more than once."""
        result = canonicalize_opt_list(["a", {"-as": "x"}, "a", {"-as": "y"}])
        self.assertEqual(result, [("a", {"-as": "x"}), ("a", {"-as": "y"})])

    def test_input_not_modified(self):
        """The input sequence is left untouched."""
        source = ["a", {"-as": "x"}]
        canonicalize_opt_list(source)
        self.assertEqual(source, ["a", {"-as": "x"}])

    def test_non_string_name(self):
        """A structured value where a name is expected is rejected."""
        with self.assertRaises(ConfigurationError) as ctx:
            canonicalize_opt_list([{"-as": "x"}], "import")
        self.assertIn("import", str(ctx.exception))

    def test_bare_string(self):
        """A string is not read as a sequence of one-letter names."""
        with self.assertRaises(ConfigurationError) as ctx:
            canonicalize_opt_list("abc", "export")
        self.assertIn("export", str(ctx.exception))
        self.assertIn("abc", str(ctx.exception))


class TestCanonicalizeMapping(unittest.TestCase):
    """Test the mapping form."""

    def test_mapping_values(self):
        """Structured values are kept, everything else becomes None."""
        result = canonicalize_opt_list({"a": 1, "b": {"x": 1}, "c": None, "d": True})
        self.assertEqual(result, [("a", None), ("b", {"x": 1}), ("c", None), ("d", None)])


class TestConstraints(unittest.TestCase):
    """Test uniqueness and kind constraints."""

    def test_require_unique(self):
        """Duplicate names are fatal when uniqueness is required."""
        with self.assertRaises(DuplicateNameError) as ctx:
            canonicalize_opt_list(["a", "b", "a"], require_unique=True)
        self.assertEqual(ctx.exception.name, "a")
        self.assertIn("a", str(ctx.exception))

    def test_must_be_single_kind(self):
        """A value of the wrong kind names the kind and the moniker."""
        with self.assertRaises(InvalidOptionKindError) as ctx:
            canonicalize_opt_list(["a", {"x": 1}], "exports", must_be=ValueKind.CALLABLE)
        self.assertEqual(ctx.exception.kind, "mapping")
        self.assertIn("mapping", str(ctx.exception))
        self.assertIn("exports", str(ctx.exception))

    def test_must_be_several_kinds(self):
        """Any of the listed kinds is accepted."""
        allowed = [ValueKind.MAPPING, ValueKind.CALLABLE]
        result = canonicalize_opt_list(["a", {"x": 1}, "b", _gen, "c"], must_be=allowed)
        self.assertEqual(len(result), 3)

        with self.assertRaises(InvalidOptionKindError):
            canonicalize_opt_list(["a", ["x"]], "groups", must_be=allowed)

    def test_none_values_skip_kind_check(self):
        """Names without options always pass the kind check."""
        result = canonicalize_opt_list(["a", None, "b"], must_be=ValueKind.CALLABLE)
        self.assertEqual(result, [("a", None), ("b", None)])


class TestExpandOptList(unittest.TestCase):
    """Test the dict form of normalization."""

    def test_expand_sequence(self):
        """A sequence becomes a name -> options dict."""
        self.assertEqual(expand_opt_list(["a", "b", _gen]), {"a": None, "b": _gen})

    def test_expand_requires_unique(self):
        """Duplicates cannot be expanded into a dict."""
        with self.assertRaises(DuplicateNameError):
            expand_opt_list(["a", "a"])

    def test_expand_mapping(self):
        """A mapping is copied, with scalar values dropped."""
        source = {"a": _gen, "b": 1}
        result = expand_opt_list(source, must_be=ValueKind.CALLABLE)
        self.assertEqual(result, {"a": _gen, "b": None})
        self.assertIsNot(result, source)


if __name__ == "__main__":
    unittest.main()
