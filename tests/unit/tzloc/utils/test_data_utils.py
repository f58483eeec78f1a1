"""Unit tests for data utility functions."""

import unittest

import pytest
from munch import Munch

from tzloc.utils.data_utils import get_multi, merge_struct

pytestmark = pytest.mark.unit


class TestGetMulti(unittest.TestCase):
    """Tests for get_multi function."""

    def test_get_multi_simple(self):
        data = {"a": {"b": {"c": 42}}}
        self.assertEqual(get_multi(data, "a.b.c"), 42)

    def test_get_multi_with_list(self):
        data = {"a": {"b": {"c": 42}}}
        self.assertEqual(get_multi(data, ["a", "b", "c"]), 42)

    def test_get_multi_empty_path(self):
        data = {"a": 1}
        self.assertEqual(get_multi(data, []), data)

    def test_get_multi_missing_key_with_default(self):
        data = {"a": 1}
        self.assertIsNone(get_multi(data, "b.c", default=None))
        self.assertEqual(get_multi(data, "b.c", default="default"), "default")

    def test_get_multi_missing_key_without_default(self):
        with self.assertRaises(KeyError):
            get_multi({"a": 1}, "b.c")

    def test_get_multi_type_error_without_default(self):
        with self.assertRaises(TypeError):
            get_multi({"a": 1}, "a.b")


class TestMergeStruct(unittest.TestCase):
    """Tests for merge_struct function."""

    def test_nested_dicts_merge(self):
        merged = merge_struct({"a": {"x": 1, "y": 2}}, {"a": {"y": 3}})
        self.assertEqual(merged, {"a": {"x": 1, "y": 3}})

    def test_lists_are_replaced(self):
        merged = merge_struct({"dirs": ["/a", "/b"]}, {"dirs": []})
        self.assertEqual(merged, {"dirs": []})

    def test_none_keeps_base(self):
        self.assertEqual(merge_struct({"a": 1}, None), {"a": 1})

    def test_inputs_not_mutated(self):
        base = Munch(a=Munch(x=1))
        merge_struct(base, {"a": {"x": 2}})
        self.assertEqual(base.a.x, 1)
