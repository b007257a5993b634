"""Tests for CanonicalSerializer and normalize().

Covers the compact and multi-line layouts, custom separators, empty blocks,
tails in both layouts, and end-to-end normalization of Rust ``Debug``
output in the multi-line layout.
"""

from __future__ import annotations

import textwrap

import pytest

from sorted_diff.algorithm.config import NormalizeConfig
from sorted_diff.algorithm.serializer import CanonicalSerializer, normalize
from sorted_diff.tree.nodes import Leaf
from sorted_diff.tree.parser import parse

PRETTY = NormalizeConfig(indent=4)


def _dedent(text: str) -> str:
    return textwrap.dedent(text).strip("\n")


class TestCompactLayout:
    def test_keeps_order(self) -> None:
        tree = parse("Foo { b: 1, a: [2,3] }")
        assert CanonicalSerializer().serialize(tree) == "Foo {b: 1, a: [2, 3]}"

    def test_custom_separator(self) -> None:
        tree = parse("Foo { b: 1, a: [2, 3] }")
        serializer = CanonicalSerializer(NormalizeConfig(separator=","))
        assert serializer.serialize(tree) == "Foo {b: 1,a: [2,3]}"

    def test_leaf(self) -> None:
        assert CanonicalSerializer().serialize(Leaf('"x"')) == '"x"'

    def test_tail(self) -> None:
        tree = parse('{Foo { a: 1 }: "foo"}')
        assert CanonicalSerializer().serialize(tree) == '{Foo {a: 1}: "foo"}'


class TestMultiLineLayout:
    def test_one_child_per_line(self) -> None:
        tree = parse("Foo { b: 1, a: [2, 3], c: [] }")
        expected = _dedent(
            """
            Foo {
                b: 1,
                a: [
                    2,
                    3,
                ],
                c: [],
            }
            """
        )
        assert CanonicalSerializer(PRETTY).serialize(tree) == expected

    def test_empty_block_stays_on_one_line(self) -> None:
        assert CanonicalSerializer(PRETTY).serialize(parse("Foo {}")) == "Foo {}"

    def test_zero_indent(self) -> None:
        serializer = CanonicalSerializer(NormalizeConfig(indent=0))
        assert serializer.serialize(parse("[1, 2]")) == "[\n1,\n2,\n]"

    def test_tail_follows_closing_delimiter(self) -> None:
        tree = parse('{Foo { a: 1 }: "foo"}')
        expected = _dedent(
            """
            {
                Foo {
                    a: 1,
                }: "foo",
            }
            """
        )
        assert CanonicalSerializer(PRETTY).serialize(tree) == expected


class TestNormalize:
    def test_default_is_compact_and_sorted(self) -> None:
        assert normalize(parse("[b, a]")) == "[a, b]"

    def test_compact_with_custom_separator(self) -> None:
        assert normalize(parse("[b, a]"), NormalizeConfig(separator=",")) == "[a,b]"

    def test_struct_with_hashmap_field(self) -> None:
        text = (
            'Foo { bar: Bar { count: {"lorem ipsum": Zed, "hello world": Zed},'
            " value: 200 } }"
        )
        expected = _dedent(
            """
            Foo {
                bar: Bar {
                    count: {
                        "hello world": Zed,
                        "lorem ipsum": Zed,
                    },
                    value: 200,
                },
            }
            """
        )
        assert normalize(parse(text), PRETTY) == expected

    def test_hashmap_with_struct_keys(self) -> None:
        text = (
            '{Foo { value: -2, bar: [] }: "foo2", '
            'Foo { value: 12, bar: [Bar { elo: 200 }, Bar { elo: -12 }] }: "foo"}'
        )
        expected = _dedent(
            """
            {
                Foo {
                    bar: [
                        Bar {
                            elo: -12,
                        },
                        Bar {
                            elo: 200,
                        },
                    ],
                    value: 12,
                }: "foo",
                Foo {
                    bar: [],
                    value: -2,
                }: "foo2",
            }
            """
        )
        assert normalize(parse(text), PRETTY) == expected

    def test_multi_line_output_is_stable(self) -> None:
        once = normalize(parse("{b: [2, 1], a: Some(x)}"), PRETTY)
        assert normalize(parse(once), PRETTY) == once


class TestTuples:
    def test_singleton_tuple_compact(self) -> None:
        assert CanonicalSerializer().serialize(parse("(1,)")) == "(1,)"

    def test_singleton_tuple_custom_separator(self) -> None:
        serializer = CanonicalSerializer(NormalizeConfig(separator=","))
        assert serializer.serialize(parse("[(1,), (2, 3)]")) == "[(1,),(2,3)]"

    def test_singleton_tuple_multi_line(self) -> None:
        assert CanonicalSerializer(PRETTY).serialize(parse("(1,)")) == "(\n    1,\n)"

    def test_parenthesized_value_multi_line(self) -> None:
        assert CanonicalSerializer(PRETTY).serialize(parse("(1)")) == "(\n    1\n)"

    def test_named_call_multi_line(self) -> None:
        tree = parse("Some(1)")
        assert CanonicalSerializer(PRETTY).serialize(tree) == "Some(\n    1,\n)"

    @pytest.mark.parametrize("text", ["(1,)", "(1)", "{'a': (1,)}", "Some(1)"])
    def test_layouts_round_trip(self, text: str) -> None:
        pretty = normalize(parse(text), PRETTY)
        assert normalize(parse(pretty)) == text


class TestTailGap:
    def test_compact(self) -> None:
        tree = parse('Foo {} "x"')
        assert CanonicalSerializer().serialize(tree) == 'Foo {} "x"'

    def test_multi_line(self) -> None:
        tree = parse('[Foo {a} "x"]')
        expected = _dedent(
            """
            [
                Foo {
                    a,
                } "x",
            ]
            """
        )
        assert CanonicalSerializer(PRETTY).serialize(tree) == expected


class TestDeepNesting:
    def test_compact_with_custom_separator(self) -> None:
        depth = 3000
        tree = parse("[" * depth + "1" + "]" * depth)
        serializer = CanonicalSerializer(NormalizeConfig(separator=","))
        assert serializer.serialize(tree) == "[" * depth + "1" + "]" * depth

    def test_multi_line(self) -> None:
        depth = 3000
        tree = parse("[" * depth + "]" * depth)
        text = CanonicalSerializer(NormalizeConfig(indent=0)).serialize(tree)
        assert text.count("\n") == 2 * (depth - 1)
