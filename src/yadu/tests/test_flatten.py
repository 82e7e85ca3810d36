"""Tests for attribute flattening and bound-attribute merging."""

from __future__ import annotations

from yadu.core.attr import EMPTY_ATTR, Attr, Lazy, group
from yadu.core.flatten import flatten, merge


def test_scalars() -> None:
    assert flatten([Attr("a", 1), Attr("b", "x")]) == {"a": 1, "b": "x"}


def test_duplicate_key_last_wins() -> None:
    assert flatten([Attr("a", 1), Attr("a", 2)]) == {"a": 2}


def test_empty_group_is_dropped() -> None:
    assert flatten([group("g"), Attr("a", 1)]) == {"a": 1}
    assert flatten([group("")]) == {}


def test_named_group_nests() -> None:
    assert flatten([group("g", Attr("k", "v"), group("n", x=1))]) == {"g": {"k": "v", "n": {"x": 1}}}


def test_inline_group_merges_into_parent() -> None:
    attrs = [Attr("a", 0), group("", a=1, b=2), Attr("c", 3)]
    assert flatten(attrs) == {"a": 1, "b": 2, "c": 3}


def test_lazy_values_resolve_once() -> None:
    calls: list[int] = []

    def compute() -> int:
        calls.append(1)
        return 5

    assert flatten([Attr("n", Lazy(compute))]) == {"n": 5}
    assert calls == [1]


def test_lazy_group() -> None:
    assert flatten([Attr("g", Lazy(lambda: group("", x=1).value))]) == {"g": {"x": 1}}


def test_replace_hook_sees_group_path() -> None:
    seen: list[tuple[tuple[str, ...], str]] = []

    def hook(groups: tuple[str, ...], a: Attr) -> Attr:
        seen.append((groups, a.key))
        return a

    flatten([Attr("x", 1), group("outer", Attr("y", 2), group("inner", z=3)), group("", w=4)], ("req",), hook)
    assert seen == [
        (("req",), "x"),
        (("req", "outer"), "y"),
        (("req", "outer", "inner"), "z"),
        (("req",), "w"),
    ]


def test_replace_hook_drops_and_rewrites() -> None:
    def hook(groups: tuple[str, ...], a: Attr) -> Attr | None:
        if a.key == "password":
            return EMPTY_ATTR
        if a.key == "token":
            return None
        if a.key == "user":
            return Attr("login", a.value.upper())
        return a

    out = flatten([Attr("password", "hunter2"), Attr("token", "t"), Attr("user", "bob"), Attr("ok", True)], replace=hook)
    assert out == {"login": "BOB", "ok": True}


def test_rewritten_value_is_resolved() -> None:
    out = flatten([Attr("a", 1)], replace=lambda g, a: Attr(a.key, Lazy(lambda: "late")))
    assert out == {"a": "late"}


def test_replace_hook_receives_resolved_value() -> None:
    got: list[object] = []
    flatten([Attr("a", Lazy(lambda: 9))], replace=lambda g, a: got.append(a.value) or a)
    assert got == [9]


def test_named_group_emptied_by_hook_stays() -> None:
    """Only groups without children are dropped; a group whose children were all dropped remains."""
    assert flatten([group("g", secret=1)], replace=lambda g, a: None) == {"g": {}}


def test_groups_argument_is_not_mutated() -> None:
    groups = ("a",)
    flatten([group("b", c=1)], groups, lambda g, a: a)
    assert groups == ("a",)


def test_merge_later_wins_and_recurses() -> None:
    base = {"db": {"host": "a", "port": 1}, "user": "alice"}
    update = {"db": {"port": 5}, "user": "bob", "extra": True}
    merged = merge(base, update)
    assert merged == {"db": {"host": "a", "port": 5}, "user": "bob", "extra": True}
    assert base == {"db": {"host": "a", "port": 1}, "user": "alice"}


def test_merge_scalar_replaces_mapping() -> None:
    assert merge({"a": {"b": 1}}, {"a": 2}) == {"a": 2}
    assert merge({"a": 2}, {"a": {"b": 1}}) == {"a": {"b": 1}}
