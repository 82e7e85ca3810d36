"""Tests for attributes, lazy values and value resolution."""

from __future__ import annotations

from yadu.core.attr import BAD_KEY, EMPTY_ATTR, Attr, Group, Lazy, LogValuer, attrs_from, group, resolve


class Counter:
    def __init__(self, value: object = 7) -> None:
        self.calls = 0
        self.value = value

    def __call__(self) -> object:
        self.calls += 1
        return self.value


class Point:
    def log_value(self) -> str:
        return "(1, 2)"


class Loop:
    def log_value(self) -> Loop:
        return self


def test_resolve_plain_value_is_identity() -> None:
    obj = object()
    assert resolve(obj) is obj
    assert resolve(None) is None


def test_resolve_lazy_invokes_once() -> None:
    fn = Counter(42)
    assert resolve(Lazy(fn)) == 42
    assert fn.calls == 1


def test_resolve_prefers_log_value() -> None:
    assert isinstance(Point(), LogValuer)
    assert resolve(Point()) == "(1, 2)"


def test_resolve_leaves_classes_alone() -> None:
    """A class defining log_value is a value; only its instances are views."""
    assert resolve(Point) is Point
    assert resolve(Lazy(lambda: Point)) is Point


def test_resolve_follows_lazy_log_value_chain() -> None:
    """A lazy value producing a LogValuer resolves all the way down."""
    assert resolve(Lazy(Point)) == "(1, 2)"


def test_resolve_cuts_endless_log_value_chain() -> None:
    result = resolve(Loop())
    assert isinstance(result, str)
    assert result.startswith("!ERROR")
    assert "Loop" in result


def test_plain_callables_are_not_invoked() -> None:
    """Only Lazy marks a deferred value; other callables are values."""
    fn = Counter()
    assert resolve(fn) is fn
    assert fn.calls == 0


def test_drop_sentinel() -> None:
    assert EMPTY_ATTR.is_empty()
    assert Attr("", None).is_empty()
    assert not Attr("", Group()).is_empty()
    assert not Attr("x", None).is_empty()


def test_attrs_from_mixed_arguments() -> None:
    attrs = attrs_from("spawn", 199, Attr("alive", True), players=2)
    assert attrs == (Attr("spawn", 199), Attr("alive", True), Attr("players", 2))


def test_attrs_from_dangling_value() -> None:
    assert attrs_from("a", 1, "orphan") == (Attr("a", 1), Attr(BAD_KEY, "orphan"))
    assert attrs_from(3.5) == (Attr(BAD_KEY, 3.5),)


def test_group_helper() -> None:
    g = group("req", "method", "GET", status=200)
    assert g.key == "req"
    assert isinstance(g.value, Group)
    assert g.value.attrs == (Attr("method", "GET"), Attr("status", 200))
    assert len(group("empty").value) == 0
