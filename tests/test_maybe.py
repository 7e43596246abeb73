from typing import Any

from pytest import mark
from purely import Applicable, Chainable, Mappable, Maybe, curry, match

cases = {
    "Just": lambda value: value,
    "Nothing": lambda: "default",
}


def double(value: int) -> int:
    return value * 2


def increment(value: int) -> int:
    return value + 1


def list_head(values: list[Any]) -> Maybe[Any]:
    return Maybe.Nothing() if len(values) == 0 else Maybe.Just(values[0])


def test_just() -> None:
    maybe = Maybe.Just(42)
    assert maybe.tag == "Just"
    assert maybe.args == (42,)


def test_nothing() -> None:
    maybe = Maybe.Nothing()
    assert maybe.tag == "Nothing"
    assert maybe.args == ()


def test_of_is_just() -> None:
    assert Maybe.of(3) == Maybe.Just(3)


def test_from_optional() -> None:
    assert Maybe.from_optional(None) == Maybe.Nothing()
    assert Maybe.from_optional(0) == Maybe.Just(0)


def test_is_just_and_is_nothing() -> None:
    assert Maybe.Just(1).is_just
    assert not Maybe.Just(1).is_nothing
    assert Maybe.Nothing().is_nothing
    assert not Maybe.Nothing().is_just


def test_match_just() -> None:
    assert match(Maybe.Just("Hello"), cases) == "Hello"


def test_match_nothing() -> None:
    assert match(Maybe.Nothing(), cases) == "default"


def test_map_just() -> None:
    assert Maybe.Just(10).map(double) == Maybe.Just(20)


def test_map_nothing() -> None:
    maybe = Maybe.Nothing()
    assert maybe.map(double) is maybe


def test_map_nothing_does_not_call_function() -> None:
    def fail(_: Any) -> Any:
        raise AssertionError("should not be called")

    assert Maybe.Nothing().map(fail) == Maybe.Nothing()


def test_chain_just() -> None:
    assert Maybe.Just([1, 2]).chain(list_head) == Maybe.Just(1)
    assert Maybe.Just([]).chain(list_head) == Maybe.Nothing()


def test_chain_nothing() -> None:
    maybe = Maybe.Nothing()
    assert maybe.chain(list_head) is maybe


def test_ap_just() -> None:
    assert Maybe.Just(double).ap(Maybe.Just(4)) == Maybe.Just(8)
    assert Maybe.Just(double).ap(Maybe.Nothing()) == Maybe.Nothing()


def test_ap_nothing() -> None:
    maybe = Maybe.Nothing()
    assert maybe.ap(Maybe.Just(4)) is maybe


def test_ap_lifts_curried_functions() -> None:
    add = curry(lambda a, b: a + b, 2)
    assert Maybe.of(add).ap(Maybe.Just(1)).ap(Maybe.Just(2)) == Maybe.Just(3)
    assert Maybe.of(add).ap(Maybe.Nothing()).ap(Maybe.Just(2)) == Maybe.Nothing()


def test_with_default() -> None:
    assert Maybe.Just(1).with_default(0) == 1
    assert Maybe.Nothing().with_default(0) == 0


@mark.parametrize("maybe", [Maybe.Just(3), Maybe.Nothing()])
def test_functor_identity(maybe: Maybe[int]) -> None:
    assert maybe.map(lambda x: x).equals(maybe)


@mark.parametrize("maybe", [Maybe.Just(3), Maybe.Nothing()])
def test_functor_composition(maybe: Maybe[int]) -> None:
    assert maybe.map(double).map(increment) == maybe.map(lambda x: increment(double(x)))


def test_capabilities() -> None:
    maybe = Maybe.Just(1)
    assert isinstance(maybe, Mappable)
    assert isinstance(maybe, Chainable)
    assert isinstance(maybe, Applicable)
