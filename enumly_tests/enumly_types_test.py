import math
import numpy as np
import suite
from enumly import (
    Option, Some, Nothing, NOTHING, Comparable, compare, sign, configure, get_settings,
    from_range, repeat, generate, empty, E,
    EnumerationError, ArgumentError, ComparisonError, TypeCoercionError
)
from enumly.errors import coerce_count

test = suite.test
assert_that = suite.assert_that
raises = suite.raises


# --- option ---

@test("Some and Nothing compare by value")
def test_option_equality():
    assert_that(Some(1) == Some(1) and Some(1) != Some(2), "Some compares its value")
    assert_that(Nothing() == NOTHING, "every Nothing is equal")
    assert_that(Some(None) != NOTHING, "Some(None) is a value")
    assert_that(len({Some(1), Some(1), NOTHING, Nothing()}) == 2, "hashable")


@test("Option accessors")
def test_option_accessors():
    assert_that(Some(0).unwrap() == 0 and Some(0).get(5) == 0, "Some gives its value")
    assert_that(NOTHING.get(5) == 5 and NOTHING.get() is None, "Nothing gives the default")
    assert_that(NOTHING.or_else(lambda: 'x') == 'x', "or_else runs the fallback")
    assert_that(Some(2).map(lambda x: x * 3) == Some(6), "map applies to Some")
    assert_that(NOTHING.map(lambda x: x * 3) == NOTHING, "map skips Nothing")
    assert_that(bool(Some(False)) and not bool(NOTHING), "truthiness means presence")
    assert_that(NOTHING.is_none and Some(1).is_some, "flags")
    with raises(ValueError):
        NOTHING.unwrap()


@test("Option itself is abstract")
def test_option_abstract():
    with raises(TypeError):
        Option()
    assert_that(isinstance(Some(1), Option) and isinstance(NOTHING, Option), "both results are Options")


# --- errors ---

@test("error classes fit python's hierarchy")
def test_error_hierarchy():
    assert_that(issubclass(ArgumentError, ValueError), "ArgumentError is a ValueError")
    assert_that(issubclass(ComparisonError, TypeError), "ComparisonError is a TypeError")
    assert_that(issubclass(TypeCoercionError, TypeError), "TypeCoercionError is a TypeError")
    for error in (ArgumentError, ComparisonError, TypeCoercionError):
        assert_that(issubclass(error, EnumerationError), f"{error.__name__} shares the base class")


@test("coerce_count accepts integral values")
def test_coerce_count():
    assert_that(coerce_count(3) == 3, "int")
    assert_that(coerce_count(np.int64(4)) == 4, "numpy integer")
    assert_that(coerce_count(2.7) == 2 and coerce_count(-2.7) == -2, "floats truncate toward zero")
    for bad in (True, '3', None, math.nan, math.inf, [1]):
        with raises(TypeCoercionError):
            coerce_count(bad)


# --- ordering ---

@test("compare gives a natural three-way order")
def test_compare():
    assert_that(compare(1, 2) == -1 and compare(2, 1) == 1 and compare(2, 2) == 0, "numbers")
    assert_that(compare('a', 'b') == -1, "strings")
    assert_that(compare(1, 1.0) == 0, "mixed numeric types")
    assert_that(compare(None, None) == 0, "equal values are ordered even without <")
    with raises(ComparisonError) as caught:
        compare(None, 1)
    assert_that(caught['error'].left_type is type(None), "error keeps the operand types")
    with raises(ComparisonError):
        compare({1}, {2})


@test("compare defers to Comparable")
def test_compare_comparable():
    class Reversed(Comparable):
        def __init__(self, n):
            self.n = n

        def compare_to(self, other):
            return other.n - self.n

    assert_that(compare(Reversed(1), Reversed(2)) == 1, "reversed order")
    assert_that(E([Reversed(1), Reversed(3), Reversed(2)]).max().unwrap().n == 1, "max uses compare_to")


@test("sign normalizes comparator results")
def test_sign():
    assert_that(sign(-42) == -1 and sign(0.0) == 0 and sign(7) == 1, "numbers")
    assert_that(sign(True) == 1, "booleans are numbers")
    for bad in (None, 'x', math.nan):
        with raises(ComparisonError):
            sign(bad, 1, 2)


# --- factories ---

@test("factory sources")
def test_factories():
    assert_that(from_range(5, 3).to_a() == [5, 6, 7], "range")
    assert_that(repeat('x', 3).to_a() == ['x', 'x', 'x'], "bounded repeat")
    assert_that(repeat('x', 2).to_a() == repeat('x', 2).to_a(), "repeat can be traversed again")
    counter = iter(range(100))
    gen = generate(lambda: next(counter), 3)
    assert_that(gen.to_a() == [0, 1, 2] and gen.to_a() == [3, 4, 5], "generate calls the function per traversal")
    assert_that(generate(lambda: 1).take(4) == [1, 1, 1, 1], "endless generate")
    assert_that(empty().to_a() == [], "empty")


@test("iterable sources are single-pass when their iterable is")
def test_single_pass_source():
    once = E(x for x in [1, 2, 3])
    assert_that(once.to_a() == [1, 2, 3], "first pass sees everything")
    assert_that(once.to_a() == [], "second pass sees nothing")


# --- settings ---

@test("configure validates names and returns the previous settings")
def test_configure():
    with raises(ArgumentError):
        configure(no_such_setting=1)
    before = get_settings()
    previous = configure(log_deferred=True)
    try:
        assert_that(previous == before, "previous settings returned")
        assert_that(get_settings().log_deferred is True, "change applied")
    finally:
        configure(log_deferred=previous.log_deferred)
    assert_that(get_settings() == before, "restored")


if __name__ == "__main__":
    suite.run(title="enumly types, errors and settings test suite")
