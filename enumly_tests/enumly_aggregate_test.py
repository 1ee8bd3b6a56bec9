import suite
from dgen import from_schema
from enumly import E, empty, Some, NOTHING, LazySequence, ArgumentError, ComparisonError

test = suite.test
assert_that = suite.assert_that
raises = suite.raises

words = E(['albatross', 'dog', 'horse'])


# --- reduce ---

@test("reduce folds left to right with a callable")
def test_reduce_callable():
    assert_that(E([1, 2, 3, 4]).reduce(lambda acc, x: acc + x) == Some(10), "sum without initial")
    assert_that(E([1, 2, 3, 4]).reduce(100, lambda acc, x: acc + x) == Some(110), "sum with initial")
    order = E(['a', 'b', 'c']).inject(lambda acc, x: f"({acc}{x})")
    assert_that(order == Some('((ab)c)'), "folding goes left to right")


@test("reduce accepts operator symbols and method names")
def test_reduce_symbols():
    assert_that(E([1, 2, 3, 4]).reduce('*') == Some(24), "product")
    assert_that(E([10, 3]).reduce(100, '-') == Some(87), "subtraction with initial")
    assert_that(E([{1}, {2}]).reduce('union') == Some({1, 2}), "method name called on the accumulator")


@test("reduce on empty and single-element sources")
def test_reduce_edges():
    calls = []
    op = lambda acc, x: calls.append((acc, x)) or acc + x
    assert_that(empty().reduce(op) == NOTHING, "empty without initial is Nothing")
    assert_that(empty().reduce(5, op) == Some(5), "empty with initial is the initial value")
    assert_that(E(['only']).reduce(op) == Some('only'), "a single element comes back untouched")
    assert_that(calls == [], "the operator never runs in these cases")


@test("reduce validates its arguments")
def test_reduce_arguments():
    with raises(ArgumentError):
        E([1]).reduce()
    with raises(ArgumentError):
        E([1]).reduce(0, '+', 'extra')
    with raises(ArgumentError):
        E([1]).reduce(0, 42)


# --- min / max ---

@test("min and max use natural order by default")
def test_min_max_natural():
    assert_that(words.min() == Some('albatross'), "lexicographic minimum")
    assert_that(words.max() == Some('horse'), "lexicographic maximum")
    assert_that(empty().min() == NOTHING and empty().max() == NOTHING, "empty has no extrema")


@test("min and max accept a comparator")
def test_min_max_comparator():
    by_length = lambda a, b: len(a) - len(b)
    assert_that(words.min(by_length) == Some('dog'), "shortest word")
    assert_that(words.max(by_length) == Some('albatross'), "longest word")


@test("min and max keep the earliest of equal elements")
def test_min_max_ties():
    by_length = lambda a, b: len(a) - len(b)
    tied = E(['bb', 'aa', 'cc'])
    assert_that(tied.min(by_length) == Some('bb'), "earliest minimum wins")
    assert_that(tied.max(by_length) == Some('bb'), "earliest maximum wins")


@test("min and max fail on incomparable elements")
def test_min_max_errors():
    with raises(ComparisonError) as caught:
        E([1, 'a']).min()
    assert_that('str' in str(caught['error']) and 'int' in str(caught['error']), "error should name both types")
    with raises(ComparisonError):
        E([1, 2]).max(lambda a, b: None)


# --- min_by / max_by ---

@test("min_by and max_by compare projections")
def test_min_by_max_by():
    assert_that(words.min_by(len) == Some('dog'), "shortest")
    assert_that(words.max_by(len) == Some('albatross'), "longest")
    assert_that(empty().min_by(len) == NOTHING, "empty is Nothing")


@test("min_by and max_by keep the earliest on ties")
def test_by_ties():
    tied = E(['aa', 'b', 'cc', 'd'])
    assert_that(tied.max_by(len) == Some('aa'), "first of the longest")
    assert_that(tied.min_by(len) == Some('b'), "first of the shortest")


@test("min_by calls the projection once per element")
def test_min_by_calls():
    calls = []
    key = lambda w: calls.append(w) or len(w)
    words.min_by(key)
    assert_that(calls == ['albatross', 'dog', 'horse'], "one call per element, in order")


@test("min_by on records")
def test_min_by_records():
    schema = {'name': 'word', 'salary': ('pyint', {'min_value': 30000, 'max_value': 150000})}
    people = from_schema(schema, seed=5).take(25)
    lowest = people.min_by(lambda p: p['salary']).unwrap()
    assert_that(all(lowest['salary'] <= p['salary'] for p in people), "no salary below the minimum")


@test("min_by without a projection defers")
def test_min_by_deferred():
    handle = words.max_by()
    assert_that(isinstance(handle, LazySequence), "should return a lazy handle")
    assert_that(handle.drive(len) == Some('albatross'), "driving supplies the projection")


# --- minmax / minmax_by ---

@test("minmax finds both extremes in one pass")
def test_minmax():
    assert_that(words.minmax() == (Some('albatross'), Some('horse')), "natural order")
    by_length = lambda a, b: len(a) - len(b)
    assert_that(words.minmax(by_length) == (Some('dog'), Some('albatross')), "by comparator")
    assert_that(empty().minmax() == (NOTHING, NOTHING), "empty gives two Nothings")
    assert_that(E([7]).minmax() == (Some(7), Some(7)), "single element is both")


@test("minmax_by finds both extremes by projection")
def test_minmax_by():
    assert_that(words.minmax_by(len) == (Some('dog'), Some('albatross')), "by length")
    tied = E(['aa', 'b', 'cc', 'd'])
    assert_that(tied.minmax_by(len) == (Some('b'), Some('aa')), "earliest wins both ties")


if __name__ == "__main__":
    suite.run(title="enumly aggregate test suite")
