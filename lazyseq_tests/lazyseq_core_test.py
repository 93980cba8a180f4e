import numpy as np
import suite
from counters import CountingSource, CallCounter
from dgen import from_schema
from lazyseq import (
    from_iterable, of, empty, singleton, concat, from_range,
    InvalidArgumentError, CastError,
    MappedSequence, FilteredSequence, CastSequence, SkipSequence, TakeSequence,
    FlattenedSequence, SortedSequence, GroupedSequence
)

assert_that = suite.assert_that
assert_raises = suite.assert_raises

person_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 1000}),
    'name': 'word',
    'age': ('pyint', {'min_value': 18, 'max_value': 65}),
    'department': {'_gen': 'choice', 'from': ['eng', 'sales', 'hr']},
}

numbers = from_iterable(range(1, 11))
mixed = from_iterable([1, 'hello', 2.5, True, None, [1, 2], 'world', 7])


# --- map ---

@suite.test("map applies the selector to every element in order")
def test_map_basic():
    squares = numbers.map(lambda x: x * x).to_list()
    assert_that(squares == [1, 4, 9, 16, 25, 36, 49, 64, 81, 100], "should square all numbers")


@suite.test("map matches a list comprehension over generated records")
def test_map_matches_comprehension():
    people = from_schema(person_schema, seed=7).take(25)
    names = people.map(lambda p: p['name'].upper()).to_list()
    assert_that(names == [p['name'].upper() for p in people.to_list()], "map should equal element-wise application")


@suite.test("map re-applies the selector on every traversal")
def test_map_reapplies():
    selector = CallCounter(lambda x: x + 1)
    mapped = of(1, 2, 3).map(selector)
    mapped.to_list()
    mapped.to_list()
    assert_that(selector.calls == 6, f"selector should run once per element per traversal, ran {selector.calls}")


# --- filter ---

@suite.test("filter keeps the matching sub-sequence in original order")
def test_filter_basic():
    assert_that(numbers.filter(lambda x: x % 2 == 0).to_list() == [2, 4, 6, 8, 10], "should keep even numbers")
    assert_that(numbers.filter(lambda x: x > 100).to_list() == [], "no matches should be empty")


@suite.test("filter over generated records agrees with a comprehension")
def test_filter_records():
    people = from_schema(person_schema, seed=42).take(40)
    seniors = people.filter(lambda p: p['department'] == 'eng' and p['age'] > 40).to_list()
    expected = [p for p in people.to_list() if p['department'] == 'eng' and p['age'] > 40]
    assert_that(seniors == expected, "filter should be an order-preserving sub-sequence")


@suite.test("filter buffers at most one element ahead")
def test_filter_lookahead():
    source = CountingSource([1, 2, 3, 4, 5, 6])
    cursor = from_iterable(source).filter(lambda x: x % 3 == 0).create_cursor()
    assert_that(cursor.has_next(), "there is a multiple of three")
    assert_that(source.pulled == 3, f"has_next should stop at the first match, pulled {source.pulled}")
    assert_that(cursor.next() == 3, "the buffered element should be returned")
    assert_that(source.pulled == 3, "next should not pull anything new")


# --- cast / of_class ---

@suite.test("of_class keeps only instances of the class")
def test_of_class():
    assert_that(mixed.of_class(str).to_list() == ['hello', 'world'], "should keep the strings")
    assert_that(mixed.of_class((list, float)).to_list() == [2.5, [1, 2]], "should accept a tuple of classes")
    # bool is a subclass of int
    assert_that(mixed.of_class(int).to_list() == [1, True, 7], "should keep ints and bools")


@suite.test("cast passes compatible elements through")
def test_cast_ok():
    assert_that(of(1, 2, 3).cast(int).to_list() == [1, 2, 3], "ints cast to int")


@suite.test("cast fails lazily, at the element that does not fit")
def test_cast_lazy_failure():
    casted = of(1, 'two', 3).cast(int)
    assert_that(casted.first().value == 1, "elements before the bad one are fine")
    error = assert_raises(CastError, casted.to_list, "full traversal should hit the bad element")
    assert_that(error.element == 'two', "the error should carry the offending element")
    assert_that(isinstance(error, TypeError), "cast errors are TypeErrors")


@suite.test("cast and of_class reject non-types at construction")
def test_cast_invalid_target():
    assert_raises(InvalidArgumentError, lambda: numbers.cast(None), "None is not a type")
    assert_raises(InvalidArgumentError, lambda: numbers.cast('int'), "a string is not a type")
    assert_raises(InvalidArgumentError, lambda: numbers.of_class(3), "an int is not a type")


# --- skip / take ---

@suite.test("skip and take select slices")
def test_skip_take_basic():
    assert_that(of(1, 2, 3, 4, 5).skip(1).take(2).to_list() == [2, 3], "skip 1 then take 2")
    assert_that(numbers.skip(20).to_list() == [], "skipping past the end is empty")
    assert_that(numbers.take(20).length() == 10, "taking past the end gives everything")
    assert_that(numbers.skip(0).to_list() == numbers.to_list(), "skip 0 is identity")
    assert_that(numbers.take(0).to_list() == [], "take 0 is empty")


@suite.test("take length is min(n, length) and take + skip reconstructs the source")
def test_skip_take_split():
    people = from_schema(person_schema, seed=3).take(12)
    for n in range(0, 15):
        assert_that(people.take(n).length() == min(n, 12), f"take({n}) length wrong")
        if n <= 12:
            rebuilt = people.take(n).to_list() + people.skip(n).to_list()
            assert_that(rebuilt == people.to_list(), f"split at {n} should rebuild the source")


@suite.test("take never pulls more than it yields")
def test_take_no_overpull():
    source = CountingSource(range(100))
    assert_that(from_iterable(source).take(3).to_list() == [0, 1, 2], "take 3")
    assert_that(source.pulled == 3, f"take(3) should pull 3 elements, pulled {source.pulled}")

    source = CountingSource(range(100), fail_after=0)
    assert_that(from_iterable(source).take(0).to_list() == [], "take(0) should never pull")


@suite.test("take stops an infinite source")
def test_take_infinite():
    def naturals():
        n = 0
        while True:
            yield n
            n += 1
    assert_that(from_iterable(naturals()).map(lambda x: x * 2).take(4).to_list() == [0, 2, 4, 6], "first four evens")


@suite.test("negative or non-int counts are rejected before any pull")
def test_skip_take_invalid():
    source = CountingSource([1, 2, 3], fail_after=0)
    sequence = from_iterable(source)
    assert_raises(InvalidArgumentError, lambda: sequence.skip(-1), "skip(-1) should fail")
    assert_raises(InvalidArgumentError, lambda: sequence.take(-1), "take(-1) should fail")
    assert_raises(InvalidArgumentError, lambda: sequence.take(1.5), "take(1.5) should fail")
    assert_raises(InvalidArgumentError, lambda: sequence.skip(True), "skip(True) should fail")
    assert_that(source.pulled == 0, "validation must not touch the source")


@suite.test("integer-like counts such as numpy ints are accepted")
def test_skip_take_numpy_counts():
    sequence = of(1, 2, 3, 4)
    assert_that(sequence.take(np.int64(2)).to_list() == [1, 2], "take with a numpy int")
    assert_that(sequence.skip(np.int32(3)).to_list() == [4], "skip with a numpy int")
    assert_that(from_range(0, np.int64(3)).to_list() == [0, 1, 2], "range with a numpy count")
    assert_raises(InvalidArgumentError, lambda: sequence.take(np.int64(-1)), "negative numpy counts still fail")


# --- flatten / flat_map / concat ---

@suite.test("concat chains sequences end to end")
def test_concat():
    assert_that(concat(singleton(1), singleton(2)).to_list() == [1, 2], "two singletons")
    assert_that(of(1, 2).concat(empty(), of(3), [4, 5]).to_list() == [1, 2, 3, 4, 5], "variadic concat with a list")
    assert_that(concat().to_list() == [], "concat of nothing is empty")
    assert_raises(InvalidArgumentError, lambda: of(1).concat(None), "None cannot be concatenated")


@suite.test("concat re-reads both parts on each traversal")
def test_concat_retraversal():
    left, right = CountingSource([1]), CountingSource([2])
    joined = concat(from_iterable(left), from_iterable(right))
    joined.to_list()
    joined.to_list()
    assert_that(left.opened == 2 and right.opened == 2, "both parts should be traversed twice")


@suite.test("flat_map maps to sequences and flattens")
def test_flat_map():
    result = of(1, 2, 3).flat_map(lambda x: from_range(0, x)).to_list()
    assert_that(result == [0, 0, 1, 0, 1, 2], f"unexpected flat_map result: {result}")
    nested = of([1, 2], [], [3]).flat_map(lambda xs: xs).to_list()
    assert_that(nested == [1, 2, 3], "plain lists are accepted as inner sequences")


@suite.test("flatten opens inner sequences only when reached")
def test_flatten_lazy():
    second = CountingSource([3, 4])
    flat = of(of(1, 2), from_iterable(second)).flatten()
    assert_that(flat.first().value == 1, "first should come from the first inner sequence")
    assert_that(second.opened == 0, "the second inner sequence should not be opened yet")
    assert_that(flat.to_list() == [1, 2, 3, 4], "full traversal reaches every inner sequence")


@suite.test("flatten skips empty inner sequences and fails on non-iterables")
def test_flatten_edges():
    assert_that(of(empty(), empty(), of(1)).flatten().to_list() == [1], "empty inners are skipped")
    assert_that(of('ab', 'c').flatten().to_list() == ['a', 'b', 'c'], "strings are iterables")
    assert_raises(CastError, of([1], 5).flatten().to_list, "an int is not an inner sequence")


# --- validation ---

@suite.test("missing functions are rejected at construction")
def test_missing_functions():
    source = CountingSource([1, 2, 3], fail_after=0)
    sequence = from_iterable(source)
    for build in (lambda: sequence.map(None),
                  lambda: sequence.filter(None),
                  lambda: sequence.flat_map(None),
                  lambda: sequence.map('not callable')):
        assert_raises(InvalidArgumentError, build, "construction should fail")
    assert_that(source.pulled == 0, "no element should be touched")


@suite.test("variants built directly reject a missing upstream")
def test_variants_require_upstream():
    identity = lambda x: x
    for build in (lambda: MappedSequence(None, identity),
                  lambda: FilteredSequence(None, identity),
                  lambda: CastSequence(None, int),
                  lambda: SkipSequence(None, 1),
                  lambda: TakeSequence(None, 1),
                  lambda: FlattenedSequence(None),
                  lambda: SortedSequence(None, lambda a, b: 0),
                  lambda: GroupedSequence(None, identity),
                  lambda: MappedSequence([1, 2], identity)):
        assert_raises(InvalidArgumentError, build, "a non-sequence upstream should fail at construction")
    assert_that(MappedSequence(of(1, 2), identity).to_list() == [1, 2], "a real upstream still works")


if __name__ == "__main__":
    suite.run(title="lazyseq core operations test suite")
