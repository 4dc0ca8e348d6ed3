"""Property-based tests for the rule algebra laws."""

from hypothesis import given
from hypothesis import strategies as st

from rulekit import Invalid, combine_all, valid

errors = st.lists(st.text(max_size=5) | st.integers(), min_size=1, max_size=4)
rules = st.one_of(st.just(valid()), errors.map(lambda es: Invalid(tuple(es))))


@given(rules)
def test_and_identity(a):
    assert a.and_(valid()) == a
    assert valid().and_(a) == a


@given(rules, rules, rules)
def test_and_associative(a, b, c):
    assert a.and_(b).and_(c) == a.and_(b.and_(c))


@given(rules, rules, rules)
def test_or_associative(a, b, c):
    assert a.or_(b).or_(c) == a.or_(b.or_(c))


@given(errors, errors)
def test_and_concatenates(left, right):
    combined = Invalid(tuple(left)).and_(Invalid(tuple(right)))
    assert list(combined.errors) == left + right


@given(rules)
def test_or_with_valid(a):
    assert valid().or_(a) == valid()
    assert a.or_(valid()) == valid()


@given(st.lists(rules, max_size=6))
def test_combine_all_is_left_fold(items):
    expected = valid()
    for item in items:
        expected = expected & item
    assert combine_all(items) == expected
    assert list(combine_all(items).errors) == [e for r in items for e in r.errors]


@given(rules)
def test_predicates_exclusive(a):
    assert a.is_valid() != a.is_invalid()
    assert a.is_valid() == (a.errors == ())
