from datetime import date

import pytest

from mill import InvalidRangeError, by_accessor, by_key, by_ordering, joining

from .data import ALICE, INDEPENDENCE_DAY, JANE, WANDA, Holiday


def by_length(a: str, b: str) -> int:
    return len(a) - len(b)


def render(items) -> str:
    return joining(", ")(items)


# ============================================================================
# by_ordering / by_key
# ============================================================================


def test_comparator_greater_than(birthdays):
    older_than_alice = by_ordering(lambda a, b: (a.birthday > b.birthday) - (a.birthday < b.birthday))
    assert render(filter(older_than_alice.is_greater_than(ALICE), birthdays)) == "Jane: 01/12, Wanda: 08/11"


def test_key_greater_than(birthdays):
    assert render(filter(by_key(lambda b: b.birthday).is_greater_than(ALICE), birthdays)) == "Jane: 01/12, Wanda: 08/11"


def test_key_less_than(holidays):
    before = by_key(lambda h: h.date).is_less_than(INDEPENDENCE_DAY)
    assert render(filter(before, holidays)) == "2018-01-01, 2018-05-28"


def test_key_less_than_or_equal_to(holidays):
    before = by_key(lambda h: h.date).is_less_than_or_equal_to(INDEPENDENCE_DAY)
    assert render(filter(before, holidays)) == "2018-01-01, 2018-05-28, 2018-07-04"


def test_key_greater_than_or_equal_to(holidays):
    after = by_key(lambda h: h.date).is_greater_than_or_equal_to(INDEPENDENCE_DAY)
    assert render(filter(after, holidays)) == "2018-07-04, 2018-09-03, 2018-11-22, 2018-11-23, 2018-12-24, 2018-12-25"


def test_key_closed_range(birthdays):
    born = by_key(lambda b: b.birthday)
    assert render(filter(born.is_in_range_closed(ALICE, JANE), birthdays)) == "Alice: 05/24, Jane: 01/12"


def test_key_open_range(birthdays):
    born = by_key(lambda b: b.birthday)
    assert render(filter(born.is_in_range_open(ALICE, WANDA), birthdays)) == "Jane: 01/12"
    assert render(filter(born.is_between(ALICE, WANDA), birthdays)) == "Jane: 01/12"


@pytest.mark.parametrize("method", ["is_in_range_open", "is_in_range_closed", "is_between"])
def test_key_inverted_range_is_rejected(method):
    with pytest.raises(InvalidRangeError) as exc_info:
        getattr(by_key(lambda b: b.birthday), method)(JANE, ALICE)
    assert exc_info.value.low is JANE
    assert exc_info.value.high is ALICE


def test_comparator_ranges():
    words = ["a", "bb", "ccc", "dddd", "eeeee"]
    lengths = by_ordering(by_length)
    assert [w for w in words if lengths.is_in_range_open("xx", "yyyy")(w)] == ["ccc"]
    assert [w for w in words if lengths.is_between("xx", "yyyy")(w)] == ["ccc"]
    assert [w for w in words if lengths.is_in_range_closed("xx", "yyyy")(w)] == ["bb", "ccc", "dddd"]


@pytest.mark.parametrize("method", ["is_in_range_open", "is_in_range_closed", "is_between"])
def test_comparator_inverted_range_is_rejected(method):
    with pytest.raises(InvalidRangeError):
        getattr(by_ordering(by_length), method)("yyyy", "x")


def test_comparator_is_fed_none_as_is():
    with pytest.raises(TypeError):
        by_ordering(by_length).is_less_than("abc")(None)


# ============================================================================
# by_accessor
# ============================================================================


def test_accessor_greater_than(holidays):
    upcoming = by_accessor(lambda h: h.date).is_greater_than(date(2018, 7, 4))
    assert render(filter(upcoming, holidays)) == "2018-09-03, 2018-11-22, 2018-11-23, 2018-12-24, 2018-12-25"


def test_accessor_less_than_to_empty(holidays):
    assert render(filter(by_accessor(lambda h: h.date).is_less_than(date(2018, 1, 1)), holidays)) == ""


def test_accessor_composed(holidays):
    when = by_accessor(lambda h: h.date)
    january_or_december = when.is_greater_than_or_equal_to(date(2018, 12, 1)) | when.is_less_than_or_equal_to(
        date(2018, 1, 31)
    )
    assert render(filter(january_or_december, holidays)) == "2018-01-01, 2018-12-24, 2018-12-25"


def test_accessor_between(birthdays):
    younger = by_accessor(lambda b: b.birthday).is_between(date(1990, 1, 1), date(2020, 1, 1))
    assert render(filter(younger, birthdays)) == "Jane: 01/12, Wanda: 08/11"


def test_accessor_closed_range_includes_endpoints(holidays):
    autumn = by_accessor(lambda h: h.date).is_in_range_closed(date(2018, 9, 3), date(2018, 11, 22))
    assert render(filter(autumn, holidays)) == "2018-09-03, 2018-11-22"


def test_accessor_open_range_excludes_endpoints(holidays):
    autumn = by_accessor(lambda h: h.date).is_in_range_open(date(2018, 9, 3), date(2018, 11, 23))
    assert render(filter(autumn, holidays)) == "2018-11-22"


@pytest.mark.parametrize(
    ("method", "args"),
    [
        ("is_greater_than", (date(2000, 1, 1),)),
        ("is_less_than", (date(2100, 1, 1),)),
        ("is_greater_than_or_equal_to", (date(2000, 1, 1),)),
        ("is_less_than_or_equal_to", (date(2100, 1, 1),)),
        ("is_in_range_open", (date(2000, 1, 1), date(2100, 1, 1))),
        ("is_in_range_closed", (date(2000, 1, 1), date(2100, 1, 1))),
        ("is_between", (date(2000, 1, 1), date(2100, 1, 1))),
    ],
)
def test_accessor_none_projection_never_matches(method, args):
    predicate = getattr(by_accessor(lambda h: h.date), method)(*args)
    assert predicate(Holiday(None)) is False
    assert predicate(Holiday(date(2018, 7, 4))) is True


@pytest.mark.parametrize("method", ["is_in_range_open", "is_in_range_closed", "is_between"])
def test_accessor_inverted_range_raises_before_evaluating(method):
    calls = []

    def accessor(h):
        calls.append(h)
        return h.date

    with pytest.raises(InvalidRangeError):
        getattr(by_accessor(accessor), method)(date(2018, 12, 31), date(2018, 1, 1))
    assert calls == []


def test_accessor_equaling(holidays):
    assert render(filter(by_accessor(lambda h: h.date).equaling(date(2018, 7, 4)), holidays)) == "2018-07-04"
    assert by_accessor(lambda h: h.date).equaling(None)(Holiday(None))


def test_accessor_errors_surface_at_evaluation():
    predicate = by_accessor(lambda h: h.missing).is_greater_than(0)
    with pytest.raises(AttributeError):
        predicate(Holiday(date(2018, 1, 1)))


class Version:
    """Orderable through `<` and `>` only."""

    def __init__(self, number: int) -> None:
        self.number = number

    def __lt__(self, other: "Version") -> bool:
        return self.number < other.number

    def __gt__(self, other: "Version") -> bool:
        return self.number > other.number


def test_accessor_ranges_need_only_strict_comparisons():
    releases = [Version(n) for n in range(1, 6)]
    version = by_accessor(lambda v: v)
    assert [v.number for v in releases if version.is_in_range_closed(Version(2), Version(4))(v)] == [2, 3, 4]
    assert [v.number for v in releases if version.is_in_range_open(Version(2), Version(4))(v)] == [3]
    assert [v.number for v in releases if version.is_greater_than_or_equal_to(Version(4))(v)] == [4, 5]
