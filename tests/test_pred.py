from mill import Pred, all_of, any_of, not_, pred


def is_even(n: int) -> bool:
    return n % 2 == 0


def is_positive(n: int) -> bool:
    return n > 0


def test_pred_is_callable_with_filter():
    assert list(filter(Pred(is_even), range(5))) == [0, 2, 4]


def test_pred_lifts_plain_functions_once():
    wrapped = pred(is_even)
    assert pred(wrapped) is wrapped


def test_operators():
    even = pred(is_even)
    assert [n for n in range(-3, 4) if (even & is_positive)(n)] == [2]
    assert [n for n in range(-3, 4) if (even | is_positive)(n)] == [-2, 0, 1, 2, 3]
    assert [n for n in range(-3, 4) if (~even)(n)] == [-3, -1, 1, 3]


def test_named_combinators():
    even = pred(is_even)
    assert even.and_(is_positive)(4)
    assert even.or_(is_positive)(3)
    assert even.negate()(3)


def test_short_circuit():
    calls = []

    def tracked(n):
        calls.append(n)
        return True

    assert not (Pred(is_even) & tracked)(1)
    assert (Pred(is_even) | tracked)(2)
    assert calls == []


def test_all_any_not():
    assert all_of(is_even, is_positive)(2)
    assert not all_of(is_even, is_positive)(-2)
    assert all_of()(7)
    assert any_of(is_even, is_positive)(-2)
    assert not any_of()(7)
    assert not_(is_even)(1)
