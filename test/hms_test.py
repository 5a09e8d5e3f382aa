import pytest

from duration_utils import (
    Duration, OutOfRangeError,
    from_hms, from_hms_opt, from_hms_milli, from_hms_milli_opt, from_hms_micro, from_hms_micro_opt,
    from_hms_nano, from_hms_nano_opt,
)


@pytest.mark.parametrize("h", [0, 1, 23, 100, 10_000])
@pytest.mark.parametrize("m", [0, 1, 30, 59])
@pytest.mark.parametrize("s", [0, 1, 45, 59])
def test_from_hms_total(h, m, s):
    d = from_hms(h, m, s)
    assert d.secs == h * 3600 + m * 60 + s
    assert d.nanos == 0
    assert from_hms_opt(h, m, s) == d


def test_from_hms_opt_bounds():
    assert from_hms_opt(0, 60, 0) is None
    assert from_hms_opt(0, 0, 60) is None
    assert from_hms_opt(0, -1, 0) is None
    assert from_hms_opt(0, 0, -1) is None
    assert from_hms_opt(-1, 0, 0) is None
    assert from_hms_opt(0, 0, 1.5) is None
    assert from_hms_opt(True, 0, 0) is None

    with pytest.raises(OutOfRangeError):
        from_hms(0, 60, 0)
    with pytest.raises(OutOfRangeError):
        from_hms(0, 0, 60)


def test_from_hms_huge_hours():
    assert from_hms_opt(2**64, 0, 0) is None
    with pytest.raises(OutOfRangeError):
        from_hms(2**64, 0, 0)


def test_sub_second_constructors():
    assert from_hms_milli(1, 2, 3, 456) == Duration(3723, 456_000_000)
    assert from_hms_micro(1, 2, 3, 456) == Duration(3723, 456_000)
    assert from_hms_nano(1, 2, 3, 456) == Duration(3723, 456)

    assert from_hms_milli_opt(0, 0, 59, 999) == Duration(59, 999_000_000)
    assert from_hms_micro_opt(0, 0, 59, 999_999) == Duration(59, 999_999_000)
    assert from_hms_nano_opt(0, 0, 59, 999_999_999) == Duration(59, 999_999_999)


@pytest.mark.parametrize("opt_func, func, limit", [
    (from_hms_milli_opt, from_hms_milli, 1_000),
    (from_hms_micro_opt, from_hms_micro, 1_000_000),
    (from_hms_nano_opt, from_hms_nano, 1_000_000_000),
])
def test_sub_second_bounds(opt_func, func, limit):
    assert opt_func(0, 0, 0, limit) is None
    assert opt_func(0, 0, 0, -1) is None
    assert opt_func(0, 60, 0, 0) is None
    assert opt_func(0, 0, 60, 0) is None
    assert opt_func(0, 0, 0, limit - 1) is not None

    with pytest.raises(OutOfRangeError):
        func(0, 0, 0, limit)
    with pytest.raises(OutOfRangeError):
        func(0, 0, 60, 0)
