import copy
import pickle

from nullable_struct.option import (
    ABSENT,
    Absent,
    Present,
    is_absent,
    is_present,
    unwrap_or_else,
)


def test_absent_is_a_singleton():
    assert Absent() is ABSENT
    assert copy.deepcopy(ABSENT) is ABSENT
    assert pickle.loads(pickle.dumps(ABSENT)) is ABSENT


def test_absent_is_falsy_and_prints_as_absent():
    assert not ABSENT
    assert repr(ABSENT) == "ABSENT"


def test_present_compares_by_value():
    assert Present(1) == Present(1)
    assert Present(1) != Present(2)
    assert Present(0) != ABSENT
    assert repr(Present("a")) == "Present('a')"


def test_present_holding_falsy_value_is_still_present():
    assert is_present(Present(0))
    assert is_present(Present(None))
    assert not is_absent(Present(""))


def test_unwrap_or_else_only_calls_factory_when_absent():
    calls = []

    def factory():
        calls.append(1)
        return 42

    assert unwrap_or_else(Present(7), factory) == 7
    assert calls == []
    assert unwrap_or_else(ABSENT, factory) == 42
    assert calls == [1]
