import pytest

from statetypes.rt import LogLevel, VMActor, is_singleton_actor


class _Actor(VMActor):
    def exports(self):
        return [None, self.code]

    def code(self):
        return "code"

    def state(self):
        return {}


class _Singleton(_Actor):
    def is_singleton(self):
        return True


class _NotSingleton(_Actor):
    def is_singleton(self):
        return False


class _AttributeOnly(_Actor):
    is_singleton = True


def test_actor_without_marker_is_not_singleton():
    assert is_singleton_actor(_Actor()) is False


def test_singleton_actor():
    assert is_singleton_actor(_Singleton()) is True


def test_actor_declining_singleton():
    assert is_singleton_actor(_NotSingleton()) is False


def test_non_callable_marker_is_ignored():
    assert is_singleton_actor(_AttributeOnly()) is False


def test_abstract_actor_cannot_be_instantiated():
    with pytest.raises(TypeError):
        VMActor()


@pytest.mark.parametrize(
    "value, expected",
    [(-1, LogLevel.DEBUG), (0, LogLevel.INFO), (1, LogLevel.WARN), (2, LogLevel.ERROR)],
)
def test_log_level_values(value, expected):
    assert LogLevel(value) == expected


def test_log_levels_ordered_by_importance():
    levels = [LogLevel(value) for value in (2, 0, -1, 1)]
    assert sorted(levels) == [
        LogLevel.DEBUG,
        LogLevel.INFO,
        LogLevel.WARN,
        LogLevel.ERROR,
    ]