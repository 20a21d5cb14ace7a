import pytest

from statetypes.exitcode import ExitCode, ExitCodeError, error_is, unwrap


def _wrap(msg, cause):
    err = RuntimeError(f"{msg}: {cause}")
    err.__cause__ = cause
    return err


@pytest.fixture
def errors():
    base = ValueError("base error")
    coded = ExitCode.ERR_FORBIDDEN.wrap("coded: %s", base)
    wrapped = _wrap("wrapper", coded)
    shadowed = ExitCode.ERR_ILLEGAL_STATE.wrap("shadow: %s", coded)
    return base, coded, wrapped, shadowed


def test_default(errors):
    base, _, _, _ = errors
    assert unwrap(base, ExitCode.OK) == ExitCode.OK
    assert unwrap(base, ExitCode.ERR_ILLEGAL_STATE) == ExitCode.ERR_ILLEGAL_STATE
    assert error_is(base, base)


def test_coded(errors):
    _, coded, wrapped, _ = errors
    assert unwrap(coded, ExitCode.OK) == ExitCode.ERR_FORBIDDEN
    assert error_is(wrapped, coded)
    assert not error_is(coded, wrapped)
    assert not error_is(wrapped, ExitCode.OK)


def test_wrapped(errors):
    _, coded, wrapped, _ = errors
    assert unwrap(wrapped, ExitCode.OK) == ExitCode.ERR_FORBIDDEN
    assert error_is(wrapped, coded)
    assert error_is(wrapped, wrapped)
    assert not error_is(wrapped, ExitCode.OK)


def test_shadowed(errors):
    _, _, _, shadowed = errors
    assert unwrap(shadowed, ExitCode.OK) == ExitCode.ERR_ILLEGAL_STATE
    assert error_is(shadowed, ExitCode.ERR_ILLEGAL_STATE)
    assert not error_is(shadowed, ExitCode.ERR_FORBIDDEN)


def test_wrapped_message_omits_code(errors):
    base, coded, _, shadowed = errors
    assert str(coded) == "coded: base error"
    assert coded.cause is base
    assert coded.__cause__ is base
    assert str(shadowed) == "shadow: coded: base error"


def test_error_reaches_base_through_chain(errors):
    base, coded, wrapped, _ = errors
    assert error_is(coded, base)
    assert error_is(wrapped, base)


def test_explicit_cause_and_raise():
    cause = KeyError("k")
    with pytest.raises(ExitCodeError) as info:
        raise ExitCode.ERR_NOT_FOUND.wrap("missing", cause=cause)
    assert info.value.exit_code == ExitCode.ERR_NOT_FOUND
    assert info.value.cause is cause
    assert unwrap(info.value, ExitCode.OK) == ExitCode.ERR_NOT_FOUND


def test_unwrap_bare_code():
    assert unwrap(ExitCode.ERR_NOT_FOUND, ExitCode.OK) == ExitCode.ERR_NOT_FOUND
    assert unwrap(None, ExitCode.ERR_SERIALIZATION) == ExitCode.ERR_SERIALIZATION


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "Ok(0)"),
        (1, "SysErrSenderInvalid(1)"),
        (15, "SysErrReserved6(15)"),
        (18, "18"),
    ],
)
def test_string_forms(value, expected):
    assert str(ExitCode(value)) == expected


def test_predicates():
    assert ExitCode.OK.is_success()
    assert not ExitCode.OK.is_error()
    assert ExitCode.ERR_ILLEGAL_ARGUMENT.is_error()
    assert ExitCode.SYS_ERR_SENDER_INVALID.is_send_failure()
    assert ExitCode.SYS_ERR_SENDER_STATE_INVALID.is_send_failure()
    assert not ExitCode.SYS_ERR_INVALID_METHOD.is_send_failure()
    assert not ExitCode.OK.is_send_failure()


def test_common_codes_follow_reserved_range():
    expected = [
        ExitCode.ERR_ILLEGAL_ARGUMENT,
        ExitCode.ERR_NOT_FOUND,
        ExitCode.ERR_FORBIDDEN,
        ExitCode.ERR_INSUFFICIENT_FUNDS,
        ExitCode.ERR_ILLEGAL_STATE,
        ExitCode.ERR_SERIALIZATION,
    ]
    common = [ExitCode(value) for value in range(16, 22)]
    assert common == expected
    assert ExitCode(16) == ExitCode.FIRST_ACTOR_ERROR_CODE
    assert all(code.is_error() for code in common)
    assert not any(code.is_send_failure() for code in common)
    assert ExitCode(32) == ExitCode.FIRST_ACTOR_SPECIFIC_EXIT_CODE
    assert common[-1] < ExitCode(32)