import pytest

from op_rpc_types.errors import SuperchainDAError, SuperchainDAException


@pytest.mark.parametrize(
    "code, member",
    [
        (-320400, SuperchainDAError.UNINITIALIZED_CHAIN_DATABASE),
        (-320500, SuperchainDAError.SKIPPED_DATA),
        (-320501, SuperchainDAError.UNKNOWN_CHAIN),
        (-320600, SuperchainDAError.CONFLICTING_DATA),
        (-320601, SuperchainDAError.INEFFECTIVE_DATA),
        (-320900, SuperchainDAError.OUT_OF_ORDER),
        (-320901, SuperchainDAError.AWAITING_REPLACEMENT),
        (-321100, SuperchainDAError.OUT_OF_SCOPE),
        (-321200, SuperchainDAError.NO_PARENT_FOR_FIRST_BLOCK),
        (-321401, SuperchainDAError.FUTURE_DATA),
        (-321500, SuperchainDAError.MISSED_DATA),
        (-321501, SuperchainDAError.DATA_CORRUPTION),
    ],
)
def test_from_code(code, member):
    assert SuperchainDAError.from_code(code) is member
    assert int(member) == code


@pytest.mark.parametrize("bad", [0, -320402, -321402, 320400, "x", True])
def test_from_unknown_code_raises(bad):
    with pytest.raises(ValueError):
        SuperchainDAError.from_code(bad)


def test_messages():
    assert SuperchainDAError.UNKNOWN_CHAIN.message() == "unsupported chain id"
    assert (
        SuperchainDAError.DATA_CORRUPTION.message()
        == "underlying database has I/O issues or is corrupted"
    )
    assert str(SuperchainDAError.OUT_OF_ORDER) == "data is out of order (too old or new)"


@pytest.mark.parametrize(
    "code",
    [
        -320400,
        -320500,
        -320501,
        -320600,
        -320601,
        -320900,
        -320901,
        -321100,
        -321200,
        -321401,
        -321500,
        -321501,
    ],
)
def test_message_is_non_empty(code):
    message = SuperchainDAError.from_code(code).message()
    assert len(message) > 0


def test_every_member_has_a_distinct_message():
    codes = [
        -320400,
        -320500,
        -320501,
        -320600,
        -320601,
        -320900,
        -320901,
        -321100,
        -321200,
        -321401,
        -321500,
        -321501,
    ]
    messages = [SuperchainDAError.from_code(code).message() for code in codes]
    assert len(set(messages)) == 12


@pytest.mark.parametrize("member", list(SuperchainDAError))
def test_rpc_error_round_trip(member):
    obj = member.to_rpc_error()
    assert obj["message"] == member.message()
    assert SuperchainDAError.from_code(obj["code"]) is member


def test_to_exception():
    exc = SuperchainDAError.FUTURE_DATA.to_exception()
    assert isinstance(exc, SuperchainDAException)
    assert exc.error is SuperchainDAError.FUTURE_DATA
    assert exc.code == -321401
    assert str(exc) == "data is not yet available (from the future)"


def test_exception_can_be_raised_and_caught():
    exc = SuperchainDAError.SKIPPED_DATA.to_exception()
    assert exc.code == -320500
    with pytest.raises(SuperchainDAException) as info:
        raise exc
    assert info.value.code == -320500
    assert str(info.value) == "data was skipped or pruned and is not available"