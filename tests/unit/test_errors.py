from core.errors import (
    STATUS_CODES,
    USER_MESSAGES,
    AuthenticationError,
    BadRequestError,
    ErrorCode,
    ItineraryError,
    NotFoundError,
    UnauthorizedError,
)


def test_all_error_codes_have_user_message():
    for code in ErrorCode:
        assert code in USER_MESSAGES


def test_all_error_codes_have_status_code():
    for code in ErrorCode:
        assert code in STATUS_CODES


def test_user_message_lookup():
    err = ItineraryError("connection reset by peer", code=ErrorCode.NOT_FOUND)
    assert err.user_message == "The requested item could not be found."


def test_subclasses_carry_default_code():
    assert UnauthorizedError("no user").code == ErrorCode.UNAUTHORIZED
    assert NotFoundError("Trip not found.").code == ErrorCode.NOT_FOUND
    assert BadRequestError("No updates provided.").code == ErrorCode.BAD_REQUEST
    assert AuthenticationError("bad token").code == ErrorCode.AUTH_FAILED
    assert ItineraryError("boom").code == ErrorCode.INTERNAL_ERROR


def test_explicit_code_overrides_default():
    err = AuthenticationError("expired", code=ErrorCode.INVALID_TOKEN)
    assert err.code == ErrorCode.INVALID_TOKEN
    assert err.user_message == USER_MESSAGES[ErrorCode.INVALID_TOKEN]


def test_status_codes():
    assert UnauthorizedError("x").status_code == 401
    assert NotFoundError("x").status_code == 404
    assert BadRequestError("x").status_code == 400
    assert ItineraryError("x").status_code == 500


def test_message_is_kept():
    err = NotFoundError("Trip not found.")
    assert err.message == "Trip not found."
    assert str(err) == "Trip not found."


def test_user_message_never_exposes_internal_message():
    internal = "SELECT * FROM trips WHERE user_id = 'secret'"
    err = ItineraryError(internal)
    assert internal not in err.user_message
