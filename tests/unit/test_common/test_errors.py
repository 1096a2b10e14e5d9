from hotel_listing.common.errors import (
    BadRequestError,
    ConcurrencyConflictError,
    NotFoundError,
    ValidationFailedError,
)


def test_not_found_message():
    err = NotFoundError("Hotel", 7)
    assert err.status_code == 404
    assert err.message == "Hotel with id (7) was not found"
    assert err.to_dict() == {
        "error": {
            "message": "Hotel with id (7) was not found",
            "type": "not_found_error",
            "code": "not_found",
            "details": {"entity": "Hotel", "key": 7},
        }
    }


def test_to_dict_without_details():
    err = NotFoundError("Hotel", 7)
    assert "details" not in err.to_dict(include_details=False)["error"]


def test_validation_failed_carries_all_errors():
    errors = [
        {"code": "PasswordTooShort", "description": "Passwords must be at least 6 characters."},
        {"code": "PasswordRequiresDigit", "description": "Passwords must have at least one digit ('0'-'9')."},
    ]
    err = ValidationFailedError(errors)
    assert err.status_code == 400
    assert err.errors == errors
    assert err.to_dict()["error"]["details"]["errors"] == errors


def test_bad_request_and_conflict_status():
    assert BadRequestError("Country does not exist").status_code == 400
    conflict = ConcurrencyConflictError("Country", 3)
    assert conflict.status_code == 500
    assert conflict.code == "concurrency_conflict"
