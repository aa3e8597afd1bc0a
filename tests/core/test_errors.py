"""Error Hierarchy — status codes, default messages, response shapes."""

from yelpcamp.core.errors import (
    DEFAULT_ERROR_MESSAGE, DatabaseError, ErrorCategory, ErrorContext,
    OperationError, PageNotFoundError, PayloadValidationError,
    ResourceNotFoundError,
)


def test_operation_error_defaults():
    err = OperationError()
    assert err.status_code == 500
    assert err.message == DEFAULT_ERROR_MESSAGE
    assert str(err) == "Oh No, Something Went Wrong!!!"


def test_empty_message_falls_back_to_default():
    assert OperationError("").message == DEFAULT_ERROR_MESSAGE


def test_payload_validation_error_joins_details():
    err = PayloadValidationError(["a: bad", "b: worse"])
    assert err.status_code == 400
    assert err.message == "a: bad,b: worse"
    assert err.to_response()["error"]["details"] == ["a: bad", "b: worse"]


def test_resource_not_found_carries_id():
    err = ResourceNotFoundError("Campground", "abc")
    assert err.status_code == 404
    assert err.category is ErrorCategory.RESOURCE_NOT_FOUND
    assert err.context.resource_id == "abc"
    assert "abc" in err.message


def test_page_not_found_message():
    err = PageNotFoundError()
    assert err.status_code == 404
    assert err.message == "Page Not Found"


def test_database_error_hides_driver_detail():
    err = DatabaseError("connection refused on 10.0.0.5", "connect")
    assert err.status_code == 500
    assert err.message == DEFAULT_ERROR_MESSAGE
    assert "10.0.0.5" not in str(err.to_response())
    assert err.context.debug_info["detail"] == "connection refused on 10.0.0.5"


def test_to_response_includes_request_context():
    ctx = ErrorContext(method="GET", path="/x", phase="executing")
    body = OperationError(context=ctx).to_response()["error"]
    assert body["status_code"] == 500
    assert body["context"] == {"method": "GET", "path": "/x", "phase": "executing"}


def test_to_view_is_status_and_message():
    assert OperationError("Nope", 418).to_view() == {"status_code": 418, "message": "Nope"}
