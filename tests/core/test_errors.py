"""Error Hierarchy — status codes, codes and the response envelope."""

from company_services.core.errors import (
    CompanyServicesError, ConflictError, ErrorCategory, ErrorContext,
    NotFoundError, StorageError, ValidationError,
)


def test_status_codes_follow_taxonomy():
    assert ValidationError("bad").http_status == 400
    assert NotFoundError("Department", 7).http_status == 404
    assert ConflictError("dup").http_status == 409
    assert StorageError("down", "insert").http_status == 500


def test_all_errors_share_the_base_class():
    for exc in (
        ValidationError("bad"), NotFoundError("Employee", 1),
        ConflictError("dup"), StorageError("down", "read"),
    ):
        assert isinstance(exc, CompanyServicesError)


def test_not_found_message_names_the_record():
    exc = NotFoundError("Department", 42)
    assert exc.message == "Department '42' not found"
    assert exc.category is ErrorCategory.RESOURCE_NOT_FOUND
    assert exc.context.entity == "Department"
    assert exc.context.entity_id == 42


def test_validation_error_records_field_in_context():
    exc = ValidationError("hire_date must be a weekday", field="hire_date")
    assert exc.field == "hire_date"
    assert exc.context.field == "hire_date"


def test_storage_error_message_names_operation():
    assert StorageError("timeout", "delete").message == "Storage delete failed: timeout"


def test_to_response_envelope():
    exc = ConflictError("already exists", ErrorContext(company="acme", entity="Timecard"))
    body = exc.to_response()["error"]
    assert body["code"] == "CONFLICT"
    assert body["category"] == "conflict"
    assert body["severity"] == "error"
    assert body["message"] == "already exists"
    assert body["context"]["company"] == "acme"
    assert body["context"]["entity"] == "Timecard"
    assert "timestamp" in body
