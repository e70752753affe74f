import pytest
from pydantic import ValidationError

from student_records_api.app.schemas.student import StudentIn


def test_missing_and_null_fields_take_zero_values():
    assert StudentIn.model_validate_json(b"{}") == StudentIn(name="", age=0, email="")
    assert StudentIn.model_validate_json(b'{"name": null, "age": null, "email": null}') == StudentIn()


def test_unknown_keys_are_ignored():
    student = StudentIn.model_validate_json(b'{"id": 9, "name": "Alice", "nickname": "Al"}')
    assert student.model_dump() == {"name": "Alice", "age": 0, "email": ""}


@pytest.mark.parametrize(
    "body",
    [b'{"age": "21"}', b'{"age": 21.0}', b'{"age": true}', b'{"email": 5}'],
)
def test_types_are_decoded_strictly(body):
    with pytest.raises(ValidationError):
        StudentIn.model_validate_json(body)
