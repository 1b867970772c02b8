import pytest
from errors import DBError, InvalidArgumentError, NullArgumentError
from request import QueryRequest


def test_error_hierarchy():
    assert issubclass(InvalidArgumentError, DBError)
    assert issubclass(NullArgumentError, InvalidArgumentError)

def test_invalid_argument_is_value_error():
    """Callers catching the built-in ValueError also catch invalid arguments."""
    with pytest.raises(ValueError):
        QueryRequest("SELECT 1").set_timeout(-2)

def test_null_argument_is_type_error():
    with pytest.raises(TypeError):
        QueryRequest(None)

def test_null_argument_is_invalid_argument():
    with pytest.raises(InvalidArgumentError):
        QueryRequest("SELECT 1").set_sql(None)

def test_message_names_the_value():
    with pytest.raises(InvalidArgumentError) as exc_info:
        QueryRequest("SELECT 1").set_cursor_buffer_size(-7)
    assert str(exc_info.value) == "Cursor buffer size should be positive: -7"
