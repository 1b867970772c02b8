from typing import Any, Iterable, List, Optional

from errors import InvalidArgumentError, NullArgumentError

TIMEOUT_NOT_SET = -1  # executor falls back to its configured default
DEFAULT_TIMEOUT = TIMEOUT_NOT_SET
DEFAULT_CURSOR_BUFFER_SIZE = 4096


def _check_int(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} should be an integer: {value!r}")
    return value


class QueryRequest:
    """Definition of a SQL query to submit to an executor.

    The object is mutable. The executor reads the properties once, when the
    query is submitted, so later changes do not affect a query that is
    already running. Take a copy() before changing a request for the next
    submission.

    Requests compare and hash by value. Do not mutate a request that is used
    as a dict key or set member.
    """

    def __init__(self, sql: str, parameters: Optional[Iterable[Any]] = None,
                 timeout: int = DEFAULT_TIMEOUT,
                 cursor_buffer_size: int = DEFAULT_CURSOR_BUFFER_SIZE):
        self._sql: str = ""
        self._parameters: Optional[List[Any]] = None  # None means no parameters
        self._timeout: int = DEFAULT_TIMEOUT
        self._cursor_buffer_size: int = DEFAULT_CURSOR_BUFFER_SIZE

        self.set_sql(sql)
        self.set_parameters(parameters)
        self.set_timeout(timeout)
        self.set_cursor_buffer_size(cursor_buffer_size)

    @property
    def sql(self) -> str:
        return self._sql

    @sql.setter
    def sql(self, sql: str):
        self.set_sql(sql)

    def set_sql(self, sql: str) -> 'QueryRequest':
        if sql is None:
            raise NullArgumentError("SQL cannot be None")
        if not isinstance(sql, str):
            raise InvalidArgumentError(f"SQL should be a string: {sql!r}")
        if not sql:
            raise InvalidArgumentError("SQL cannot be empty")
        self._sql = sql
        return self

    @property
    def parameters(self) -> List[Any]:
        """A new list with the positional parameters, empty if there are none."""
        return list(self._parameters) if self._parameters else []

    @parameters.setter
    def parameters(self, parameters: Optional[Iterable[Any]]):
        self.set_parameters(parameters)

    def set_parameters(self, parameters: Optional[Iterable[Any]]) -> 'QueryRequest':
        """Replace the parameters with a copy of the given sequence.

        One value is needed for every '?' placeholder in the SQL. The sequence
        is copied, so later changes to it do not change the request. None or
        an empty sequence clears the parameters.
        """
        if parameters is None:
            parameters = []
        if isinstance(parameters, (str, bytes)):
            raise InvalidArgumentError(f"Parameters should be a sequence of values, not a string: {parameters!r}")
        try:
            values = iter(parameters)
        except TypeError:
            raise InvalidArgumentError(f"Parameters should be a sequence of values: {parameters!r}") from None
        copied = list(values)
        self._parameters = copied or None
        return self

    def add_parameter(self, parameter: Any) -> 'QueryRequest':
        """Append a single parameter to the end of the parameters."""
        if self._parameters is None:
            self._parameters = []
        self._parameters.append(parameter)
        return self

    def clear_parameters(self) -> 'QueryRequest':
        self._parameters = None
        return self

    @property
    def timeout(self) -> int:
        """Query timeout in milliseconds."""
        return self._timeout

    @timeout.setter
    def timeout(self, timeout: int):
        self.set_timeout(timeout)

    def set_timeout(self, timeout: int) -> 'QueryRequest':
        """Set the query timeout in milliseconds.

        A running query that reaches the timeout is cancelled by the executor.
        0 means no timeout. TIMEOUT_NOT_SET (-1) means the executor uses its
        own default timeout. Other negative values are rejected.
        """
        _check_int(timeout, "Timeout")
        if timeout < 0 and timeout != TIMEOUT_NOT_SET:
            raise InvalidArgumentError(f"Timeout should be non-negative or -1: {timeout}")
        self._timeout = timeout
        return self

    @property
    def cursor_buffer_size(self) -> int:
        """Cursor buffer size, measured in rows."""
        return self._cursor_buffer_size

    @cursor_buffer_size.setter
    def cursor_buffer_size(self, cursor_buffer_size: int):
        self.set_cursor_buffer_size(cursor_buffer_size)

    def set_cursor_buffer_size(self, cursor_buffer_size: int) -> 'QueryRequest':
        """Set the maximum number of result rows buffered in the cursor.

        Rows that are ready but not yet consumed wait in the cursor buffer.
        When the buffer is full the executor slows the query down, possibly
        to a complete halt, until rows are consumed. A bigger buffer helps
        queries with large results at the cost of memory.
        """
        _check_int(cursor_buffer_size, "Cursor buffer size")
        if cursor_buffer_size <= 0:
            raise InvalidArgumentError(f"Cursor buffer size should be positive: {cursor_buffer_size}")
        self._cursor_buffer_size = cursor_buffer_size
        return self

    def copy(self) -> 'QueryRequest':
        """Return an independent copy. The parameter values themselves are shared."""
        other = QueryRequest.__new__(QueryRequest)
        other._sql = self._sql
        other._parameters = list(self._parameters) if self._parameters else None
        other._timeout = self._timeout
        other._cursor_buffer_size = self._cursor_buffer_size
        return other

    def __eq__(self, other):
        if self is other:
            return True
        if type(other) is not QueryRequest:
            return NotImplemented
        return (self._sql == other._sql
                and self.parameters == other.parameters
                and self._timeout == other._timeout
                and self._cursor_buffer_size == other._cursor_buffer_size)

    def __hash__(self):
        return hash((self._sql, tuple(self.parameters), self._timeout, self._cursor_buffer_size))

    def __repr__(self):
        return (f"QueryRequest(sql={self._sql!r}, parameters={self.parameters!r}, "
                f"timeout={self._timeout}, cursor_buffer_size={self._cursor_buffer_size})")
