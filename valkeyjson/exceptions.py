import valkey.exceptions
import redis.exceptions


# Errors raised by the underlying client when the server rejects a command.
RESPONSE_ERRORS = (valkey.exceptions.ResponseError, redis.exceptions.ResponseError)

# Connection-level failures. These are never wrapped, callers catch them as-is.
TRANSPORT_ERRORS = (
    valkey.exceptions.ConnectionError,
    valkey.exceptions.TimeoutError,
    redis.exceptions.ConnectionError,
    redis.exceptions.TimeoutError,
)


class JsonError(Exception):
    pass


class ServerError(JsonError):
    '''
    The server rejected a JSON command. ``message`` is the server's reply,
    verbatim. ``code`` is its leading upper-case token, if any.
    '''

    def __init__(self, message):
        super(ServerError, self).__init__(message)
        self.message = message

    @property
    def code(self):
        head = self.message.split(' ', 1)[0]
        return head if head.isupper() else None

    def is_syntax_error(self):
        return self.message.startswith("SYNTAXERR") or \
            self.message.startswith("unknown subcommand")

    def is_nonexistent_error(self):
        return self.message.startswith("NONEXISTENT")

    def is_wrongtype_error(self):
        return self.message.startswith("WRONGTYPE")

    def is_number_overflow_error(self):
        return self.message.startswith("OVERFLOW")

    def is_outofboundaries_error(self):
        return self.message.startswith("OUTOFBOUNDARIES")

    def is_limit_exceeded_error(self):
        return self.message.startswith("LIMIT")

    def is_write_error(self):
        return self.message.startswith("ERROR") or self.is_outofboundaries_error() or \
            self.is_wrongtype_error() or self.is_nonexistent_error()

    # Uses find rather than startswith, servers prefix this one differently
    def is_wrong_number_of_arguments_error(self):
        return self.message.find("wrong number of arguments") >= 0 or \
            self.message.lower().find('invalid number of arguments') >= 0


class ProtocolMismatch(JsonError):
    '''
    The reply did not have the shape the command defines.
    '''

    def __init__(self, expected, actual):
        super(ProtocolMismatch, self).__init__(
            f"expected {expected} reply, got {actual}")
        self.expected = expected
        self.actual = actual
