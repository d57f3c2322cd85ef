'''
Reply decoding by expected shape.

The calling command picks the shape; the decoder never guesses it from the
reply. JSON payloads are handed back as text and are never parsed here.
'''
from enum import Enum
from typing import NamedTuple, Optional, Union

from valkeyjson.exceptions import ProtocolMismatch


class Shape(Enum):
    STATUS = 'status'
    STRING = 'string'
    NILABLE_STRING = 'nilable string'
    INTEGER = 'integer'
    NILABLE_INTEGER = 'nilable integer'
    STRING_LIST = 'string list'
    NILABLE_STRING_LIST = 'nilable string list'
    KEY_VALUE_LIST = 'key/value list'

    def __str__(self):
        return self.value


class KeyValue(NamedTuple):
    key: Union[str, bytes]
    value: Optional[str]


def describe(reply):
    if reply is None:
        return 'nil'
    if isinstance(reply, bool):
        return 'boolean'
    if isinstance(reply, int):
        return 'integer'
    if isinstance(reply, (bytes, str)):
        return 'string'
    if isinstance(reply, list):
        return f"array[{len(reply)}]"
    return type(reply).__name__


def _string(reply, shape, encoding):
    if isinstance(reply, bytes):
        return reply.decode(encoding)
    if isinstance(reply, str):
        return reply
    raise ProtocolMismatch(shape, describe(reply))


def _nilable_string(reply, shape, encoding):
    return None if reply is None else _string(reply, shape, encoding)


def _integer(reply, shape):
    if isinstance(reply, int) and not isinstance(reply, bool):
        return reply
    raise ProtocolMismatch(shape, describe(reply))


def _string_list(reply, shape, encoding):
    if not isinstance(reply, list):
        raise ProtocolMismatch(shape, describe(reply))
    return [_string(item, shape, encoding) for item in reply]


def decode(reply, shape, keys=None, encoding='utf-8'):
    '''
    Turn a raw client reply into the result type of ``shape``.

    ``keys`` is required for ``Shape.KEY_VALUE_LIST``: the reply entries are
    paired with the requested keys by position. The transport is trusted to
    keep request order; entries are never reordered.
    '''
    if shape is Shape.STATUS:
        # OK, or nil when a NX/XX condition blocked the write
        result = _nilable_string(reply, shape, encoding)
        if result not in (None, 'OK'):
            raise ProtocolMismatch(shape, f"string {result!r}")
        return result
    if shape is Shape.STRING:
        return _string(reply, shape, encoding)
    if shape is Shape.NILABLE_STRING:
        return _nilable_string(reply, shape, encoding)
    if shape is Shape.INTEGER:
        return _integer(reply, shape)
    if shape is Shape.NILABLE_INTEGER:
        return None if reply is None else _integer(reply, shape)
    if shape is Shape.STRING_LIST:
        return _string_list(reply, shape, encoding)
    if shape is Shape.NILABLE_STRING_LIST:
        return None if reply is None else _string_list(reply, shape, encoding)
    if shape is Shape.KEY_VALUE_LIST:
        if keys is None:
            raise ValueError("keys are required to decode a key/value list")
        keys = list(keys)
        if not isinstance(reply, list) or len(reply) != len(keys):
            raise ProtocolMismatch(f"{shape}[{len(keys)}]", describe(reply))
        return [KeyValue(key, _nilable_string(value, shape, encoding))
                for (key, value) in zip(keys, reply)]
    raise ValueError(f"unknown reply shape: {shape!r}")
