import logging

from valkeyjson import encoder
from valkeyjson.decoder import Shape, decode
from valkeyjson.exceptions import RESPONSE_ERRORS, ServerError
from valkeyjson.options import SetMode

logger = logging.getLogger(__name__)


class JsonCommands:
    '''
    JSON module commands on top of an existing client.

    ``client`` is any object with an ``execute_command(*args)`` method, normally
    a ``valkey.Valkey`` or ``redis.Redis`` instance. Each method is exactly one
    round trip on it. Server rejections raise ``ServerError``; connection and
    timeout errors from the client propagate unchanged.

    Commands that return counts or lengths expect legacy (dot) paths. With a
    JSONPath (``$``) the server answers with an array and the call fails with
    ``ProtocolMismatch``.
    '''

    def __init__(self, client, encoding='utf-8'):
        self.client = client
        self.encoding = encoding

    def _execute(self, key, args, shape, keys=None):
        logger.debug(f"{args[0]} {key!r}")
        try:
            reply = self.client.execute_command(*args)
        except RESPONSE_ERRORS as e:
            logger.debug(f"{args[0]} rejected by server: {e}")
            raise ServerError(str(e)) from e
        return decode(reply, shape, keys=keys, encoding=self.encoding)

    def set(self, key, path, value, mode=SetMode.DEFAULT):
        '''
        Store serialized JSON ``value`` at ``path``. Returns ``'OK'``, or None
        when ``mode`` (NX/XX) prevented the write.
        '''
        return self._execute(key, encoder.encode_set(key, path, value, mode), Shape.STATUS)

    def get(self, key, *paths, options=None):
        '''
        Return the serialized JSON at ``paths`` (the whole document if none are
        given), or None if the key does not exist. With several paths the
        server returns an object keyed by path.
        '''
        return self._execute(key, encoder.encode_get(key, paths, options), Shape.NILABLE_STRING)

    def mget(self, path, *keys):
        '''
        Read the same ``path`` from every key. Returns one ``KeyValue`` per
        key in request order, with None values for keys or paths that are
        missing.
        '''
        return self._execute(keys, encoder.encode_mget(path, keys), Shape.KEY_VALUE_LIST, keys=keys)

    def delete(self, key, path=None):
        return self._execute(key, encoder.encode_del(key, path), Shape.INTEGER)

    def forget(self, key, path=None):
        return self._execute(key, encoder.encode_forget(key, path), Shape.INTEGER)

    def type(self, key, path=None):
        return self._execute(key, encoder.encode_type(key, path), Shape.NILABLE_STRING)

    def numincrby(self, key, path, number):
        '''
        Add ``number`` to the value at ``path``. Returns the new value as the
        server serialized it.
        '''
        return self._execute(key, encoder.encode_numincrby(key, path, number), Shape.STRING)

    def nummultby(self, key, path, number):
        return self._execute(key, encoder.encode_nummultby(key, path, number), Shape.STRING)

    def strlen(self, key, path=None):
        return self._execute(key, encoder.encode_strlen(key, path), Shape.NILABLE_INTEGER)

    def strappend(self, key, path, value):
        '''
        Append JSON string ``value`` (quotes included) to the string at
        ``path``. A None path lets the server use the root.
        '''
        return self._execute(key, encoder.encode_strappend(key, path, value), Shape.INTEGER)

    def toggle(self, key, path):
        return self._execute(key, encoder.encode_toggle(key, path), Shape.STRING)

    def clear(self, key, path=None):
        return self._execute(key, encoder.encode_clear(key, path), Shape.INTEGER)

    def arrappend(self, key, path, *values):
        return self._execute(key, encoder.encode_arrappend(key, path, values), Shape.INTEGER)

    def arrindex(self, key, path, value, start=None, stop=None):
        return self._execute(key, encoder.encode_arrindex(key, path, value, start, stop), Shape.INTEGER)

    def arrinsert(self, key, path, index, *values):
        return self._execute(key, encoder.encode_arrinsert(key, path, index, values), Shape.INTEGER)

    def arrlen(self, key, path=None):
        return self._execute(key, encoder.encode_arrlen(key, path), Shape.NILABLE_INTEGER)

    def arrtrim(self, key, path, start, stop):
        return self._execute(key, encoder.encode_arrtrim(key, path, start, stop), Shape.INTEGER)

    def arrpop(self, key, path=None, index=None):
        '''
        Remove and return the element at ``index`` (last by default), or None
        if the array is empty.
        '''
        return self._execute(key, encoder.encode_arrpop(key, path, index), Shape.NILABLE_STRING)

    def objlen(self, key, path=None):
        return self._execute(key, encoder.encode_objlen(key, path), Shape.NILABLE_INTEGER)

    def objkeys(self, key, path=None):
        return self._execute(key, encoder.encode_objkeys(key, path), Shape.NILABLE_STRING_LIST)

    def debug_memory(self, key, path=None):
        return self._execute(key, encoder.encode_debug_memory(key, path), Shape.NILABLE_INTEGER)
