'''
Builders for JSON module commands.

Each function returns the full argument tuple for ``execute_command``, command
name first. Keys, paths and JSON values are passed through untouched; the
server is the only judge of whether they are well formed.
'''
import operator
from decimal import Decimal

from valkeyjson.options import ROOT_PATH, GetOptions, SetMode


def format_number(value):
    '''
    Render a numeric operand the way the server's number parser expects it,
    independent of the process locale.
    '''
    if isinstance(value, bool):
        raise TypeError(f"expected a number, got {value!r}")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, Decimal):
        return format(value, 'f')
    raise TypeError(f"expected a number, got {type(value).__name__}")


def format_index(value):
    if isinstance(value, bool):
        raise TypeError(f"expected an integer index, got {value!r}")
    try:
        return str(operator.index(value))
    except TypeError:
        raise TypeError(f"expected an integer index, got {type(value).__name__}") from None


def _check_key(key):
    if not isinstance(key, (str, bytes)):
        raise TypeError(f"key must be str or bytes, not {type(key).__name__}")
    return key


def _check_json(value):
    if not isinstance(value, (str, bytes)):
        raise TypeError(
            f"JSON value must be serialized text (str or bytes), not {type(value).__name__}")
    return value


def _optional_path(path):
    return () if path is None else (path,)


def encode_set(key, path, value, mode=SetMode.DEFAULT):
    return ('JSON.SET', _check_key(key), path, _check_json(value)) + SetMode(mode).to_args()


def encode_get(key, paths=(), options=None):
    if options is None:
        options = GetOptions()
    return ('JSON.GET', _check_key(key)) + options.to_args() + tuple(paths)


def encode_mget(path, keys):
    return ('JSON.MGET',) + tuple(_check_key(k) for k in keys) + (path,)


def encode_del(key, path=None):
    return ('JSON.DEL', _check_key(key)) + _optional_path(path)


def encode_forget(key, path=None):
    return ('JSON.FORGET', _check_key(key)) + _optional_path(path)


def encode_type(key, path=None):
    return ('JSON.TYPE', _check_key(key)) + _optional_path(path)


def encode_numincrby(key, path, number):
    return ('JSON.NUMINCRBY', _check_key(key), path, format_number(number))


def encode_nummultby(key, path, number):
    return ('JSON.NUMMULTBY', _check_key(key), path, format_number(number))


def encode_strlen(key, path=None):
    return ('JSON.STRLEN', _check_key(key)) + _optional_path(path)


def encode_strappend(key, path, value):
    return ('JSON.STRAPPEND', _check_key(key)) + _optional_path(path) + (_check_json(value),)


def encode_toggle(key, path):
    return ('JSON.TOGGLE', _check_key(key), path)


def encode_clear(key, path=None):
    return ('JSON.CLEAR', _check_key(key)) + _optional_path(path)


def encode_arrappend(key, path, values):
    return ('JSON.ARRAPPEND', _check_key(key), path) + tuple(_check_json(v) for v in values)


def encode_arrindex(key, path, value, start=None, stop=None):
    args = ('JSON.ARRINDEX', _check_key(key), path, _check_json(value))
    if start is None and stop is None:
        return args
    # stop is positional after start
    args += (format_index(0 if start is None else start),)
    if stop is not None:
        args += (format_index(stop),)
    return args


def encode_arrinsert(key, path, index, values):
    return ('JSON.ARRINSERT', _check_key(key), path, format_index(index)) + \
        tuple(_check_json(v) for v in values)


def encode_arrlen(key, path=None):
    return ('JSON.ARRLEN', _check_key(key)) + _optional_path(path)


def encode_arrtrim(key, path, start, stop):
    return ('JSON.ARRTRIM', _check_key(key), path, format_index(start), format_index(stop))


def encode_arrpop(key, path=None, index=None):
    args = ('JSON.ARRPOP', _check_key(key))
    if index is None:
        return args + _optional_path(path)
    return args + (ROOT_PATH if path is None else path, format_index(index))


def encode_objlen(key, path=None):
    return ('JSON.OBJLEN', _check_key(key)) + _optional_path(path)


def encode_objkeys(key, path=None):
    return ('JSON.OBJKEYS', _check_key(key)) + _optional_path(path)


def encode_debug_memory(key, path=None):
    return ('JSON.DEBUG', 'MEMORY', _check_key(key)) + _optional_path(path)
