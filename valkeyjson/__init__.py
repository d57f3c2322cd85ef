from valkeyjson.commands import JsonCommands
from valkeyjson.decoder import KeyValue, Shape
from valkeyjson.exceptions import (TRANSPORT_ERRORS, JsonError, ProtocolMismatch,
                                   ServerError)
from valkeyjson.options import ROOT_PATH, GetOptions, SetMode

__all__ = [
    'JsonCommands', 'KeyValue', 'Shape', 'TRANSPORT_ERRORS', 'JsonError',
    'ProtocolMismatch', 'ServerError', 'ROOT_PATH', 'GetOptions', 'SetMode',
]
