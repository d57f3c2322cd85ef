from dataclasses import dataclass, replace
from enum import Enum


ROOT_PATH = '.'


class SetMode(Enum):
    '''
    Conditional-write mode for JSON.SET. ``DEFAULT`` writes unconditionally,
    ``NX`` only if the path does not exist, ``XX`` only if it does.
    '''
    DEFAULT = None
    NX = 'NX'
    XX = 'XX'

    def to_args(self):
        return () if self.value is None else (self.value,)


@dataclass(frozen=True)
class GetOptions:
    '''
    Formatting directives for JSON.GET. They only change how the server
    serializes the reply, never the stored document.
    '''
    indent: str = None
    newline: str = None
    space: str = None
    noescape: bool = False

    @staticmethod
    def builder():
        return GetOptionsBuilder()

    def to_args(self):
        args = []
        for (flag, value) in [('INDENT', self.indent),
                              ('NEWLINE', self.newline),
                              ('SPACE', self.space)]:
            if value is not None:
                args.extend((flag, value))
        if self.noescape:
            args.append('NOESCAPE')
        return tuple(args)


class GetOptionsBuilder:

    def __init__(self):
        self._options = GetOptions()

    def indent(self, indent):
        self._options = replace(self._options, indent=indent)
        return self

    def newline(self, newline):
        self._options = replace(self._options, newline=newline)
        return self

    def space(self, space):
        self._options = replace(self._options, space=space)
        return self

    def noescape(self, noescape=True):
        self._options = replace(self._options, noescape=noescape)
        return self

    def build(self):
        return self._options
