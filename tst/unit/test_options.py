import pytest
from dataclasses import FrozenInstanceError

from valkeyjson.options import GetOptions, SetMode


class TestSetMode:

    def test_mode_tokens(self):
        assert () == SetMode.DEFAULT.to_args()
        assert ('NX',) == SetMode.NX.to_args()
        assert ('XX',) == SetMode.XX.to_args()

    def test_lookup_by_value(self):
        assert SetMode.NX is SetMode('NX')
        assert SetMode.DEFAULT is SetMode(None)


class TestGetOptions:

    def test_defaults_emit_nothing(self):
        assert () == GetOptions().to_args()
        assert GetOptions() == GetOptions.builder().build()

    def test_all_flags_in_canonical_order(self):
        options = GetOptions(indent='___', newline='#', space='_', noescape=True)
        assert ('INDENT', '___', 'NEWLINE', '#', 'SPACE', '_', 'NOESCAPE') == options.to_args()

    def test_builder_call_order_does_not_matter(self):
        a = GetOptions.builder().noescape(True).space('_').newline('#').indent('___').build()
        b = GetOptions.builder().indent('___').newline('#').space('_').noescape().build()
        assert a == b
        assert a.to_args() == b.to_args()

    def test_to_args_is_idempotent(self):
        options = GetOptions.builder().indent('\t').space(' ').build()
        assert options.to_args() == options.to_args()
        assert ('INDENT', '\t', 'SPACE', ' ') == options.to_args()

    def test_partial_options(self):
        for (options, exp) in [
            (GetOptions(space=' '),          ('SPACE', ' ')),
            (GetOptions(newline='\r\n'),     ('NEWLINE', '\r\n')),
            (GetOptions(noescape=True),      ('NOESCAPE',)),
            (GetOptions(indent='  ', noescape=True), ('INDENT', '  ', 'NOESCAPE'))
        ]:
            assert exp == options.to_args()

    def test_built_options_are_immutable(self):
        builder = GetOptions.builder().indent('  ')
        options = builder.build()
        with pytest.raises(FrozenInstanceError):
            options.indent = '\t'
        builder.space(' ')
        assert options.space is None
