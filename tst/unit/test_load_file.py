import pytest
import redis
import redis.exceptions

from valkeyjson import load_file


class Unreachable:

    def __init__(self, **kwargs):
        pass

    def ping(self):
        raise redis.exceptions.ConnectionError('Connection refused')


@pytest.fixture
def store_file(tmp_path):
    path = tmp_path / 'store.json'
    path.write_text('{"store":{"books":[]}}')
    return str(path)


def test_usage(capsys):
    assert 1 == load_file.main(['only-one-arg'])
    assert 'Usage' in capsys.readouterr().out


def test_loads_file_at_root(monkeypatch, client, store_file):
    created = {}

    def factory(**kwargs):
        created.update(kwargs)
        return client.reply(b'OK')

    monkeypatch.setenv('PORT', '6380')
    monkeypatch.setattr(redis, 'Redis', factory)
    assert 0 == load_file.main([store_file, 'store'])
    assert 6380 == created['port']
    assert ('JSON.SET', 'store', '.', '{"store":{"books":[]}}') == client.last_command


def test_unreachable_server(monkeypatch, store_file):
    monkeypatch.setattr(redis, 'Redis', Unreachable)
    assert 1 == load_file.main([store_file, 'store'])


def test_server_rejects_document(monkeypatch, client, store_file):
    client.reply(redis.exceptions.ResponseError('SYNTAXERR Failed to parse JSON string'))
    monkeypatch.setattr(redis, 'Redis', lambda **kwargs: client)
    assert 1 == load_file.main([store_file, 'store'])


def test_missing_file(monkeypatch, client, tmp_path):
    monkeypatch.setattr(redis, 'Redis', lambda **kwargs: client)
    assert 1 == load_file.main([str(tmp_path / 'missing.json'), 'store'])
    assert [] == client.commands
