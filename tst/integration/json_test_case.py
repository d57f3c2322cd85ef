import pytest
import logging
from valkey.exceptions import ConnectionError, ResponseError, TimeoutError

from valkeyjson import JsonCommands
from valkeyjson.config import ConnectionSettings, create_client


class SimpleTestCase:
    '''
    Simple test case, single client against the server named by HOST/PORT.
    '''

    def setup_method(self, method):
        self.settings = ConnectionSettings.from_env()
        self.client = create_client(self.settings)
        if not self.is_connected():
            pytest.skip(f"no server at {self.settings.host}:{self.settings.port}")

    def teardown_method(self, method):
        if self.is_connected():
            self.client.execute_command("FLUSHALL")
            logging.info("executed FLUSHALL at teardown")
        self.client.close()

    def is_connected(self):
        try:
            self.client.ping()
            return True
        except (ConnectionError, TimeoutError):
            return False


class JsonTestCase(SimpleTestCase):
    '''
    Base class for JSON tests, skipped when the server does not have the JSON module loaded.
    '''

    def setup_method(self, method):
        super(JsonTestCase, self).setup_method(method)
        try:
            self.client.execute_command('JSON.TYPE', '__json_probe__')
        except ResponseError as e:
            pytest.skip(f"JSON module not loaded: {e}")
        self.client.execute_command("FLUSHDB")
        self.json = JsonCommands(self.client)
