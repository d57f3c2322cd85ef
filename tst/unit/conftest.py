import pytest


class RecordingClient:
    '''
    Stands in for valkey.Valkey: remembers every command and answers with
    the queued replies, in order. A queued exception is raised instead.
    '''

    def __init__(self):
        self.commands = []
        self.replies = []

    def reply(self, *replies):
        self.replies.extend(replies)
        return self

    def execute_command(self, *args):
        self.commands.append(args)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    def ping(self):
        return True

    @property
    def last_command(self):
        return self.commands[-1]


@pytest.fixture
def client():
    return RecordingClient()
