import os
from dataclasses import dataclass

import valkey


@dataclass(frozen=True)
class ConnectionSettings:
    host: str = 'localhost'
    port: int = 6379
    ssl: bool = False
    socket_timeout: float = 3

    @classmethod
    def from_env(cls, environ=None):
        '''
        Read HOST, PORT, SSL and SOCKET_TIMEOUT. SSL is on only for the
        literal string "True".
        '''
        env = os.environ if environ is None else environ
        return cls(host=env.get('HOST', 'localhost'),
                   port=int(env.get('PORT', '6379')),
                   ssl=(env.get('SSL', 'False') == 'True'),
                   socket_timeout=float(env.get('SOCKET_TIMEOUT', '3')))

    def client_kwargs(self):
        return dict(host=self.host, port=self.port, ssl=self.ssl,
                    socket_timeout=self.socket_timeout)


def create_client(settings=None):
    if settings is None:
        settings = ConnectionSettings.from_env()
    return valkey.Valkey(**settings.client_kwargs())
