#
# Load a JSON file and create a key.
# Usage:
# [HOST=<host>] [PORT=<port>] [SSL=<ssl>] python3 -m valkeyjson.load_file <path_to_json> <key>
#
# e.g.
# python3 -m valkeyjson.load_file data/store.json store
# PORT=6380 python3 -m valkeyjson.load_file data/store.json store
#
import logging
import sys

import redis
from redis.exceptions import ConnectionError, TimeoutError

from valkeyjson.commands import JsonCommands
from valkeyjson.config import ConnectionSettings
from valkeyjson.exceptions import ServerError
from valkeyjson.options import ROOT_PATH

USAGE = "Usage: [HOST=<host>] [PORT=<port>] [SSL=<ssl>] python3 -m valkeyjson.load_file <path_to_json> <key>"


def load_file(commands, json_file_path, key):
    with open(json_file_path, 'r') as f:
        data = f.read()
    result = commands.set(key, ROOT_PATH, data)
    logging.info("Created key %s" % key)
    return result


def main(argv=None):
    logging.basicConfig(level=logging.INFO)
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) < 2:
        print(USAGE)
        return 1
    json_file_path, key = argv[0], argv[1]

    settings = ConnectionSettings.from_env()
    r = redis.Redis(**settings.client_kwargs())
    try:
        r.ping()
        logging.info(f"Connected to {settings.host}:{settings.port}, ssl: {settings.ssl}")
    except (ConnectionError, TimeoutError):
        logging.error(f"Failed to connect to {settings.host}:{settings.port}, ssl: {settings.ssl}")
        return 1

    try:
        load_file(JsonCommands(r), json_file_path, key)
    except (OSError, ServerError) as e:
        logging.error(f"Failed to load {json_file_path} into {key}: {e}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
