"""Run the video proxy with uvicorn

Usage:
    $ python -m vidproxy --host 0.0.0.0 --port 8000

Environment variables:
    HOST, PORT      defaults for --host and --port
    LOG_LEVEL       root log level (default: INFO)
    APP_ENV         selects config/<APP_ENV>.yml (default: local)
    APP_NAME        Redis key prefix <APP_NAME>:<APP_ENV>
"""

import os
import argparse

import uvicorn

from vidproxy.constants import ENV
from vidproxy.utils.logging import initialize_logging


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Token-protected, range-aware video streaming proxy.')
    parser.add_argument('--host', default=os.getenv(ENV.App.HOST, '127.0.0.1'), help='Interface to bind.')
    parser.add_argument('--port', type=int, default=int(os.getenv(ENV.App.PORT, '8000')), help='Port to bind.')
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    initialize_logging()
    uvicorn.run(
        'vidproxy.api.app:create_app',
        factory=True,
        host=args.host,
        port=args.port,
        proxy_headers=True,
        log_config=None,
    )


if __name__ == '__main__':
    main()
