"""
The entry point for the CLI tool
"""

import argparse

import uvloop
from aiohttp import web

from bikerent import logger
from bikerent.app import build_app
from bikerent.version import __version__, name


def run(argv=None):
    """Runs the server on the given host and port."""
    parser = argparse.ArgumentParser(prog="bikerent", description="Runs the bike rental server.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=5000)
    args = parser.parse_args(argv)

    logger.info(f'Starting {name} %s!', __version__)
    uvloop.install()
    web.run_app(build_app(), host=args.host, port=args.port)


if __name__ == '__main__':
    run()
