"""Entry point for `python -m slideview`."""

from __future__ import annotations

import argparse
import logging
import os

from dotenv import load_dotenv

LOG_LEVELS = ['critical', 'error', 'warning', 'info', 'debug']


def main(argv: list[str] | None = None):
    from slideview import __version__
    from slideview.library import ImageLibrary, LibraryError
    from slideview.order import ShuffleStore
    from slideview.web import DEFAULT_HOST, DEFAULT_PORT, parse_address, start_server

    load_dotenv()

    parser = argparse.ArgumentParser(prog='slideview', description='Image server')
    parser.add_argument('dir', help='image directory')
    parser.add_argument('--address', metavar='HOST:PORT',
                        default=os.environ.get('SLIDEVIEW_ADDRESS',
                                               f'{DEFAULT_HOST}:{DEFAULT_PORT}'),
                        help=f'Bind address (default: {DEFAULT_HOST}:{DEFAULT_PORT})')
    parser.add_argument('--save', metavar='DIR',
                        default=os.environ.get('SLIDEVIEW_SAVE'),
                        help='Copy images here when "save" is clicked (must exist)')
    parser.add_argument('--log-level', choices=LOG_LEVELS, type=str.lower,
                        default=os.environ.get('SLIDEVIEW_LOG_LEVEL', 'info'),
                        help='Logging level (default: info)')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(),
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    try:
        host, port = parse_address(args.address)
    except ValueError:
        parser.error(f'Invalid address: {args.address}')

    try:
        library = ImageLibrary.scan(args.dir, save_dir=args.save)
    except LibraryError as e:
        parser.error(str(e))

    start_server(library, ShuffleStore(), host=host, port=port,
                 log_level=args.log_level)


if __name__ == '__main__':
    main()
