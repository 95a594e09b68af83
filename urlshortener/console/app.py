"""Console front end for the short URL manager

Reads one command per line from an input stream and prints results:

    create -t <target url> [-i <desired id>]
    get -i <identifier>
    delete -i <identifier>
    --help

For each command the result code is printed, followed by the record when one
is returned. Unparseable lines print a usage message; the session goes on
until end of input.

CLI usage:
    $ python -m urlshortener
    $ python -m urlshortener --config config/dev.yaml --log-level DEBUG
    $ echo "create -t https://example.com -i potato" | urlshortener

Example:
    >>> import io
    >>> manager = build_manager()
    >>> out = io.StringIO()
    >>> handle_command(manager, 'create -t https://example.com -i potato', out)
    >>> out.getvalue()
    'Success\\tIdentifier: potato, TargetUrl: https://example.com. Metrics: [RetrievalCount: 0]\\n\\n'
"""

import sys
import shlex
import argparse
import logging
from pathlib import Path
from typing import TextIO

from urlshortener.dao import ShortURLMemoryDAO
from urlshortener.manager import ShortURLManager, ShortURLBaseManager
from urlshortener.models import ShortURLManagerOptions
from urlshortener.utils import initialize_logging, load_manager_options


logger = logging.getLogger(__name__)

BANNER = (
    '==============================\n'
    ' Short-Url manager\n'
    '==============================\n'
    '\n'
    "Type 'create' 'delete' or 'get' to get started. You can also type '--help' to display available commands.\n"
)


class CommandParseError(Exception):
    """Raised instead of exiting when a command line cannot be parsed."""

    def __init__(self, message: str, text: str):
        super().__init__(message)
        self.text = text


class CommandParser(argparse.ArgumentParser):
    """ArgumentParser that raises CommandParseError instead of printing or exiting the process

    The raised error carries the text argparse would have printed (usage,
    error or help), so the caller decides which stream receives it.
    """

    def error(self, message: str):
        raise CommandParseError(message, f'{self.format_usage()}error: {message}\n')

    def print_help(self, file=None):
        raise CommandParseError('help requested', self.format_help())

    def exit(self, status: int = 0, message: str | None = None):
        raise CommandParseError(message or '', message or '')


def command_parser() -> CommandParser:
    parser = CommandParser(prog='urlshortener', description='Short URL manager commands.')
    subparsers = parser.add_subparsers(dest='command', required=True, parser_class=CommandParser)

    create = subparsers.add_parser('create', help='Creates a short url.')
    create.add_argument('-t', '--target-url', required=True, help='The target url for the short url being created.')
    create.add_argument('-i', '--desired-id', default=None, help='A desired id for the short url being created.')

    get = subparsers.add_parser('get', help="Gets a short url's info.")
    get.add_argument('-i', '--identifier', required=True, help='The identifier for the short url to get.')

    delete = subparsers.add_parser('delete', help='Deletes a short url.')
    delete.add_argument('-i', '--identifier', required=True, help='The identifier for the short url to delete.')

    return parser


def build_manager(options: ShortURLManagerOptions | None = None) -> ShortURLManager:
    """Wire the manager to an in-memory DAO (composition root)"""
    return ShortURLManager(ShortURLMemoryDAO(), options or ShortURLManagerOptions())


def handle_command(manager: ShortURLBaseManager, line: str, out: TextIO, parser: CommandParser | None = None) -> None:
    """Parse a single command line, dispatch it to the manager and print the outcome

    Args:
        manager (ShortURLBaseManager):
            Manager that executes the command.
        line (str):
            Raw command line, e.g. "get -i potato".
        out (TextIO):
            Stream receiving the command output (help and usage included).
        parser (CommandParser | None):
            Parser to reuse across lines. Built on demand if None.
    """
    if not line.strip():
        return

    parser = parser or command_parser()
    try:
        tokens = shlex.split(line)
    except ValueError as e:  # unbalanced quotes
        logger.debug('Failed to tokenize command.', extra={'line': line, 'reason': str(e)})
        out.write(f'error: {e}\n\n')
        return

    try:
        args = parser.parse_args(tokens)
    except CommandParseError as e:
        logger.debug('Failed to parse command.', extra={'line': line, 'reason': str(e)})
        out.write(f'{e.text}\n')
        return

    match args.command:
        case 'create':
            result_code, short_url = manager.create(args.target_url, args.desired_id)
        case 'get':
            result_code, short_url = manager.get(args.identifier)
        case 'delete':
            result_code, short_url = manager.delete(args.identifier), None
        case _:  # pragma: no cover
            raise NotImplementedError(f'A command of type {args.command} is not supported.')

    out.write(str(result_code))
    if short_url is not None:
        out.write(f'\t{short_url}')
    out.write('\n\n')


def run(manager: ShortURLBaseManager, stdin: TextIO, stdout: TextIO) -> None:
    """Read commands line by line until end of input"""
    parser = command_parser()
    stdout.write(BANNER + '\n')
    for line in stdin:
        handle_command(manager, line.rstrip('\n'), stdout, parser)
        stdout.flush()


def main(argv: list[str] | None = None, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """CLI entry point.

    Steps:
        - Parse process arguments
        - Initialize logging
        - Load manager options (config file, environment, defaults)
        - Build the manager (fails fast on invalid options)
        - Serve commands from stdin

    Returns:
        int: process exit status.
    """
    parser = argparse.ArgumentParser(
        prog='urlshortener',
        description='Interactive short URL manager reading create/get/delete commands from stdin.',
    )
    parser.add_argument('--config', type=Path, default=None, help='YAML config file (default: config/<APP_ENV>.yaml)')
    parser.add_argument('--log-level', default=None, help='Log level (default: LOG_LEVEL or INFO)')
    args = parser.parse_args(argv)

    initialize_logging(level=args.log_level)

    options = load_manager_options(args.config)
    manager = build_manager(options)
    logger.info(
        'Short URL manager started.',
        extra={
            'minLength': options.url_id_minimum_length,
            'maxLength': options.url_id_maximum_length,
            'maxAttempts': options.maximum_creation_attempts,
        },
    )

    run(manager, stdin or sys.stdin, stdout or sys.stdout)
    return 0
