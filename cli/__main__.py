"""Entry point for toddlerwords CLI client."""

import argparse
import sys

from cli.api_client import ToddlerwordsAPIClient
from cli.console import ConsoleUI


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Toddlerwords - typing and word challenges')
    parser.add_argument(
        '--server',
        default='http://localhost:8000',
        help='Toddlerwords server URL (default: http://localhost:8000)'
    )
    parser.add_argument(
        '--user',
        default='default',
        help='Player name; typing and challenge sessions are kept per player (default: default)'
    )
    return parser


def main():
    args = build_parser().parse_args()

    client = ToddlerwordsAPIClient(base_url=args.server, user_id=args.user)
    ui = ConsoleUI(client)

    try:
        ui.run()
    except KeyboardInterrupt:
        print('\nGoodbye!')
        sys.exit(0)


if __name__ == '__main__':
    main()
