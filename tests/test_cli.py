"""Tests for the CLI argument parser."""

import unittest

from cli.__main__ import build_parser


class TestParser(unittest.TestCase):
    """Tests for the toddlerwords command line options."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        self.assertEqual(args.server, 'http://localhost:8000')
        self.assertEqual(args.user, 'default')

    def test_player_option(self):
        args = build_parser().parse_args(['--server', 'http://kids.local:9000', '--user', 'mia'])
        self.assertEqual(args.server, 'http://kids.local:9000')
        self.assertEqual(args.user, 'mia')

    def test_help_describes_app(self):
        help_text = build_parser().format_help()
        self.assertIn('Toddlerwords server URL', help_text)
        self.assertIn('Player name', help_text)


if __name__ == '__main__':
    unittest.main()
