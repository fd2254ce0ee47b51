"""Unit tests for file-based storage."""

import json
import os
import tempfile
import unittest

from core.grades import GradeLevel
from core.models import AppConfig, ChallengeMode, ChallengeRecord, SessionRecord
from server.file_storage import FileStorage


class TestFileStorage(unittest.TestCase):
    """Tests for FileStorage config and session files."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.config_file = os.path.join(self.tmp.name, 'config', 'config.json')
        self.sessions_dir = os.path.join(self.tmp.name, 'sessions')
        self.storage = FileStorage(config_file=self.config_file, sessions_dir=self.sessions_dir)

    def tearDown(self):
        self.tmp.cleanup()

    def test_missing_config_gives_defaults(self):
        config = self.storage.load_config()
        self.assertEqual(config.selected_sound, 'Swoosh')
        self.assertEqual(config.last_selected_grade, GradeLevel.PRE_K)
        self.assertTrue(config.use_uppercase)

    def test_corrupt_config_gives_defaults(self):
        os.makedirs(os.path.dirname(self.config_file))
        with open(self.config_file, 'w') as f:
            f.write('{not json')
        with self.assertLogs('server.file_storage', level='WARNING'):
            config = self.storage.load_config()
        self.assertEqual(config.selected_sound, 'Swoosh')

    def test_save_and_load_config(self):
        self.storage.save_config(AppConfig('Chime', GradeLevel.THIRD, False))
        config = self.storage.load_config()
        self.assertEqual(config.selected_sound, 'Chime')
        self.assertEqual(config.last_selected_grade, GradeLevel.THIRD)
        self.assertFalse(config.use_uppercase)

    def test_save_session_layout(self):
        path = self.storage.save_session(SessionRecord('DOGCAT', ['dog', 'cat']))
        self.assertTrue(os.path.exists(path))
        self.assertEqual(os.path.dirname(os.path.dirname(path)), self.sessions_dir)
        self.assertTrue(os.path.basename(path).startswith('session_'))
        with open(path) as f:
            data = json.load(f)
        self.assertEqual(data['typed_text'], 'DOGCAT')
        self.assertEqual(data['discovered_words'], ['dog', 'cat'])

    def test_same_second_saves_do_not_overwrite(self):
        first = self.storage.save_session(SessionRecord('A', []))
        second = self.storage.save_session(SessionRecord('B', []))
        self.assertNotEqual(first, second)

    def test_challenge_record_prefix(self):
        record = ChallengeRecord(GradeLevel.FIRST, 3, 3, ChallengeMode.AUDIO)
        path = self.storage.save_session(record)
        self.assertTrue(os.path.basename(path).startswith('challenge_'))

    def test_list_sessions_newest_first(self):
        self.storage.save_session(SessionRecord('OLD', [], timestamp='2024-01-01 09:00:00'))
        self.storage.save_session(SessionRecord('NEW', [], timestamp='2024-01-01 10:00:00'))
        sessions = self.storage.list_sessions()
        self.assertEqual([s.typed_text for s in sessions], ['NEW', 'OLD'])

    def test_list_sessions_empty(self):
        self.assertEqual(self.storage.list_sessions(), [])
        self.assertEqual(self.storage.list_sessions('2024-01-01'), [])

    def write_json(self, path, data):
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'w') as f:
            json.dump(data, f)

    def test_list_sessions_rejects_paths_outside_sessions_dir(self):
        self.write_json(os.path.join(self.tmp.name, 'secret', 'private.json'),
                        {'kind': 'session', 'typed_text': 'PRIVATE'})
        os.makedirs(self.sessions_dir)
        with self.assertLogs('server.file_storage', level='WARNING'):
            self.assertEqual(self.storage.list_sessions('../secret'), [])
        self.assertEqual(self.storage.list_sessions('2024-13-40'), [])

    def test_list_sessions_ignores_non_date_folders(self):
        self.write_json(os.path.join(self.sessions_dir, 'misc', 'session_x.json'),
                        {'kind': 'session', 'typed_text': 'STRAY'})
        self.assertEqual(self.storage.list_sessions(), [])

    def test_list_sessions_returns_records(self):
        self.storage.save_session(SessionRecord('DOG', ['dog']))
        self.storage.save_session(ChallengeRecord(GradeLevel.FIRST, 4, 4, ChallengeMode.VISUAL))
        kinds = sorted(type(s).__name__ for s in self.storage.list_sessions())
        self.assertEqual(kinds, ['ChallengeRecord', 'SessionRecord'])

    def test_list_sessions_skips_unknown_kind(self):
        day_dir = os.path.join(self.sessions_dir, '2024-01-01')
        self.write_json(os.path.join(day_dir, 'other_09-00-00.json'), {'kind': 'other'})
        self.write_json(os.path.join(day_dir, 'list_09-00-01.json'), [1, 2])
        self.storage.save_session(SessionRecord('OK', [], timestamp='2024-01-01 09:00:02'))
        with self.assertLogs('server.file_storage', level='WARNING'):
            sessions = self.storage.list_sessions()
        self.assertEqual([s.typed_text for s in sessions], ['OK'])


if __name__ == '__main__':
    unittest.main()
