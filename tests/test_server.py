"""API tests for the toddlerwords server."""

import json
import os
import tempfile
import unittest

from fastapi.testclient import TestClient

import server.app as server_app
from core.grades import GradeLevel
from core.interfaces import RandomSource
from core.vocabulary import Vocabulary
from core.word_lists import StaticWordBank
from server.file_storage import FileStorage


class FirstPick(RandomSource):
    """Always picks the first candidate."""

    def pick_index(self, count: int) -> int:
        return 0


class TestServer(unittest.TestCase):
    """Tests for the HTTP endpoints."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.sessions_dir = os.path.join(self.tmp.name, 'sessions')
        server_app.storage = FileStorage(
            config_file=os.path.join(self.tmp.name, 'config.json'),
            sessions_dir=self.sessions_dir
        )
        server_app.vocabulary = Vocabulary(curated_words={'dog', 'cat'})
        server_app.word_bank = StaticWordBank({
            GradeLevel.PRE_K: ['cat'],
            GradeLevel.KINDERGARTEN: ['dog'],
        })
        server_app.random_source = FirstPick()
        server_app.user_challenges.clear()
        server_app.user_typing.clear()
        # Startup is not run without a context manager, so the globals above are used
        self.client = TestClient(server_app.app)

    def tearDown(self):
        server_app.storage = None
        server_app.vocabulary = None
        server_app.word_bank = None
        server_app.random_source = None
        self.tmp.cleanup()

    def start(self, mode='visual', grade='prek'):
        return self.client.post('/api/challenge/start', json={'mode': mode, 'grade': grade})

    def test_health(self):
        response = self.client.get('/')
        self.assertEqual(response.json()['service'], 'toddlerwords')

    def test_grades(self):
        grades = self.client.get('/api/grades').json()['grades']
        self.assertEqual(len(grades), 8)
        self.assertEqual(grades[0]['name'], 'Pre-K')
        self.assertEqual(grades[0]['word_count'], 1)
        self.assertEqual(grades[-1]['word_count'], 0)

    def test_segment(self):
        response = self.client.post('/api/segment', json={'text': 'Dog-Cat!'})
        self.assertEqual(response.json()['words'], ['dog', 'cat'])

    def test_check_word(self):
        self.assertTrue(self.client.get('/api/words/CAT').json()['valid'])
        self.assertFalse(self.client.get('/api/words/xyz').json()['valid'])

    def test_typing_flow(self):
        for key in 'dogcat':
            self.client.post('/api/typing/key', json={'key': key})
        state = self.client.post('/api/typing/key', json={'key': ' '}).json()
        self.assertEqual(state['new_words'], ['dog', 'cat'])
        self.assertEqual(state['typed_text'], 'DOGCAT ')

        self.client.post('/api/typing/key', json={'key': 'x'})
        state = self.client.post('/api/typing/key', json={'key': 'backspace'}).json()
        self.assertEqual(state['typed_text'], 'DOGCAT ')

        result = self.client.post('/api/typing/finish', json={}).json()
        self.assertTrue(result['saved'])
        self.assertEqual(result['record']['discovered_words'], ['dog', 'cat'])
        self.assertEqual(self.client.get('/api/typing').json()['typed_text'], '')
        self.assertEqual(len(self.client.get('/api/sessions').json()['sessions']), 1)

    def test_finish_typing_with_nothing(self):
        result = self.client.post('/api/typing/finish', json={}).json()
        self.assertFalse(result['saved'])
        self.assertIsNone(result['record'])

    def test_start_challenge(self):
        response = self.start()
        self.assertEqual(response.status_code, 200)
        state = response.json()
        self.assertEqual(state['target_word'], 'cat')
        self.assertEqual(state['grade_name'], 'Pre-K')

    def test_start_defaults_to_saved_grade(self):
        response = self.client.post('/api/challenge/start', json={'mode': 'visual'})
        self.assertEqual(response.json()['grade_level'], 'prek')

    def test_start_refused_without_words(self):
        response = self.start(grade='6')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(self.client.get('/api/challenge').status_code, 404)

    def test_start_rejects_bad_input(self):
        self.assertEqual(self.start(grade='college').status_code, 400)
        self.assertEqual(self.start(mode='smell').status_code, 400)

    def test_audio_challenge_hides_word(self):
        state = self.start(mode='audio').json()
        self.assertIsNone(state['target_word'])
        self.assertEqual(state['word_length'], 3)
        replay = self.client.post('/api/challenge/replay', json={}).json()
        self.assertEqual(replay['word'], 'cat')

    def test_letters_auto_check(self):
        self.start()
        self.client.post('/api/challenge/letter', json={'letter': 'c'})
        self.client.post('/api/challenge/letter', json={'letter': 'a'})
        state = self.client.post('/api/challenge/letter', json={'letter': 't'}).json()
        self.assertEqual(state['result'], 'correct')
        self.assertEqual(state['score'], 1)
        self.assertTrue(state['is_celebrating'])

        state = self.client.post('/api/challenge/letter', json={'letter': 'x'}).json()
        self.assertEqual(state['typed_text'], 'cat')

        state = self.client.post('/api/challenge/finish-celebration', json={}).json()
        self.assertFalse(state['is_celebrating'])
        self.assertEqual(state['typed_text'], '')

    def test_wrong_answer_and_backspace(self):
        self.start()
        for letter in 'cot':
            state = self.client.post('/api/challenge/letter', json={'letter': letter}).json()
        self.assertEqual(state['result'], 'incorrect')
        state = self.client.post('/api/challenge/backspace', json={}).json()
        self.assertEqual(state['typed_text'], 'co')
        state = self.client.post('/api/challenge/check', json={}).json()
        self.assertEqual(state['result'], 'incorrect')
        self.assertEqual(state['recent_attempts'], [False, False])

    def test_non_letters_ignored(self):
        self.start()
        state = self.client.post('/api/challenge/letter', json={'letter': '7'}).json()
        self.assertEqual(state['typed_text'], '')

    def test_level_up_over_http(self):
        self.start()
        for _ in range(10):
            for letter in 'cat':
                self.client.post('/api/challenge/letter', json={'letter': letter})
            state = self.client.post('/api/challenge/finish-celebration', json={}).json()
        self.assertTrue(state['level_changed'])
        self.assertEqual(state['grade_name'], 'Kindergarten')
        self.assertEqual(state['target_word'], 'dog')

    def test_end_challenge(self):
        self.start()
        result = self.client.post('/api/challenge/end', json={}).json()
        self.assertTrue(result['saved'])
        self.assertEqual(result['record']['kind'], 'challenge')
        self.assertEqual(self.client.get('/api/challenge').status_code, 404)
        self.assertEqual(self.client.post('/api/challenge/end', json={}).status_code, 404)

    def test_settings(self):
        settings = self.client.get('/api/settings').json()
        self.assertEqual(settings['selected_sound'], 'Swoosh')
        self.assertIn('Chime', settings['available_sounds'])

        updated = self.client.post('/api/settings', json={'selected_sound': 'Chime',
                                                          'use_uppercase': False}).json()
        self.assertTrue(updated['saved'])
        settings = self.client.get('/api/settings').json()
        self.assertEqual(settings['selected_sound'], 'Chime')
        self.assertFalse(settings['use_uppercase'])

    def test_settings_rejects_unknown_sound(self):
        response = self.client.post('/api/settings', json={'selected_sound': 'Foghorn'})
        self.assertEqual(response.status_code, 400)

    def test_sessions_rejects_bad_date(self):
        secret_dir = os.path.join(self.tmp.name, 'secret')
        os.makedirs(secret_dir)
        with open(os.path.join(secret_dir, 'private.json'), 'w') as f:
            json.dump({'kind': 'session', 'typed_text': 'PRIVATE'}, f)
        response = self.client.get('/api/sessions', params={'date': '../secret'})
        self.assertEqual(response.status_code, 400)
        self.assertNotIn('PRIVATE', response.text)

    def test_sessions_for_one_day(self):
        self.client.post('/api/typing/key', json={'key': 'a'})
        self.client.post('/api/typing/finish', json={})
        sessions = self.client.get('/api/sessions').json()['sessions']
        day = sessions[0]['timestamp'][:10]
        response = self.client.get('/api/sessions', params={'date': day})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['sessions'][0]['kind'], 'session')


if __name__ == '__main__':
    unittest.main()
