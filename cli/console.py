"""Console UI for toddlerwords application."""

import time

from core.config import CELEBRATION_SECONDS
from core.utils import format_typed
from cli.api_client import ToddlerwordsAPIClient


class ConsoleUI:
    """Console user interface for toddlerwords application."""

    def __init__(self, client: ToddlerwordsAPIClient):
        self.client = client
        self.use_uppercase = True

    def print_discovered(self, words: list[str]):
        """Print the discovered words row."""
        if words:
            print('Words: ' + '  '.join(format_typed(w, self.use_uppercase) for w in words))

    def print_challenge(self, state: dict):
        """Print score, grade and the word to type."""
        print('=' * 40)
        print(f"Score: {state['score']}    Level: {state['grade_name']}")
        if state['word_visible']:
            print(f"\n  Type: {format_typed(state['target_word'], self.use_uppercase)}")
            if state['should_reveal_word']:
                print('  (here is the word to help you)')
        else:
            print(f"\n  Listen and type the word ({state['word_length']} letters)")
        print('=' * 40)

    def run_typing(self):
        """Free typing: each line is typed key by key, a blank line finishes."""
        print('\nType anything. Words you spell will appear. Blank line to finish.\n')
        while True:
            line = input('> ')
            if not line:
                break
            state = None
            for character in line:
                state = self.client.type_key(character)
                if state['new_words']:
                    print(f"  Found: {', '.join(state['new_words'])}")
            state = self.client.type_key(' ')
            if state['new_words']:
                print(f"  Found: {', '.join(state['new_words'])}")
            self.print_discovered(state['discovered_words'])

        result = self.client.finish_typing()
        if result['record']:
            print(f"Session saved: {result['saved']}")

    def speak(self, word: str):
        """Cue for the word in audio mode."""
        print(f'  (saying the word: {len(word)} letters)')

    def submit_guess(self, state: dict, guess: str) -> dict:
        """Replace the typed letters with the guess and check it."""
        for _ in state['typed_text']:
            state = self.client.backspace()
        for letter in guess:
            state = self.client.type_letter(letter)
            if state['result']:
                return state
        return self.client.check_word()

    def run_challenge(self, mode: str):
        """Run a word challenge until the player types 'exit'."""
        try:
            state = self.client.start_challenge(mode)
        except Exception as e:
            print(f"Could not start challenge: {e}")
            return

        print('Commands: "replay" to hear the word again, "exit" to stop\n')
        while True:
            self.print_challenge(state)
            if mode == 'audio':
                self.speak(self.client.replay_word()['word'])

            guess = input('==> ').strip()
            if guess.lower() == 'exit':
                break
            if guess.lower() == 'replay':
                continue
            if not guess.isalpha():
                continue

            state = self.submit_guess(state, guess)
            if state['result'] == 'correct':
                print('\n*** Great job! ***\n')
                time.sleep(CELEBRATION_SECONDS)
                state = self.client.finish_celebration()
                if state['level_changed']:
                    print(f"\n*** New level: {state['grade_name']} ***\n")
            else:
                print('Not quite, try again!')

        result = self.client.end_challenge()
        record = result['record']
        if record:
            print(f"Final score: {record['score']} ({record['words_completed']} words)")

    def run_settings(self):
        """Pick a sound and letter case."""
        settings = self.client.get_settings()
        print(f"Sound: {settings['selected_sound']}   Uppercase: {settings['use_uppercase']}")
        print(f"Sounds: {', '.join(settings['available_sounds'])}")
        sound = input('Sound (blank to keep): ').strip()
        case = input('Uppercase letters? [y/n, blank to keep]: ').strip().lower()
        use_uppercase = None
        if case in ('y', 'n'):
            use_uppercase = case == 'y'
        try:
            settings = self.client.update_settings(sound or None, use_uppercase)
            self.use_uppercase = settings['use_uppercase']
        except Exception as e:
            print(f"Error saving settings: {e}")

    def run(self):
        """Run the main menu loop."""
        try:
            health = self.client.health_check()
            print(f"Connected to toddlerwords server ({health['service']})")
        except Exception:
            print(f"Error: Cannot connect to server at {self.client.base_url}")
            print("Make sure the server is running: python run_server.py")
            return

        self.use_uppercase = self.client.get_settings()['use_uppercase']

        while True:
            print('\n1) Free typing  2) Visual challenge  3) Audio challenge  4) Settings  q) Quit')
            choice = input('Choose: ').strip().lower()
            if choice == '1':
                self.run_typing()
            elif choice == '2':
                self.run_challenge('visual')
            elif choice == '3':
                self.run_challenge('audio')
            elif choice == '4':
                self.run_settings()
            elif choice in ('q', 'quit', 'exit'):
                print('Goodbye!')
                return
