"""REST API client for toddlerwords server."""

import requests


class ToddlerwordsAPIClient:
    """Client for communicating with the toddlerwords REST API."""

    def __init__(self, base_url: str = "http://localhost:8000", user_id: str = "default"):
        self.base_url = base_url.rstrip('/')
        self.user_id = user_id
        self.session = requests.Session()

    def _get(self, endpoint: str, params: dict = None) -> dict:
        """Make a GET request."""
        if params is None:
            params = {}
        params['user_id'] = self.user_id
        response = self.session.get(f"{self.base_url}{endpoint}", params=params)
        response.raise_for_status()
        return response.json()

    def _post(self, endpoint: str, data: dict = None) -> dict:
        """Make a POST request."""
        if data is None:
            data = {}
        data['user_id'] = self.user_id
        response = self.session.post(f"{self.base_url}{endpoint}", json=data)
        response.raise_for_status()
        return response.json()

    def health_check(self) -> dict:
        """Check if the server is running."""
        response = self.session.get(f"{self.base_url}/")
        response.raise_for_status()
        return response.json()

    def get_grades(self) -> dict:
        return self._get("/api/grades")

    def segment(self, text: str) -> list[str]:
        """Find known words in a run of letters."""
        return self._post("/api/segment", {'text': text})['words']

    def type_key(self, key: str) -> dict:
        """Send one free-typing key (character, ' ' or 'backspace')."""
        return self._post("/api/typing/key", {'key': key})

    def finish_typing(self) -> dict:
        return self._post("/api/typing/finish")

    def start_challenge(self, mode: str, grade: str = None) -> dict:
        return self._post("/api/challenge/start", {'mode': mode, 'grade': grade})

    def get_challenge(self) -> dict:
        return self._get("/api/challenge")

    def type_letter(self, letter: str) -> dict:
        return self._post("/api/challenge/letter", {'letter': letter})

    def backspace(self) -> dict:
        return self._post("/api/challenge/backspace")

    def check_word(self) -> dict:
        return self._post("/api/challenge/check")

    def finish_celebration(self) -> dict:
        return self._post("/api/challenge/finish-celebration")

    def replay_word(self) -> dict:
        return self._post("/api/challenge/replay")

    def end_challenge(self) -> dict:
        return self._post("/api/challenge/end")

    def get_settings(self) -> dict:
        response = self.session.get(f"{self.base_url}/api/settings")
        response.raise_for_status()
        return response.json()

    def update_settings(self, selected_sound: str = None, use_uppercase: bool = None) -> dict:
        response = self.session.post(f"{self.base_url}/api/settings", json={
            'selected_sound': selected_sound,
            'use_uppercase': use_uppercase
        })
        response.raise_for_status()
        return response.json()
