"""FastAPI server for toddlerwords application."""

import logging
import os
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from core.config import SYSTEM_DICTIONARY_PATH, AVAILABLE_SOUNDS, CELEBRATION_SECONDS
from core.grades import GRADE_ORDER, parse_grade
from core.interfaces import RandomSource
from core.models import (
    AttemptResult, ChallengeMode, ChallengeSession, TypingSession
)
from core.segmentation import segment
from core.vocabulary import Vocabulary
from core.word_lists import StaticWordBank

from server.file_storage import FileStorage, is_session_date

logger = logging.getLogger(__name__)


# Pydantic models for API
class SegmentRequest(BaseModel):
    text: str


class KeyRequest(BaseModel):
    key: str
    user_id: str = "default"


class UserRequest(BaseModel):
    user_id: str = "default"


class StartChallengeRequest(BaseModel):
    mode: str = "visual"
    grade: Optional[str] = None
    user_id: str = "default"


class LetterRequest(BaseModel):
    letter: str
    user_id: str = "default"


class SettingsRequest(BaseModel):
    selected_sound: Optional[str] = None
    use_uppercase: Optional[bool] = None


class ChallengeResponse(BaseModel):
    mode: str
    state: str
    grade_level: str
    grade_name: str
    target_word: Optional[str]
    word_length: int
    word_visible: bool
    typed_text: str
    score: int
    words_completed: int
    accuracy: float
    recent_attempts: list[bool]
    is_celebrating: bool
    is_ended: bool
    should_reveal_word: bool
    result: Optional[str] = None
    level_changed: bool = False
    celebration_seconds: float = CELEBRATION_SECONDS


class TypingResponse(BaseModel):
    typed_text: str
    discovered_words: list[str]
    new_words: list[str] = []


# Global state (one process, requests handled one at a time per user)
storage: FileStorage = None
vocabulary: Vocabulary = None
word_bank: StaticWordBank = None
random_source: RandomSource = None  # None means each session gets a system generator
user_challenges: dict[str, ChallengeSession] = {}
user_typing: dict[str, TypingSession] = {}


app = FastAPI(title="Toddlerwords API", description="Free typing and adaptive word challenges")


@app.on_event("startup")
async def startup():
    """Initialize storage, vocabulary and word banks on startup."""
    global storage, vocabulary, word_bank
    storage = FileStorage(
        config_file=os.environ.get('TODDLERWORDS_CONFIG'),
        sessions_dir=os.environ.get('TODDLERWORDS_STATE_DIR')
    )
    vocabulary = Vocabulary.load(os.environ.get('TODDLERWORDS_DICT', SYSTEM_DICTIONARY_PATH))
    word_bank = StaticWordBank()
    logger.info(f"Storage ready: sessions in {storage.sessions_dir}")


def get_vocabulary() -> Vocabulary:
    global vocabulary
    if vocabulary is None:
        vocabulary = Vocabulary.load(os.environ.get('TODDLERWORDS_DICT', SYSTEM_DICTIONARY_PATH))
    return vocabulary


def get_word_bank() -> StaticWordBank:
    global word_bank
    if word_bank is None:
        word_bank = StaticWordBank()
    return word_bank


def get_storage() -> FileStorage:
    global storage
    if storage is None:
        storage = FileStorage(
            config_file=os.environ.get('TODDLERWORDS_CONFIG'),
            sessions_dir=os.environ.get('TODDLERWORDS_STATE_DIR')
        )
    return storage


def get_typing(user_id: str = "default") -> TypingSession:
    """Get or create the free-typing session for a user."""
    if user_id not in user_typing:
        user_typing[user_id] = TypingSession(get_vocabulary())
    return user_typing[user_id]


def get_challenge(user_id: str = "default") -> ChallengeSession:
    """Get the live challenge for a user or fail with 404."""
    challenge = user_challenges.get(user_id)
    if challenge is None:
        raise HTTPException(status_code=404, detail="No active challenge")
    return challenge


def save_record(record) -> bool:
    """Save a session record. Storage failures are logged, not raised."""
    try:
        get_storage().save_session(record)
        return True
    except OSError as e:
        logger.error(f"Failed to save {record.kind} record: {e}")
        return False


def challenge_response(challenge: ChallengeSession, result: AttemptResult = None,
                       level_changed: bool = False) -> ChallengeResponse:
    return ChallengeResponse(
        **challenge.to_dict(),
        result=result.value if result else None,
        level_changed=level_changed
    )


@app.get("/")
async def root():
    """Health check."""
    return {"service": "toddlerwords", "status": "ok"}


@app.get("/api/grades")
async def list_grades():
    """List the grade ladder in order."""
    bank = get_word_bank()
    return {"grades": [
        {
            "key": level.value,
            "name": level.display_name,
            "short_name": level.short_name,
            "word_count": bank.word_count(level)
        }
        for level in GRADE_ORDER
    ]}


# Word discovery endpoints
@app.post("/api/segment")
async def segment_text(request: SegmentRequest):
    """Find known words inside a run of letters."""
    return {"words": segment(request.text, get_vocabulary())}


@app.get("/api/words/{word}")
async def check_word(word: str):
    """Check whether a single word is known."""
    return {"word": word, "valid": get_vocabulary().is_member(word)}


@app.get("/api/typing", response_model=TypingResponse)
async def get_typing_state(user_id: str = "default"):
    """Get the free-typing text and discovered words."""
    return TypingResponse(**get_typing(user_id).to_dict())


@app.post("/api/typing/key", response_model=TypingResponse)
async def typing_key(request: KeyRequest):
    """Feed one key into free typing: a character, a space or 'backspace'."""
    typing = get_typing(request.user_id)
    new_words = []
    if request.key == 'backspace':
        typing.backspace()
    elif request.key == ' ':
        new_words = typing.add_space()
    else:
        typing.add_character(request.key)
    return TypingResponse(**typing.to_dict(), new_words=new_words)


@app.post("/api/typing/finish")
async def finish_typing(request: UserRequest):
    """Finish free typing, save the session record and clear the text."""
    record = get_typing(request.user_id).finish()
    if record is None:
        return {"saved": False, "record": None}
    return {"saved": save_record(record), "record": record.to_dict()}


# Challenge endpoints
@app.post("/api/challenge/start", response_model=ChallengeResponse)
async def start_challenge(request: StartChallengeRequest):
    """Start a word challenge, replacing any running one for the user."""
    try:
        mode = ChallengeMode(request.mode.lower())
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Unknown mode: {request.mode}")

    config = get_storage().load_config()
    if request.grade:
        level = parse_grade(request.grade)
        if level is None:
            raise HTTPException(status_code=400, detail=f"Unknown grade: {request.grade}")
    else:
        level = config.last_selected_grade

    challenge = ChallengeSession.start(mode, level, get_word_bank(), random_source)
    if challenge is None:
        logger.warning(f"Challenge refused for {request.user_id}: no words for {level.display_name}")
        raise HTTPException(status_code=404, detail=f"No words for {level.display_name}")

    user_challenges[request.user_id] = challenge
    logger.info(f"Challenge started for {request.user_id}: mode={mode.value}, grade={level.display_name}")
    return challenge_response(challenge)


@app.get("/api/challenge", response_model=ChallengeResponse)
async def get_challenge_state(user_id: str = "default"):
    """Get the current challenge state."""
    return challenge_response(get_challenge(user_id))


@app.post("/api/challenge/letter", response_model=ChallengeResponse)
async def challenge_letter(request: LetterRequest):
    """Type a letter. The attempt is checked once the word length is reached."""
    challenge = get_challenge(request.user_id)
    letter = request.letter
    if len(letter) != 1 or not letter.isalpha():
        return challenge_response(challenge)
    result = None
    if challenge.add_letter(letter) and challenge.is_complete_length():
        result = challenge.check_attempt()
    return challenge_response(challenge, result)


@app.post("/api/challenge/backspace", response_model=ChallengeResponse)
async def challenge_backspace(request: UserRequest):
    """Remove the last typed letter."""
    challenge = get_challenge(request.user_id)
    challenge.remove_last_letter()
    return challenge_response(challenge)


@app.post("/api/challenge/check", response_model=ChallengeResponse)
async def challenge_check(request: UserRequest):
    """Check the typed letters against the target word."""
    challenge = get_challenge(request.user_id)
    result = challenge.check_attempt()
    return challenge_response(challenge, result)


@app.post("/api/challenge/finish-celebration", response_model=ChallengeResponse)
async def challenge_finish_celebration(request: UserRequest):
    """End the celebration pause and move to the next word."""
    challenge = get_challenge(request.user_id)
    new_level = challenge.finish_celebration()
    if new_level is not None:
        logger.info(f"Level changed for {request.user_id}: now {new_level.display_name}")
    return challenge_response(challenge, level_changed=new_level is not None)


@app.post("/api/challenge/replay")
async def challenge_replay(request: UserRequest):
    """Return the word to speak again. Does not change the challenge."""
    challenge = get_challenge(request.user_id)
    return {"word": challenge.target_word}


@app.post("/api/challenge/end")
async def end_challenge(request: UserRequest):
    """End the challenge and save its summary."""
    challenge = get_challenge(request.user_id)
    record = challenge.end()
    del user_challenges[request.user_id]
    if record is None:
        return {"saved": False, "record": None}
    config = get_storage().load_config()
    config.last_selected_grade = record.grade_level
    try:
        get_storage().save_config(config)
    except OSError as e:
        logger.error(f"Failed to save config: {e}")
    return {"saved": save_record(record), "record": record.to_dict()}


# Settings and history
@app.get("/api/settings")
async def get_settings():
    """Get user preferences and the available sounds."""
    config = get_storage().load_config()
    return {**config.to_dict(), "available_sounds": AVAILABLE_SOUNDS}


@app.post("/api/settings")
async def update_settings(request: SettingsRequest):
    """Update the selected sound and/or letter case."""
    config = get_storage().load_config()
    if request.selected_sound is not None:
        if request.selected_sound not in AVAILABLE_SOUNDS:
            raise HTTPException(status_code=400, detail=f"Unknown sound: {request.selected_sound}")
        config.selected_sound = request.selected_sound
    if request.use_uppercase is not None:
        config.use_uppercase = request.use_uppercase
    try:
        get_storage().save_config(config)
    except OSError as e:
        logger.error(f"Failed to save config: {e}")
        return {**config.to_dict(), "saved": False}
    return {**config.to_dict(), "saved": True}


@app.get("/api/sessions")
async def list_sessions(date: str = None):
    """List saved typing and challenge sessions, newest first."""
    if date is not None and not is_session_date(date):
        raise HTTPException(status_code=400, detail="date must be YYYY-MM-DD")
    return {"sessions": [record.to_dict() for record in get_storage().list_sessions(date)]}


def create_app():
    """Factory function for creating the app (useful for testing)."""
    return app
