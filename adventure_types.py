from typing import Dict, List, Literal, Optional, TypedDict

from schemas import AbilityModel

GameState = Literal[
    "INITIAL",
    "LEVEL_1",
    "LEVEL_1_FEEDBACK",
    "LEVEL_2",
    "LEVEL_2_FEEDBACK", # Reserved for a level-2 hint screen, no transition reaches it
    "FINAL_REWARD",
]

GAME_STATES: List[GameState] = [
    "INITIAL",
    "LEVEL_1",
    "LEVEL_1_FEEDBACK",
    "LEVEL_2",
    "LEVEL_2_FEEDBACK",
    "FINAL_REWARD",
]

Difficulty = Literal["EASY", "MEDIUM", "HARD"]

DIFFICULTIES: List[Difficulty] = ["EASY", "MEDIUM", "HARD"]

DIFFICULTY_LABELS: Dict[Difficulty, str] = {
    "EASY": "Easy breezy",
    "MEDIUM": "Volcano trail",
    "HARD": "Dragon's lair",
}

EventType = Literal["submit_question", "submit_answer", "choose_difficulty", "read_aloud"]

EffectKind = Literal["narrate", "stop_audio"]


class GameContext(TypedDict):
    initial_question: str
    l1_story: str
    l1_question: str
    l1_answer: str
    l1_image: str
    l1_fail_count: int
    difficulty: Difficulty
    l2_story: str
    l2_question: str
    l2_answer: str
    l2_image: str
    is_audio_playing: bool


class AdventureEvent(TypedDict, total=False):
    type: EventType
    text: str
    difficulty: Difficulty


class Effect(TypedDict, total=False):
    kind: EffectKind
    text: str


class AdventureState(TypedDict):
    game_state: GameState
    context: GameContext
    ability: Optional[AbilityModel]
    event: Optional[AdventureEvent]
    error_message: Optional[str] # Load-bearing failures
    system_message: Optional[str] # Hints and other friendly messages
    effects: List[Effect]


def new_game_context() -> GameContext:
    return {
        "initial_question": "",
        "l1_story": "",
        "l1_question": "",
        "l1_answer": "",
        "l1_image": "",
        "l1_fail_count": 0,
        "difficulty": "MEDIUM",
        "l2_story": "",
        "l2_question": "",
        "l2_answer": "",
        "l2_image": "",
        "is_audio_playing": False,
    }


def new_adventure_state() -> AdventureState:
    return {
        "game_state": "INITIAL",
        "context": new_game_context(),
        "ability": None,
        "event": None,
        "error_message": None,
        "system_message": None,
        "effects": [],
    }
