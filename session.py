from __future__ import annotations

import threading
from concurrent.futures import Future
from typing import List, Optional

from adventure_graph import advance
from adventure_types import AdventureEvent, AdventureState, Difficulty, new_adventure_state
from audio import AudioPlayer
from effects import EffectRunner


class AdventureSession:
    """One player's run through the adventure, from question to reward.

    Holds the current ``AdventureState``; every action replaces it with the
    state the game graph returns, then hands the emitted effects to the
    ``EffectRunner``. The audio flag is written from the narration worker and
    the audio callback thread, so ``self.state`` is only replaced under
    ``_state_lock`` and the flag is re-applied to every new state.
    """

    def __init__(self, generator, player: Optional[AudioPlayer] = None, executor=None) -> None:
        self.generator = generator
        self.state: AdventureState = new_adventure_state()
        self._state_lock = threading.Lock()
        self._audio_playing = False
        self._notices: List[str] = []
        self.effect_runner = EffectRunner(
            generator,
            player or AudioPlayer(),
            on_audio_state=self._set_audio_playing,
            on_notice=self._notices.append,
            executor=executor,
        )
        self.pending_effects: List[Future] = []

    @property
    def game_state(self) -> str:
        return self.state["game_state"]

    @property
    def context(self):
        return self.state["context"]

    def dispatch(self, event: AdventureEvent) -> AdventureState:
        with self._state_lock:
            current = self.state
        # advance() may take a while; flag changes meanwhile are kept in _audio_playing
        result = advance(current, event, self.generator)
        with self._state_lock:
            self.state = self._with_audio_flag(result)
        self.pending_effects = self.effect_runner.run(self.state["effects"])
        return self.state

    def submit_question(self, text: str) -> AdventureState:
        return self.dispatch({"type": "submit_question", "text": text})

    def submit_answer(self, text: str) -> AdventureState:
        return self.dispatch({"type": "submit_answer", "text": text})

    def choose_difficulty(self, difficulty: Difficulty) -> AdventureState:
        return self.dispatch({"type": "choose_difficulty", "difficulty": difficulty})

    def read_aloud(self) -> AdventureState:
        return self.dispatch({"type": "read_aloud"})

    def restart(self) -> AdventureState:
        """Full reset: drop queued narration, stop audio and start over with an empty context."""
        self.effect_runner.reset()
        with self._state_lock:
            self._audio_playing = False
            self.state = new_adventure_state()
        self._notices.clear()
        self.pending_effects = []
        return self.state

    def pop_notices(self) -> List[str]:
        notices = list(self._notices)
        self._notices.clear()
        return notices

    def close(self) -> None:
        self.effect_runner.shutdown()

    def _with_audio_flag(self, state: AdventureState) -> AdventureState:
        if state["context"]["is_audio_playing"] == self._audio_playing:
            return state
        return {
            **state,
            "context": {**state["context"], "is_audio_playing": self._audio_playing},
        }

    def _set_audio_playing(self, playing: bool) -> None:
        with self._state_lock:
            self._audio_playing = playing
            self.state = self._with_audio_flag(self.state)
