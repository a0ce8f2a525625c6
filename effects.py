import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, List, Optional

from adventure_types import Effect
from audio import AudioPlayer, decode_pcm16
from config import CHANNELS, SAMPLE_RATE

NARRATION_UNAVAILABLE = "The narrator is taking a break, the voice service is unavailable right now."
PLAYBACK_TROUBLE = "We had a little trouble playing the narration."


class EffectRunner:
    """Executes the effects a transition asks for, outside the game graph.

    Narration is fire-and-continue: it runs on a single background worker
    so the new level is on screen while speech is being synthesised.
    Work submitted before a ``reset()`` belongs to an old generation and
    never reaches the player or the audio flag.
    """

    def __init__(
        self,
        generator,
        player: AudioPlayer,
        on_audio_state: Callable[[bool], None],
        on_notice: Callable[[str], None],
        executor: Optional[ThreadPoolExecutor] = None,
        sample_rate: int = SAMPLE_RATE,
        channels: int = CHANNELS,
    ):
        self.generator = generator
        self.player = player
        self.on_audio_state = on_audio_state
        self.on_notice = on_notice
        self.executor = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="narration")
        self.sample_rate = sample_rate
        self.channels = channels
        self.generation = 0
        self._lock = threading.Lock()
        self._pending: List[Future] = []

    def run(self, effects: List[Effect]) -> List[Future]:
        futures = []
        for effect in effects:
            if effect["kind"] == "stop_audio":
                self.stop_audio()
            elif effect["kind"] == "narrate":
                futures.append(self.executor.submit(self.narrate, effect["text"], self.generation))
            else:
                print(f"Warning: Unknown effect '{effect['kind']}' skipped.")
        self._pending = [f for f in self._pending if not f.done()] + futures
        return futures

    def stop_audio(self) -> None:
        self.player.stop()
        self.on_audio_state(False)

    def reset(self) -> None:
        """Cancel queued narration, silence the player and start a new generation."""
        with self._lock:
            self.generation += 1
            pending, self._pending = self._pending, []
        for future in pending:
            future.cancel()
        self.stop_audio()

    def _is_stale(self, generation: int) -> bool:
        return generation != self.generation

    def narrate(self, text: str, generation: Optional[int] = None) -> None:
        if generation is None:
            generation = self.generation
        if self._is_stale(generation):
            return

        if self.player.is_playing:
            self.stop_audio()

        audio_data = self.generator.generate_narration(text)

        with self._lock:
            if self._is_stale(generation):
                print("Dropping narration from before the restart.")
                return
            if not audio_data:
                self.on_notice(NARRATION_UNAVAILABLE)
                return
            try:
                buffer = decode_pcm16(audio_data, self.sample_rate, self.channels)
                self.on_audio_state(True)
                self.player.play(buffer, on_ended=lambda: self._clip_ended(generation))
            except Exception as e:
                print(f"Audio playback error: {e}")
                self.on_notice(PLAYBACK_TROUBLE)
                self.on_audio_state(False)

    def _clip_ended(self, generation: int) -> None:
        if not self._is_stale(generation):
            self.on_audio_state(False)

    def shutdown(self) -> None:
        self.stop_audio()
        self.executor.shutdown(wait=False, cancel_futures=True)
