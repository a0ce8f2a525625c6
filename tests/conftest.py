"""Shared fakes standing in for Gemini, the audio device and the worker pool."""

from __future__ import annotations

from concurrent.futures import Future
from types import SimpleNamespace

import pytest

from schemas import AbilityModel, LevelContent


# ---------------------------------------------------------------------------
# Content generation
# ---------------------------------------------------------------------------

class FakeGenerator:
    """Scripted replacement for ContentGenerator."""

    def __init__(self, level_contents=None, ability=None, narration=b"\x00\x00" * 8,
                 image="data:image/png;base64,AAAA"):
        self.level_contents = list(level_contents or [])
        self.ability = ability if ability is not None else AbilityModel(
            mastery=90, logic=85, advice="Keep exploring numbers together."
        )
        self.narration = narration
        self.image = image
        self.calls = []

    def generate_structured_content(self, prompt, schema):
        self.calls.append(("structured", schema.__name__, prompt))
        if schema is AbilityModel:
            if isinstance(self.ability, Exception):
                raise self.ability
            return self.ability
        item = self.level_contents.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def generate_illustration(self, prompt):
        self.calls.append(("illustration", prompt))
        return self.image

    def generate_narration(self, text):
        self.calls.append(("narration", text))
        return self.narration


LEVEL_ONE = LevelContent(
    story="Captain Pip has 15 treasure chests with 8 coins each.",
    question="How many coins does Captain Pip have?",
    answer="120",
)

LEVEL_TWO = LevelContent(
    story="A storm splits the coins between 4 islands.",
    question="How many coins land on each island?",
    answer="30",
)


@pytest.fixture
def generator():
    return FakeGenerator(level_contents=[LEVEL_ONE, LEVEL_TWO])


# ---------------------------------------------------------------------------
# Gemini SDK client
# ---------------------------------------------------------------------------

class FakeModels:
    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    def generate_content(self, model, contents, config=None):
        self.calls.append(SimpleNamespace(model=model, contents=contents, config=config))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class FakeClient:
    def __init__(self, responses):
        self.models = FakeModels(responses)


def text_response(text):
    return SimpleNamespace(text=text, candidates=[])


def inline_response(data, mime_type="image/png"):
    part = SimpleNamespace(text=None, inline_data=SimpleNamespace(data=data, mime_type=mime_type))
    return SimpleNamespace(text=None, candidates=[SimpleNamespace(content=SimpleNamespace(parts=[part]))])


def parts_response(parts):
    return SimpleNamespace(text=None, candidates=[SimpleNamespace(content=SimpleNamespace(parts=parts))])


# ---------------------------------------------------------------------------
# Audio
# ---------------------------------------------------------------------------

class FakePlayer:
    def __init__(self, fail=False):
        self.fail = fail
        self.played = []
        self.stops = 0
        self.is_playing = False
        self._on_ended = None

    def play(self, buffer, on_ended=None):
        if self.fail:
            raise RuntimeError("no output device")
        self.played.append(buffer)
        self.is_playing = True
        self._on_ended = on_ended

    def stop(self):
        self.stops += 1
        self.is_playing = False

    def finish(self):
        self.is_playing = False
        if self._on_ended:
            self._on_ended()


class FakeStream:
    def __init__(self, samplerate, channels, dtype, callback, finished_callback):
        self.samplerate = samplerate
        self.channels = channels
        self.dtype = dtype
        self.callback = callback
        self.finished_callback = finished_callback
        self.active = False
        self.closed = False

    def start(self):
        self.active = True

    def stop(self):
        # sounddevice reports a stopped stream as finished too
        self.active = False
        self.finished_callback()

    def close(self):
        self.closed = True

    def finish(self):
        self.active = False
        self.finished_callback()


class FakeSoundDevice:
    class CallbackStop(Exception):
        pass

    def __init__(self):
        self.streams = []

    def OutputStream(self, **kwargs):
        stream = FakeStream(**kwargs)
        self.streams.append(stream)
        return stream


# ---------------------------------------------------------------------------
# Executor
# ---------------------------------------------------------------------------

class ImmediateExecutor:
    """Runs submitted work inline so effect tests stay deterministic."""

    def __init__(self):
        self.shut_down = False

    def submit(self, fn, *args, **kwargs):
        future = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as e:
            future.set_exception(e)
        return future

    def shutdown(self, wait=True, cancel_futures=False):
        self.shut_down = True


class DeferredExecutor:
    """Queues submitted work until the test runs it, like a busy worker thread."""

    def __init__(self):
        self.queued = []
        self.shut_down = False

    def submit(self, fn, *args, **kwargs):
        future = Future()
        self.queued.append((future, fn, args, kwargs))
        return future

    def run_pending(self):
        queued, self.queued = self.queued, []
        for future, fn, args, kwargs in queued:
            if not future.set_running_or_notify_cancel():
                continue
            try:
                future.set_result(fn(*args, **kwargs))
            except Exception as e:
                future.set_exception(e)

    def shutdown(self, wait=True, cancel_futures=False):
        self.shut_down = True
