import base64
from dataclasses import dataclass
from typing import Callable, Optional, Union

import numpy as np


@dataclass
class AudioBuffer:
    """Decoded audio, one row per frame and one column per channel."""

    samples: np.ndarray
    sample_rate: int

    @property
    def num_channels(self) -> int:
        return self.samples.shape[1]

    @property
    def frame_count(self) -> int:
        return self.samples.shape[0]

    @property
    def duration(self) -> float:
        return self.frame_count / self.sample_rate

    def channel_data(self, channel: int) -> np.ndarray:
        return self.samples[:, channel]


def decode_pcm16(data: Union[bytes, str], sample_rate: int = 24000, num_channels: int = 1) -> AudioBuffer:
    """Decode little-endian 16-bit PCM into float samples in [-1, 1].

    A str payload is taken to be base64, as inline audio arrives from the API.
    Bytes that do not make up a whole frame at the end are dropped.
    """
    if num_channels < 1:
        raise ValueError(f"num_channels must be at least 1, got {num_channels}")
    if sample_rate < 1:
        raise ValueError(f"sample_rate must be at least 1, got {sample_rate}")

    if isinstance(data, str):
        data = base64.b64decode(data)

    frame_stride = 2 * num_channels
    usable = len(data) - len(data) % frame_stride
    pcm = np.frombuffer(data[:usable], dtype="<i2")
    samples = pcm.reshape(-1, num_channels).astype(np.float32) / 32768.0
    return AudioBuffer(samples=samples, sample_rate=sample_rate)


def _load_sounddevice():
    import sounddevice
    return sounddevice


class AudioPlayer:
    """Plays one AudioBuffer at a time through a sounddevice output stream."""

    def __init__(self, backend=None):
        self._backend = backend
        self._stream = None
        # Clips that played to the end, closed by the next play() or stop()
        self._finished_streams = []

    @property
    def is_playing(self) -> bool:
        return self._stream is not None and self._stream.active

    def play(self, buffer: AudioBuffer, on_ended: Optional[Callable[[], None]] = None) -> None:
        self.stop()
        sd = self._backend or _load_sounddevice()
        position = 0

        def callback(outdata, frames, time_info, status):
            nonlocal position
            chunk = buffer.samples[position:position + frames]
            outdata[:len(chunk)] = chunk
            if len(chunk) < frames:
                outdata[len(chunk):] = 0
                raise sd.CallbackStop()
            position += frames

        def finished():
            # Only report the end of the clip that is still current
            if self._stream is stream:
                self._stream = None
                self._finished_streams.append(stream)
                if on_ended:
                    on_ended()

        stream = sd.OutputStream(
            samplerate=buffer.sample_rate,
            channels=buffer.num_channels,
            dtype="float32",
            callback=callback,
            finished_callback=finished,
        )
        self._stream = stream
        stream.start()

    def stop(self) -> None:
        self._close_finished()
        stream = self._stream
        if stream is None:
            return
        self._stream = None
        stream.stop()
        stream.close()

    def _close_finished(self) -> None:
        while self._finished_streams:
            self._finished_streams.pop().close()
