"""A software mixer with a fixed pool of channels, plus sounds and sound effects."""

from __future__ import annotations

import random
import sys
import threading
from array import array
from os import PathLike
from typing import Iterable, List, Optional, Union

from .errors import SoundFileError
from .wave import SYSTEM_FORMAT, LoopType, SoundData, load_wav

__all__ = ["SoundSystem", "Sound", "SoundEffect"]

_SAMPLE_MIN = -32768
_SAMPLE_MAX = 32767
_DEFAULT_CHANNELS = 64


def _decode_samples(data: bytes) -> array:
    """Turn little-endian 16-bit PCM bytes into an array of signed samples."""
    samples = array("h")
    samples.frombytes(data[: len(data) - len(data) % samples.itemsize])
    if sys.byteorder == "big":
        samples.byteswap()
    return samples


class _Channel:
    """One voice of the mixer: a sound and a playback position in frames."""

    def __init__(self) -> None:
        self.sound: Optional[Sound] = None
        self.position = 0.0
        self.freq_mod = 1.0
        self.volume = 1.0

    def start(self, sound: Sound, freq_mod: float, volume: float) -> None:
        self.sound = sound
        self.position = 0.0
        self.freq_mod = freq_mod
        self.volume = volume

    def mix_into(self, mix: List[float], n_frames: int, n_channels: int) -> bool:
        """Add up to ``n_frames`` frames to ``mix``; return True once the sound has ended."""
        sound = self.sound
        assert sound is not None
        samples = sound._samples
        frames = len(samples) // n_channels
        looping = sound.data.looping
        loop_start = sound.data.loop_start
        loop_end = sound.data.loop_end
        if looping and loop_end <= loop_start:
            loop_end = frames

        for out_frame in range(n_frames):
            if looping and self.position >= loop_end:
                self.position = loop_start + (self.position - loop_end)
            frame = int(self.position)
            if frame >= frames:
                return True
            base = frame * n_channels
            out = out_frame * n_channels
            for offset, sample in enumerate(samples[base : base + n_channels]):
                mix[out + offset] += sample * self.volume
            self.position += self.freq_mod

        return not looping and int(self.position) >= frames


class SoundSystem:
    """Mixes playing sounds into 16-bit PCM in the system format.

    At most ``channels`` sounds play at once; further requests are ignored.
    """

    _default: Optional[SoundSystem] = None
    _default_lock = threading.Lock()

    def __init__(self, channels: int = _DEFAULT_CHANNELS) -> None:
        if channels <= 0:
            raise ValueError("at least one channel is required")
        self.format = SYSTEM_FORMAT
        self.master_volume = 1.0
        self._lock = threading.RLock()
        self._idle: List[_Channel] = [_Channel() for _ in range(channels)]
        self._active: List[_Channel] = []

    @classmethod
    def get(cls) -> SoundSystem:
        """Return the shared system, creating it on first use."""
        with cls._default_lock:
            if cls._default is None:
                cls._default = cls()
            return cls._default

    def set_master_volume(self, volume: float = 1.0) -> None:
        self.master_volume = float(volume)

    def play(self, sound: Sound, freq_mod: float = 1.0, volume: float = 1.0) -> None:
        """Start ``sound`` on an idle channel, if one is free."""
        if freq_mod <= 0:
            raise ValueError(f"frequency ratio must be positive, got {freq_mod}")
        with self._lock:
            if not self._idle:
                return
            channel = self._idle.pop()
            channel.start(sound, freq_mod, volume)
            self._active.append(channel)
            sound._channels.append(channel)

    def active_count(self) -> int:
        with self._lock:
            return len(self._active)

    def _release(self, channel: _Channel) -> None:
        sound = channel.sound
        if sound is not None and channel in sound._channels:
            sound._channels.remove(channel)
        channel.sound = None
        self._active.remove(channel)
        self._idle.append(channel)

    def _stop(self, channel: _Channel) -> None:
        with self._lock:
            if channel in self._active:
                self._release(channel)

    def render(self, n_frames: int) -> bytes:
        """Mix the next ``n_frames`` frames of every playing sound.

        Channels whose sounds end are returned to the idle pool.
        """
        if n_frames < 0:
            raise ValueError(f"frame count must not be negative, got {n_frames}")
        n_channels = self.format.channels
        mix = [0.0] * (n_frames * n_channels)
        with self._lock:
            finished = [
                channel
                for channel in list(self._active)
                if channel.mix_into(mix, n_frames, n_channels)
            ]
            for channel in finished:
                self._release(channel)
            master = self.master_volume

        out = array(
            "h",
            (
                max(_SAMPLE_MIN, min(_SAMPLE_MAX, round(value * master)))
                for value in mix
            ),
        )
        if sys.byteorder == "big":
            out.byteswap()
        return out.tobytes()


class Sound:
    """A decoded sound that can be played on several channels at once."""

    def __init__(
        self,
        data: Optional[SoundData] = None,
        system: Optional[SoundSystem] = None,
    ) -> None:
        self.data = data if data is not None else SoundData(b"")
        self._samples = _decode_samples(self.data.data)
        self._system = system
        self._channels: List[_Channel] = []

    @classmethod
    def from_file(
        cls,
        path: Union[str, PathLike],
        loop_type: Union[LoopType, bool] = LoopType.NOT_LOOPING,
        system: Optional[SoundSystem] = None,
    ) -> Sound:
        """Load a WAVE file; ``True`` as loop type means the embedded cue points."""
        if isinstance(loop_type, bool):
            loop_type = (
                LoopType.AUTO_EMBEDDED_CUE_POINTS if loop_type else LoopType.NOT_LOOPING
            )
        filename = str(path)
        if not filename.endswith(".wav"):
            raise SoundFileError("only WAVE files are supported", filename)
        return cls(load_wav(path, loop_type), system)

    @property
    def system(self) -> SoundSystem:
        if self._system is None:
            self._system = SoundSystem.get()
        return self._system

    def play(self, freq_mod: float = 1.0, volume: float = 1.0) -> None:
        self.system.play(self, freq_mod, volume)

    def stop_one(self) -> None:
        """Stop the earliest started of this sound's playing channels."""
        if self._channels:
            self.system._stop(self._channels[0])

    def stop_all(self) -> None:
        for channel in list(self._channels):
            self.system._stop(channel)

    def active_count(self) -> int:
        return len(self._channels)


class SoundEffect:
    """A set of variations of which a random one plays at a randomly shifted pitch."""

    def __init__(
        self,
        wav_files: Iterable[Union[str, PathLike]],
        soft_fail: bool = False,
        freq_std_dev_factor: float = 0.06,
        system: Optional[SoundSystem] = None,
    ) -> None:
        self.freq_std_dev_factor = freq_std_dev_factor
        self.sounds: List[Sound] = []
        for path in wav_files:
            try:
                self.sounds.append(Sound.from_file(path, system=system))
            except SoundFileError:
                if not soft_fail:
                    raise
                self.sounds.append(Sound(system=system))
        if not self.sounds:
            raise ValueError("a sound effect needs at least one file")

    def play(self, rng: random.Random, volume: float = 1.0) -> None:
        sound = self.sounds[rng.randint(0, len(self.sounds) - 1)]
        sound.play(2.0 ** rng.gauss(0.0, self.freq_std_dev_factor), volume)