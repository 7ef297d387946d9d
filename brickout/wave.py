"""Loading PCM sound data and loop points from RIFF WAVE files."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Iterator, Optional, Tuple, Union

from .errors import SoundFileError

__all__ = [
    "LoopType",
    "WaveFormat",
    "SoundData",
    "SYSTEM_FORMAT",
    "WAVE_FORMAT_PCM",
    "load_wav",
]

WAVE_FORMAT_PCM = 1

_U32 = struct.Struct("<I")
_FMT = struct.Struct("<HHIIHH")
_CUE_POINT = struct.Struct("<IIIIII")
_MIN_FILE_SIZE = 44


class LoopType(enum.Enum):
    """How the loop region of a sound is chosen."""

    NOT_LOOPING = enum.auto()
    AUTO_EMBEDDED_CUE_POINTS = enum.auto()
    AUTO_FULL_SOUND = enum.auto()
    MANUAL_FLOAT = enum.auto()
    MANUAL_SAMPLE = enum.auto()


@dataclass(frozen=True)
class WaveFormat:
    """The fields of a WAVE ``fmt `` chunk that the mixer cares about."""

    format_tag: int
    channels: int
    samples_per_sec: int
    avg_bytes_per_sec: int
    block_align: int
    bits_per_sample: int

    @classmethod
    def pcm(cls, channels: int, samples_per_sec: int, bits_per_sample: int) -> WaveFormat:
        """Describe an integer PCM format, deriving block alignment and byte rate."""
        if channels <= 0:
            raise ValueError("at least one channel is required")
        if bits_per_sample <= 0 or bits_per_sample % 8:
            raise ValueError("bit depth must be a positive multiple of 8")
        block_align = bits_per_sample // 8 * channels
        return cls(
            WAVE_FORMAT_PCM,
            channels,
            samples_per_sec,
            block_align * samples_per_sec,
            block_align,
            bits_per_sample,
        )


SYSTEM_FORMAT = WaveFormat.pcm(2, 44100, 16)


@dataclass(frozen=True)
class SoundData:
    """Decoded sample bytes together with the loop region, in frames."""

    data: bytes
    looping: bool = False
    loop_start: int = 0
    loop_end: int = 0
    format: WaveFormat = SYSTEM_FORMAT

    def frame_count(self) -> int:
        return len(self.data) // self.format.block_align


def _check_loop_args(
    loop_type: LoopType,
    start_sample: Optional[int],
    end_sample: Optional[int],
    start_seconds: Optional[float],
    end_seconds: Optional[float],
) -> None:
    seconds_given = start_seconds is not None and end_seconds is not None
    seconds_partial = (start_seconds is None) != (end_seconds is None)
    samples_given = start_sample is not None and end_sample is not None
    samples_partial = (start_sample is None) != (end_sample is None)
    if seconds_partial or samples_partial:
        raise ValueError("loop start and end must be given together")
    if (loop_type is LoopType.MANUAL_FLOAT) != seconds_given:
        raise ValueError("loop points in seconds belong with LoopType.MANUAL_FLOAT only")
    if (loop_type is LoopType.MANUAL_SAMPLE) != samples_given:
        raise ValueError("loop points in samples belong with LoopType.MANUAL_SAMPLE only")


def _chunks(buf: bytes, filename: str) -> Iterator[Tuple[bytes, int, int]]:
    """Yield (id, size, body offset) for each chunk after the RIFF header."""
    i = 12
    while i < len(buf):
        if i + 8 > len(buf):
            raise SoundFileError("chunk header truncated", filename)
        size = _U32.unpack_from(buf, i + 4)[0]
        yield buf[i : i + 4], size, i + 8
        # chunk id + size field + body, padded to an even length
        i += (size + 9) & ~1


def _read_format(buf: bytes, filename: str) -> WaveFormat:
    for chunk_id, _, body in _chunks(buf, filename):
        if chunk_id == b"fmt ":
            if body + _FMT.size > len(buf):
                raise SoundFileError("fmt chunk truncated", filename)
            tag, channels, rate, avg, align, bits = _FMT.unpack_from(buf, body)
            return WaveFormat(tag, channels, rate, avg, align, bits)
    raise SoundFileError("fmt chunk not found", filename)


def _check_format(fmt: WaveFormat, filename: str) -> None:
    checks = (
        ("nChannels", fmt.channels, SYSTEM_FORMAT.channels),
        ("wBitsPerSample", fmt.bits_per_sample, SYSTEM_FORMAT.bits_per_sample),
        ("nSamplesPerSec", fmt.samples_per_sec, SYSTEM_FORMAT.samples_per_sec),
        ("wFormatTag", fmt.format_tag, SYSTEM_FORMAT.format_tag),
        ("nBlockAlign", fmt.block_align, SYSTEM_FORMAT.block_align),
        ("nAvgBytesPerSec", fmt.avg_bytes_per_sec, SYSTEM_FORMAT.avg_bytes_per_sec),
    )
    for field, actual, expected in checks:
        if actual != expected:
            raise SoundFileError(f"bad wave format ({field})", filename)


def _read_data(buf: bytes, filename: str) -> bytes:
    for chunk_id, size, body in _chunks(buf, filename):
        if chunk_id == b"data":
            if body + size > len(buf):
                raise SoundFileError("data chunk truncated", filename)
            return buf[body : body + size]
    raise SoundFileError("data chunk not found", filename)


def _read_cue_loop(buf: bytes, filename: str) -> Tuple[int, int]:
    for chunk_id, _, body in _chunks(buf, filename):
        if chunk_id != b"cue ":
            continue
        if body + 4 > len(buf):
            raise SoundFileError("cue chunk truncated", filename)
        if _U32.unpack_from(buf, body)[0] != 2:
            continue
        if body + 4 + 2 * _CUE_POINT.size > len(buf):
            raise SoundFileError("cue chunk truncated", filename)
        first = _CUE_POINT.unpack_from(buf, body + 4)
        second = _CUE_POINT.unpack_from(buf, body + 4 + _CUE_POINT.size)
        return first[5], second[5]
    raise SoundFileError("loop cue chunk not found", filename)


def _check_manual_range(start: int, end: int, n_frames: int) -> None:
    if not 0 <= start < n_frames:
        raise ValueError(f"loop start {start} outside sound of {n_frames} frames")
    if not start < end < n_frames:
        raise ValueError(f"loop end {end} must lie after {start} and before {n_frames}")


def load_wav(
    path: Union[str, PathLike],
    loop_type: LoopType = LoopType.NOT_LOOPING,
    loop_start_sample: Optional[int] = None,
    loop_end_sample: Optional[int] = None,
    loop_start_seconds: Optional[float] = None,
    loop_end_seconds: Optional[float] = None,
) -> SoundData:
    """Read a WAVE file in the mixer's format and work out its loop region.

    Raises SoundFileError for unreadable or malformed files and ValueError
    for loop arguments that do not fit the loop type or the sound.
    """
    _check_loop_args(
        loop_type, loop_start_sample, loop_end_sample, loop_start_seconds, loop_end_seconds
    )
    filename = str(path)
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise SoundFileError(exc.strerror or str(exc), filename) from exc

    if raw[:4] != b"RIFF":
        raise SoundFileError("Bad fourcc code", filename)
    if len(raw) < 8:
        raise SoundFileError("file truncated", filename)
    # the size entry counts neither the fourcc nor itself
    file_size = (_U32.unpack_from(raw, 4)[0] + 8) & 0xFFFFFFFF
    if file_size <= _MIN_FILE_SIZE:
        raise SoundFileError("file too small", filename)
    if len(raw) < file_size:
        raise SoundFileError("file truncated", filename)
    buf = raw[:file_size]

    if buf[8:12] != b"WAVE":
        raise SoundFileError("format not WAVE", filename)

    fmt = _read_format(buf, filename)
    _check_format(fmt, filename)
    data = _read_data(buf, filename)
    n_frames = len(data) // SYSTEM_FORMAT.block_align

    if loop_type is LoopType.NOT_LOOPING:
        return SoundData(data, format=fmt)
    if loop_type is LoopType.AUTO_EMBEDDED_CUE_POINTS:
        start, end = _read_cue_loop(buf, filename)
    elif loop_type is LoopType.MANUAL_FLOAT:
        frames_per_sec = SYSTEM_FORMAT.avg_bytes_per_sec // SYSTEM_FORMAT.block_align
        start = int(loop_start_seconds * float(frames_per_sec))
        end = int(loop_end_seconds * float(frames_per_sec))
        _check_manual_range(start, end, n_frames)
    elif loop_type is LoopType.MANUAL_SAMPLE:
        start, end = loop_start_sample, loop_end_sample
        _check_manual_range(start, end, n_frames)
    else:
        if n_frames == 0:
            raise ValueError("cannot auto full-loop on zero-length sound")
        start, end = 0, n_frames - 1
    return SoundData(data, True, start, end, fmt)