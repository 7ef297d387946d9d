import random
import sys
import wave as stdwave
from array import array

import pytest

from brickout.errors import SoundFileError
from brickout.sound_system import Sound, SoundEffect, SoundSystem
from brickout.wave import LoopType


def _to_bytes(samples):
    arr = array("h", samples)
    if sys.byteorder == "big":
        arr.byteswap()
    return arr.tobytes()


def _from_bytes(data):
    arr = array("h")
    arr.frombytes(data)
    if sys.byteorder == "big":
        arr.byteswap()
    return list(arr)


SAMPLES = [100, -100, 200, -200, 300, -300, 400, -400]


def _write_wav(path, samples=SAMPLES):
    with stdwave.open(str(path), "wb") as w:
        w.setnchannels(2)
        w.setsampwidth(2)
        w.setframerate(44100)
        w.writeframes(_to_bytes(samples))
    return path


@pytest.fixture
def wav_path(tmp_path):
    return _write_wav(tmp_path / "beep.wav")


@pytest.fixture
def system():
    return SoundSystem()


def test_plays_samples_unchanged(wav_path, system):
    sound = Sound.from_file(wav_path, system=system)
    sound.play()
    assert _from_bytes(system.render(4)) == SAMPLES
    assert system.active_count() == 0
    assert sound.active_count() == 0


def test_render_pads_with_silence(wav_path, system):
    Sound.from_file(wav_path, system=system).play()
    out = _from_bytes(system.render(6))
    assert out[: len(SAMPLES)] == SAMPLES
    assert out[len(SAMPLES):] == [0, 0, 0, 0]


def test_render_length_matches_format(system):
    assert len(system.render(10)) == 10 * system.format.block_align


def test_two_voices_add_up(wav_path, system):
    sound = Sound.from_file(wav_path, system=system)
    sound.play()
    sound.play()
    assert sound.active_count() == 2
    assert _from_bytes(system.render(4)) == [2 * s for s in SAMPLES]


def test_frequency_ratio_skips_frames(wav_path, system):
    Sound.from_file(wav_path, system=system).play(freq_mod=2.0)
    out = _from_bytes(system.render(4))
    assert out[:4] == SAMPLES[0:2] + SAMPLES[4:6]
    assert out[4:] == [0, 0, 0, 0]
    assert system.active_count() == 0


def test_auto_full_loop_repeats(wav_path, system):
    sound = Sound.from_file(wav_path, LoopType.AUTO_FULL_SOUND, system)
    sound.play()
    out = _from_bytes(system.render(6))
    loop = SAMPLES[:6]
    assert out == loop + loop
    assert sound.active_count() == 1


def test_stop_all_frees_channels(wav_path, system):
    sound = Sound.from_file(wav_path, LoopType.AUTO_FULL_SOUND, system)
    sound.play()
    sound.play()
    sound.stop_all()
    assert sound.active_count() == 0
    assert system.active_count() == 0
    assert set(_from_bytes(system.render(4))) == {0}


def test_stop_one_leaves_the_rest(wav_path, system):
    sound = Sound.from_file(wav_path, LoopType.AUTO_FULL_SOUND, system)
    sound.play()
    sound.play()
    sound.stop_one()
    assert sound.active_count() == 1
    assert system.active_count() == 1


def test_channel_limit_ignores_extra_plays(wav_path):
    system = SoundSystem(channels=1)
    sound = Sound.from_file(wav_path, system=system)
    sound.play()
    sound.play()
    assert system.active_count() == 1
    assert _from_bytes(system.render(4)) == SAMPLES


def test_master_volume_zero_silences(wav_path, system):
    system.set_master_volume(0.0)
    Sound.from_file(wav_path, system=system).play()
    assert set(_from_bytes(system.render(4))) == {0}


def test_mix_is_clamped(tmp_path, system):
    path = _write_wav(tmp_path / "loud.wav", [30000, -30000] * 4)
    sound = Sound.from_file(path, system=system)
    sound.play()
    sound.play()
    out = _from_bytes(system.render(1))
    assert out == [32767, -32768]


def test_empty_sound_ends_silently(system):
    sound = Sound(system=system)
    sound.play()
    assert set(_from_bytes(system.render(2))) == {0}
    assert system.active_count() == 0


def test_invalid_frequency_ratio(wav_path, system):
    sound = Sound.from_file(wav_path, system=system)
    with pytest.raises(ValueError):
        sound.play(freq_mod=0.0)


def test_negative_frame_count(system):
    with pytest.raises(ValueError):
        system.render(-1)


def test_non_wav_rejected(tmp_path, system):
    path = tmp_path / "music.mp3"
    path.write_bytes(b"ID3")
    with pytest.raises(SoundFileError):
        Sound.from_file(path, system=system)


def test_missing_file(tmp_path, system):
    with pytest.raises(SoundFileError):
        Sound.from_file(tmp_path / "missing.wav", system=system)


def test_bool_loop_needs_cue_chunk(wav_path, system):
    with pytest.raises(SoundFileError, match="loop cue chunk not found"):
        Sound.from_file(wav_path, True, system)


def test_sound_effect_plays_one_variation(wav_path, system):
    effect = SoundEffect([wav_path, wav_path], system=system)
    effect.play(random.Random(1))
    assert system.active_count() == 1
    assert sum(s.active_count() for s in effect.sounds) == 1


def test_sound_effect_soft_fail(tmp_path, system):
    effect = SoundEffect([tmp_path / "missing.wav"], soft_fail=True, system=system)
    assert len(effect.sounds) == 1
    assert effect.sounds[0].data.data == b""


def test_sound_effect_hard_fail(tmp_path, system):
    with pytest.raises(SoundFileError):
        SoundEffect([tmp_path / "missing.wav"], system=system)


def test_sound_effect_needs_files(system):
    with pytest.raises(ValueError):
        SoundEffect([], system=system)