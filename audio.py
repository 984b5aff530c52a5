"""
audio.py

Sound loading and playback. Loaders are awaited once at startup and resolve
to the complete, index-ordered list of decoded sounds; nothing is built from
a partial set.
"""

import asyncio
import logging
from pathlib import Path

import pygame

from config import SOUNDS_DIR, SOUND_EXTENSIONS, WAVE_SINE, SYNTH_START_NOTE, DEFAULT_VOLUME
from utils import gen_waveform, midi_to_freq

logger = logging.getLogger(__name__)


class SoundLoadError(Exception):
    """Raised when the full sound set cannot be loaded."""


# ---------------------- Loaders ----------------------
class DirectoryLoader:
    """Decodes every audio file in a directory, one key per file, in sorted name order."""

    def __init__(self, path=SOUNDS_DIR, extensions=SOUND_EXTENSIONS):
        self.path = Path(path)
        self.extensions = tuple(ext.lower() for ext in extensions)

    def list_files(self):
        if not self.path.is_dir():
            raise SoundLoadError(f"Sounds directory not found: {self.path}")
        files = sorted(p for p in self.path.iterdir()
                       if p.is_file() and p.suffix.lower() in self.extensions)
        if not files:
            raise SoundLoadError(f"No sound files in {self.path}")
        return files

    def decode(self, path):
        try:
            sound = pygame.mixer.Sound(str(path))
        except (pygame.error, FileNotFoundError) as e:
            raise SoundLoadError(f"Failed to decode {path.name}: {e}") from e
        logger.debug("Decoded %s", path.name)
        return sound

    async def load(self):
        files = self.list_files()
        logger.info("Loading %d sounds from %s", len(files), self.path)
        # gather keeps the input order whatever order the decodes finish in
        return await asyncio.gather(*(asyncio.to_thread(self.decode, p) for p in files))


class SynthLoader:
    """Renders one tone per key, chromatically upwards from start_note."""

    def __init__(self, count, start_note=SYNTH_START_NOTE, wave=WAVE_SINE):
        self.count = count
        self.start_note = start_note
        self.wave = wave

    def decode(self, index):
        try:
            return gen_waveform(self.wave, midi_to_freq(self.start_note + index))
        except pygame.error as e:
            raise SoundLoadError(f"Failed to synthesize key {index}: {e}") from e

    async def load(self):
        logger.info("Synthesizing %d sounds from MIDI note %d", self.count, self.start_note)
        return await asyncio.gather(*(asyncio.to_thread(self.decode, i) for i in range(self.count)))


def load_sounds(loader):
    """Run a loader to completion and return its ordered sounds."""
    return asyncio.run(loader.load())


# ---------------------- Playback ----------------------
class MixerSink:
    """Fire-and-forget playback through pygame.mixer."""

    def __init__(self, volume=DEFAULT_VOLUME):
        self.volume = volume

    def play(self, sound):
        if sound is None:
            return
        ch = sound.play()
        if ch:
            ch.set_volume(self.volume)
