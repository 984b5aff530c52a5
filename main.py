import sys
import argparse
import logging
from pathlib import Path

import pygame

from config import *
from audio import DirectoryLoader, SynthLoader, MixerSink, SoundLoadError, load_sounds
from engine import InteractionEngine
from events import pygame_events
from piano_mapping import build_key_buffer
from utils import parse_note
from visualizer import Visualizer

logger = logging.getLogger(__name__)

WAVES = {'sine': WAVE_SINE, 'square': WAVE_SQUARE, 'saw': WAVE_SAW}


def parse_args(argv=None):
    ap = argparse.ArgumentParser(
        description="Clickable piano keys: click a key to play it",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter)

    ap.add_argument('--sounds', default=SOUNDS_DIR,
                    help='Directory of sound files, one key per file in name order')
    ap.add_argument('--synth', type=int, metavar='N', default=None,
                    help='Synthesize N key sounds instead of loading a directory')
    ap.add_argument('--start-note', default='C4',
                    help='Lowest synthesized note, as a name (C4) or MIDI number')
    ap.add_argument('--wave', choices=sorted(WAVES), default='sine',
                    help='Waveform for synthesized sounds')
    ap.add_argument('--width', type=int, default=CANVAS_WIDTH)
    ap.add_argument('--height', type=int, default=CANVAS_HEIGHT)
    ap.add_argument('--fps', type=int, default=FPS)
    ap.add_argument('--volume', type=float, default=DEFAULT_VOLUME)
    ap.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    return ap.parse_args(argv)


def make_loader(args):
    count = args.synth
    if count is None:
        if Path(args.sounds).is_dir():
            return DirectoryLoader(args.sounds)
        logger.info("No sounds directory at %s; synthesizing %d keys", args.sounds, SYNTH_KEY_COUNT)
        count = SYNTH_KEY_COUNT
    return SynthLoader(count, start_note=parse_note(args.start_note), wave=WAVES[args.wave])


# ---------------------- Main ----------------------
def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.mixer.pre_init(SAMPLE_RATE, BITSIZE, CHANNELS, AUDIO_BUFFER)
    pygame.init()
    if pygame.mixer.get_init():
        pygame.mixer.set_num_channels(MIXER_CHANNELS)
    else:
        logger.warning("Audio mixer unavailable; sounds will fail to load")

    try:
        sounds = load_sounds(make_loader(args))
    except SoundLoadError as e:
        logger.error("Startup failed: %s", e)
        pygame.quit()
        sys.exit(1)

    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption(WINDOW_TITLE)

    keys = build_key_buffer(sounds, args.width, args.height)
    logger.info("Built %d keys", len(keys))

    visualizer = Visualizer(screen)
    engine = InteractionEngine(keys, visualizer, MixerSink(args.volume))
    engine.run(visualizer.frames(pygame_events(fps=args.fps)))

    pygame.quit()

if __name__ == "__main__":
    main()
