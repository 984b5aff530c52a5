# ---------------------- Config ----------------------
SAMPLE_RATE = 44100
BITSIZE = -16          # 16-bit signed
CHANNELS = 2
AUDIO_BUFFER = 256     # smaller = lower latency, but risk crackles
MIXER_CHANNELS = 64
DEFAULT_VOLUME = 0.6

WAVE_SINE = 0
WAVE_SQUARE = 1
WAVE_SAW = 2

# Envelope for synthesized key sounds
ENV_ATTACK = 0.005
ENV_DECAY = 0.08
ENV_SUSTAIN = 0.85
ENV_RELEASE = 0.4
SYNTH_DURATION = 2.5
SYNTH_START_NOTE = 60  # C4 = middle C
SYNTH_KEY_COUNT = 36   # three octaves

# Sounds directory: every supported file becomes one key, in sorted name order
SOUNDS_DIR = "sounds"
SOUND_EXTENSIONS = (".mp3", ".ogg", ".wav", ".flac")

# ---------------------- Canvas ----------------------
CANVAS_WIDTH = 800
CANVAS_HEIGHT = 200
FPS = 60
BG = (16, 16, 16)
WINDOW_TITLE = "Piano Canvas"

# ---------------------- Layout ----------------------
NATURAL_KEY_SPAN = 21            # naturals across the canvas, fixed at three octaves
ACCENT_WIDTH_RATIO = 0.5         # of a natural key
ACCENT_HEIGHT_RATIO = 0.625      # of the canvas
ACCENT_POSITIONS = (1, 3, 6, 8, 10)  # within a 12 note octave

# ---------------------- Keys ----------------------
NATURAL_COLOR = (255, 255, 255)
ACCENT_COLOR = (0, 0, 0)
HIGHLIGHT_COLOR = (255, 160, 122)
NATURAL_STROKE = ("gray", 2)
ACCENT_STROKE = ("black", 1)
FADE_MS = 800
