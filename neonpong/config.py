import os
import pickle

# --- Configuration ---
WIDTH, HEIGHT = 800, 500
FPS = 60

# Speeds are pixels per frame (one tick == one frame)
PADDLE_WIDTH, PADDLE_HEIGHT = 10, 80
PADDLE_MARGIN = 10
PADDLE_SPEED = 6.0
PADDLE_DAMPING = 0.8  # keyboard velocity decay when no key is held
PADDLE_REST = 0.05

BALL_SIZE = 12
BALL_SERVE_DX = 5.0
BALL_SERVE_DY = 3.0
BALL_SPEEDUP = 1.05
MAX_BALL_SPEED = 12.0
SPIN_FACTOR = 2.0
SPIN_INFLUENCE = 0.3
TRAIL_LENGTH = 8

AI_SPEED = 3.5
AI_APPROACH_BOOST = 1.2
AI_JITTER_CHANCE = 0.05
AI_JITTER = 40.0
AI_DEADZONE = 10.0

PARTICLE_SPEED = (1.0, 4.0)
PARTICLE_LIFE = (20.0, 40.0)
PARTICLE_RADIUS = (1.5, 3.5)
PARTICLE_DAMPING = 0.94
MAX_PARTICLES = 600

FONT_SIZE = 48

# Colors
BG = (16, 18, 24)
WHITE = (240, 240, 240)
DARK = (85, 85, 85)
ACCENT = (100, 200, 255)
LEFT_COLOR = (97, 218, 251)
RIGHT_COLOR = (224, 108, 117)

# event -> (base particle count, tone frequency Hz, tone duration ms)
FEEDBACK = {
    "wall": (8, 300.0, 40),
    "paddle_left": (15, 520.0, 60),
    "paddle_right": (15, 440.0, 60),
    "score": (24, 220.0, 300),
    "serve": (10, None, None),
    "reset": (0, 660.0, 120),
}

AI_DIFFICULTIES = ["Easy", "Normal", "Hard"]
PARTICLE_QUALITIES = ["Low", "Normal", "High"]

# Default settings (changed in game with D / Q / M)
DEFAULT_SETTINGS = {
    "ai_difficulty": "Normal",     # Easy, Normal, Hard
    "particle_quality": "Normal",  # Low, Normal, High
    "sound": True,                 # enables tone playback
}


# Where to persist settings:
def get_config_path():
    user_profile = os.getenv("USERPROFILE") or os.path.expanduser("~")
    config_dir = os.path.join(user_profile, "AppData", "neonpong", "config")
    config_path = os.path.join(config_dir, "settings.pickle")
    return config_dir, config_path


def ensure_config_dir():
    config_dir, _ = get_config_path()
    try:
        os.makedirs(config_dir, exist_ok=True)
    except OSError:
        fallback = os.path.join(os.path.expanduser("~"), ".neonpong")
        os.makedirs(fallback, exist_ok=True)
        return fallback
    return config_dir


def normalize_settings(data):
    """Merge ``data`` over the defaults, dropping unknown keys and bad values."""
    settings = DEFAULT_SETTINGS.copy()
    if not isinstance(data, dict):
        return settings
    if data.get("ai_difficulty") in AI_DIFFICULTIES:
        settings["ai_difficulty"] = data["ai_difficulty"]
    if data.get("particle_quality") in PARTICLE_QUALITIES:
        settings["particle_quality"] = data["particle_quality"]
    if isinstance(data.get("sound"), bool):
        settings["sound"] = data["sound"]
    return settings


def load_settings():
    _, config_path = get_config_path()
    try:
        if os.path.exists(config_path):
            with open(config_path, "rb") as f:
                data = pickle.load(f)
            return normalize_settings(data)
    except Exception as e:
        print(f"error loading settings: {e}")
    return DEFAULT_SETTINGS.copy()


def save_settings(settings):
    config_dir = ensure_config_dir()
    _, config_path = get_config_path()
    if not os.path.isdir(os.path.dirname(config_path)):
        config_path = os.path.join(config_dir, "settings.pickle")
    try:
        with open(config_path, "wb") as f:
            pickle.dump(normalize_settings(settings), f)
    except OSError as e:
        print(f"error writing settings: {e}")
        return False
    return True


def cycle(values, current):
    """Next entry after ``current`` in ``values``, wrapping around."""
    try:
        i = values.index(current)
    except ValueError:
        return values[0]
    return values[(i + 1) % len(values)]
