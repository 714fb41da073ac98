# --- Display ---
WIDTH = 1500
HEIGHT = 400
FPS = 60
GROUND_MARGIN = 40          # px between field bottom and the ground line (render only)

# --- Timing ---
TICK_MS = 20                # simulation + jump interval period (ms)
FRAME_MS = 16.67            # nominal 60 Hz frame, used to normalize jump dt
MAX_FRAME_MS = 100          # clamp stalls when driving the scheduler from wall time

# --- Player ---
PLAYER_X = 50               # player's fixed x (obstacles scroll left)
PLAYER_W = 50
PLAYER_H = 50

# --- Obstacles ---
OBSTACLE_W = 30
OBSTACLE_H = 50
SPAWN_MIN_MS = 1100
SPAWN_MAX_MS = 2500

# --- Difficulty ---
BASE_SPEED = 5.0            # px per tick
SPEED_SCALE = 5.0           # speed = BASE_SPEED + SPEED_SCALE * ln(score + 1)

# --- Planets: name -> (gravity, jump impulse), per nominal frame ---
PLANETS = {
    "Earth": (0.8, 15.0),
    "Moon": (0.2, 12.0),
    "Mars": (0.5, 14.0),
    "Jupiter": (1.2, 18.0),
}
DEFAULT_PLANET = "Earth"

SEED_DEFAULT = None         # None -> fresh random obstacle timing each launch

# --- Debug ---
DEBUG_OVERLAY = False

# --- Colors (RGB) ---
COLOR_BG = (247, 247, 247)
COLOR_FG = (51, 51, 51)
COLOR_GROUND = (120, 120, 120)
COLOR_PLAYER = (60, 110, 200)
COLOR_OBSTACLE = (40, 150, 70)
COLOR_DANGER = (220, 40, 40)
COLOR_MUTED = (130, 130, 150)
