FPS = 60

GAME_WIDTH = 800
GAME_HEIGHT = 600

# Snake physics (per tick)
INITIAL_SNAKE_SPEED = 2.5
SPEED_INCREMENT = 0.05
MAX_SPEED = 6.0
GRAVITY_FORCE = 0.08
TURN_RATE = 0.15
SNAKE_WIDTH = 10
INITIAL_LENGTH = 20
INITIAL_SEGMENT_SPACING = 2
GROWTH_RATE = 10

# Self collision: the first SELF_COLLISION_IGNORE trail points behind the head
# are never tested, so tight turns do not kill the snake.
SELF_COLLISION_IGNORE = 20
SELF_COLLISION_FACTOR = 0.8

FOOD_SIZE = 12
FOOD_POINTS = 10
FOOD_SPAWN_MARGIN = 50
FOOD_PHASE_STEP = 0.05

PARTICLE_COUNT = 15
DEATH_PARTICLE_COUNT = 50
PARTICLE_MIN_SPEED = 1.0
PARTICLE_MAX_SPEED = 4.0
PARTICLE_MIN_DECAY = 0.02
PARTICLE_MAX_DECAY = 0.04

# Timers in milliseconds
GRAVITY_CHANGE_INTERVAL = 8000
GRACE_PERIOD = 1000
GRAVITY_FLASH_DURATION = 300

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
DARK_GREY = (50, 50, 50)

PRIMARY_NEON = '#00f2ff'
ACCENT_NEON = '#ff00c8'
SECONDARY_NEON = '#7000ff'

COLOR_OPTIONS = (PRIMARY_NEON, ACCENT_NEON, SECONDARY_NEON, '#39ff14', '#ffd700')
THEMES = ('space', 'neon', 'void')
DEFAULT_COLOR = PRIMARY_NEON
DEFAULT_THEME = 'space'

GLOW_INTENSITY = 15
GRID_SPACING = 50
SPACE_GRID_COLOR = (0, 242, 255, 8)
NEON_BACKGROUND = (10, 10, 32)
NEON_GRID_COLOR = (255, 0, 255, 13)

# On-screen d-pad (pointer/touch input), bottom-right corner
PAD_BUTTON_SIZE = 44
PAD_MARGIN = 16

# Webcam finger pointer
CAMERA_WIDTH = 640
CAMERA_HEIGHT = 480
CAMERA_MIRROR = True
FINGER_DEAD_ZONE = 30
SMOOTHING_WINDOW = 15
SMOOTHING_FACTOR = 0.15

# Profile persistence
PROFILE_FILE = 'snike_profile.json'
KEY_USER = 'snike_user'
KEY_HIGHSCORE = 'snike_highscore'
KEY_COLOR = 'snike_color'
KEY_THEME = 'snike_theme'
