WIDTH = 800
HEIGHT = 800
FPS = 60

BACKGROUND_COLOR = (238, 238, 236)

# Angle (degrees) of the sibling rays cast either side of each wall endpoint
RAY_JITTER_DEGREES = 0.5

DEFAULT_SAVE_PATH = "scene.json"
