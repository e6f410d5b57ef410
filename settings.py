# settings.py
WIDTH, HEIGHT = 400, 600
FPS = 60
# Design width every distance, speed and gap below is expressed in
REFERENCE_WIDTH = 400

# Thread (player) settings
THREAD_LENGTH = 15  # number of segments
SEGMENT_GAP = 8     # horizontal gap between segments
HEAD_X = 40
GRAVITY = 0.25
LIFT = -6
SMOOTHNESS = 0.4    # how quickly each segment catches up with the one ahead (0-1)

# Wall settings
WALL_WIDTH = 30
SPAWN_MARGIN = 50   # keep the gap this far from the top and bottom edges
WALL_RADIUS = 10

# Colors
CLR_BG = (255, 240, 245)
CLR_THREAD_LIGHT = (255, 179, 198)
CLR_THREAD = (255, 133, 162)
CLR_WALL = (250, 250, 250)
CLR_WALL_EDGE = (230, 200, 210)
CLR_TEXT = (90, 60, 70)
CLR_BUTTON = (255, 133, 162)
CLR_BUTTON_TEXT = (255, 255, 255)
