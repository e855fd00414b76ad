"""Ranges, defaults and lookup tables shared by the models and screens."""

# Board sizes that carry their own resign threshold
BOARD_SIZES = (7, 9, 11, 13, 15, 17, 19)

# GTP engine (Fuego) profile limits
MAX_MEMORY_MINIMUM = 16
MAX_MEMORY_MAXIMUM = 512
MAX_MEMORY_DEFAULT = 32
THREAD_COUNT_MINIMUM = 1
THREAD_COUNT_MAXIMUM = 8
THREAD_COUNT_DEFAULT = 1
PONDERING_DEFAULT = True
REUSE_SUBTREE_DEFAULT = True
MAX_PONDER_TIME_MINIMUM = 60  # seconds
MAX_PONDER_TIME_MAXIMUM = 3600
MAX_PONDER_TIME_DEFAULT = 300
MAX_THINKING_TIME_MINIMUM = 1  # seconds
MAX_THINKING_TIME_MAXIMUM = 120
MAX_THINKING_TIME_DEFAULT = 10
UNLIMITED_MAX_GAMES = 2**64 - 1
MAX_GAMES_DEFAULT = 10000  # playing strength 3
MAX_GAMES_BUCKETS = (
    1, 10, 100, 500, 1000, 2000, 5000, 10000, 15000, 20000, 50000, UNLIMITED_MAX_GAMES,
)

# Resign behaviour
RESIGN_THRESHOLD_MINIMUM = 0  # percent
RESIGN_THRESHOLD_MAXIMUM = 100
RESIGN_THRESHOLD_DEFAULT = 5
AUTO_SELECT_RESIGN_MIN_GAMES_DEFAULT = True
RESIGN_MIN_GAMES_BUCKETS = (0, 9, 99, 450, 950, 1950, 4950)
RESIGN_MIN_GAMES_DEFAULT = 4950

# Playing strength levels. Levels 1-3 only limit the number of playout games.
# Level 4 lifts that limit and reuses the subtree, level 5 also ponders.
MINIMUM_PLAYING_STRENGTH = 1
MAXIMUM_PLAYING_STRENGTH = 5
DEFAULT_PLAYING_STRENGTH = 3
CUSTOM_PLAYING_STRENGTH = -1
MAX_GAMES_PLAYING_STRENGTH_1 = 500
MAX_GAMES_PLAYING_STRENGTH_2 = 5000
MAX_GAMES_PLAYING_STRENGTH_3 = 10000
PLAYING_STRENGTH_PRESETS = {
    1: {"pondering": False, "reuse_subtree": False, "max_games": MAX_GAMES_PLAYING_STRENGTH_1},
    2: {"pondering": False, "reuse_subtree": False, "max_games": MAX_GAMES_PLAYING_STRENGTH_2},
    3: {"pondering": False, "reuse_subtree": False, "max_games": MAX_GAMES_PLAYING_STRENGTH_3},
    4: {"pondering": False, "reuse_subtree": True, "max_games": UNLIMITED_MAX_GAMES},
    5: {"pondering": True, "reuse_subtree": True, "max_games": UNLIMITED_MAX_GAMES},
}

# SGF syntax checking
MINIMUM_SYNTAX_CHECKING_LEVEL = 1
MAXIMUM_SYNTAX_CHECKING_LEVEL = 4
DEFAULT_SYNTAX_CHECKING_LEVEL = 2
CUSTOM_SYNTAX_CHECKING_LEVEL = -1

# SGFC message numbers that are disabled by default
SGFC_EMPTY_VALUE_DELETED = 34
SGFC_PROPERTY_NOT_DEFINED_IN_FF = 35
SGFC_EMPTY_NODE_DELETED = 38
SGFC_GAME_IS_NOT_GO = 49
SGFC_MORE_THAN_ONE_GAME_TREE = 52
DEFAULT_DISABLED_MESSAGES = (
    SGFC_EMPTY_VALUE_DELETED,
    SGFC_PROPERTY_NOT_DEFINED_IN_FF,
    SGFC_EMPTY_NODE_DELETED,
    SGFC_GAME_IS_NOT_GO,
    SGFC_MORE_THAN_ONE_GAME_TREE,
)

# Touch interaction
MAXIMUM_ZOOM_SCALE_MINIMUM = 1.0
MAXIMUM_ZOOM_SCALE_MAXIMUM = 3.0
MAXIMUM_ZOOM_SCALE_DEFAULT = 3.0
STONE_DISTANCE_FROM_FINGERTIP_DEFAULT = 0.5

# Display
MOVE_NUMBERS_PERCENTAGE_DEFAULT = 0.0
