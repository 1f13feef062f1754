"""
Global constants for Jetcaster TV.
Contains path configuration, display settings, colors, and timing constants.
"""

import os

# **************************************************************** #
#                       Build Info                                     #
# **************************************************************** #
APP_NAME = "Jetcaster"
APP_VERSION = "dev"

# **************************************************************** #
#                       Environment Detection                        #
# **************************************************************** #
DEV_MODE = os.getenv("DEV_MODE", "false").lower() == "true"

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
ASSETS_DIR = os.path.join(PACKAGE_DIR, "assets")
BUNDLED_CATALOG_FILE = os.path.join(ASSETS_DIR, "catalog.json")

# **************************************************************** #
#                       Path Configuration                           #
# **************************************************************** #
if DEV_MODE:
    DATA_DIR = os.path.join(PACKAGE_DIR, "..", "..", "workdir")
else:
    DATA_DIR = os.getenv(
        "JETCASTER_HOME", os.path.join(os.path.expanduser("~"), ".jetcaster-tv")
    )

TEMP_LOG_DIR = DATA_DIR
CONFIG_FILE = os.path.join(DATA_DIR, "config.json")
CONTROLLER_MAPPING_FILE = os.path.join(DATA_DIR, "controller_mapping.json")
LOG_FILE = os.path.join(TEMP_LOG_DIR, "error.log")

# **************************************************************** #
#                       Display Settings                             #
# **************************************************************** #
FPS = 30
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
# Layout is specified for a 960x540 dp canvas (TV safe design size)
DESIGN_WIDTH_DP = 960

# **************************************************************** #
#                       Color Palette                                #
# **************************************************************** #
BACKGROUND = (18, 18, 20)
SURFACE = (32, 33, 36)
SURFACE_HOVER = (48, 49, 54)
SURFACE_SELECTED = (62, 58, 44)

PRIMARY = (249, 170, 51)  # Jetcaster amber
PRIMARY_DARK = (196, 128, 22)
PRIMARY_LIGHT = (255, 205, 120)

TEXT_PRIMARY = (236, 236, 238)
TEXT_SECONDARY = (170, 171, 178)
TEXT_DISABLED = (96, 97, 104)

ERROR = (242, 108, 96)

# **************************************************************** #
#                       Artwork                                      #
# **************************************************************** #
ARTWORK_REQUEST_TIMEOUT = 10
CATALOG_REQUEST_TIMEOUT = 10

# **************************************************************** #
#                       Navigation Timing                            #
# **************************************************************** #
NAVIGATION_INITIAL_DELAY = 300  # ms before repeating starts
NAVIGATION_START_RATE = 250  # ms between repeats when starting (slow)
NAVIGATION_MAX_RATE = 80  # ms between repeats at maximum speed (fast)
NAVIGATION_ACCELERATION = 0.90  # Acceleration factor per repeat
