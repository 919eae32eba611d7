"""
Constants for monument_safezones.
"""

# Registration
ADDON_NAME = "safezone"
HOST_PLUGIN_NAME = "MonumentAddons"

# Commands the host dispatches to this addon
SPAWN_COMMAND = "maspawn"
EDIT_COMMAND = "maedit"
MIN_EDIT_ARGS = 2

# Zone defaults
DEFAULT_RADIUS = 10.0

# Trigger settings (-1 disables the altitude/depth bounds)
TRIGGER_MAX_ALTITUDE = -1
TRIGGER_MAX_DEPTH = -1

# Debug drawing
ANCHOR_MARKER_RADIUS = 0.25
BOX_CORNER_RADIUS = 0.5
