"""Centralized configuration constants."""

import pygame

# Screen defaults
DEFAULT_SCREEN_WIDTH = 1280
DEFAULT_SCREEN_HEIGHT = 720

# Update rates
TARGET_RENDERING_FPS = 60

# Longest frame step fed to the viewport; keeps dt * DEFAULT_SMOOTH_ZOOM_SPEED <= 1
MAX_FRAME_TIME = 0.1

# Viewport defaults
DEFAULT_ZOOM = 1.0
DEFAULT_MIN_ZOOM = 0.01
DEFAULT_MAX_ZOOM = 1.0
DEFAULT_ZOOM_STEP = 0.1
DEFAULT_SMOOTH_ZOOM_SPEED = 10.0
DEFAULT_SMOOTH_PAN_SPEED = 60.0

# Fixed bounds for explicit set_zoom (independent of the configured wheel bounds)
SET_ZOOM_MIN = 0.0001
SET_ZOOM_MAX = 1.0

# Zoom snaps to its target once the gap is at or below this
ZOOM_SNAP_EPSILON = 0.001

# Per-frame velocity factors
DRAG_VELOCITY_RETAIN = 0.8
COAST_DECAY = 0.95

# Mouse
PRIMARY_BUTTON = pygame.BUTTON_LEFT

# Demo grid spacing in world units
DEFAULT_GRID_SIZE = 50.0
