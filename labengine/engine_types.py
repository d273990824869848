"""Enumerations shared by the editor, the world and the viewports."""

from enum import Enum, IntEnum, auto


class ViewModeIndex(IntEnum):
    """How a viewport shades the scene."""

    LIT = 0
    UNLIT = 1
    WIREFRAME = 2
    DEPTH = 3


class LevelTick(IntEnum):
    """What a world tick updates."""

    TIME_ONLY = 0
    """Update the level time only."""
    VIEWPORTS_ONLY = 1
    """Update time and viewports."""
    ALL = 2
    """Update everything."""
    PAUSE_TICK = 3
    """Delta time is zero; components do not tick."""


class LevelViewportType(IntEnum):
    """Projection used by a level viewport."""

    PERSPECTIVE = 0
    ORTHO_XY = 1
    """Top."""
    ORTHO_NEGATIVE_XY = 2
    """Bottom."""
    ORTHO_YZ = 3
    """Left."""
    ORTHO_NEGATIVE_YZ = 4
    """Right."""
    ORTHO_XZ = 5
    """Front."""
    ORTHO_NEGATIVE_XZ = 6
    """Back."""
    MAX = 7
    NONE = 255


class EditorState(Enum):
    """Phases of the editor's play-in-editor cycle."""

    EDITING = auto()
    PREPARING_PLAY = auto()
    PLAYING = auto()
    PAUSED = auto()
    RESUMING = auto()
    STOPPED = auto()


class EndPlayReason(IntEnum):
    """Why an actor stopped playing."""

    DESTROYED = 0
    """Explicit deletion, e.g. by destroying the actor."""
    WORLD_TRANSITION = 1
    """The world changed."""
    QUIT = 2
    """The program is shutting down."""


class WorldType(IntEnum):
    """The role a world plays."""

    NONE = 0
    GAME = 1
    EDITOR = 2
    PIE = 3
    EDITOR_PREVIEW = 4
    GAME_PREVIEW = 5
    GAME_RPC = 6
    INACTIVE = 7