"""Exceptions raised while loading and running a scene."""


class CubError(Exception):
    """Base class for every error the game reports to the user."""


class MapError(CubError):
    """The scene file or its map is malformed."""


class TextureError(CubError):
    """A texture could not be loaded or has the wrong size."""