"""Exception types raised by the path tracer."""


class PathTracerError(Exception):
    """Base class for errors raised while configuring or building a render."""


class ConfigError(PathTracerError, ValueError):
    """Invalid render settings."""


class TextureLoadError(PathTracerError):
    """A texture file exists but could not be decoded."""


class UnknownSceneError(PathTracerError, KeyError):
    """No scene is registered under the requested name."""


class ImageWriteError(PathTracerError):
    """The rendered image could not be encoded to the requested output."""
