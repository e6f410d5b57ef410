class UnknownLevel(ValueError):
    """Raised when a level key is not one of the fixed presets."""


class InvalidTransition(RuntimeError):
    """Raised when the game is asked to change state from the wrong screen."""
