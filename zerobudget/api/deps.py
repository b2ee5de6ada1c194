from ..config import Preferences, load_preferences


def get_preferences() -> Preferences:
    """Formatting preferences for the current request."""
    return load_preferences()
