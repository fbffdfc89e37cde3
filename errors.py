# errors.py
class EnigmaError(Exception):
    """Base for all machine exceptions."""

    pass


class ConfigurationError(EnigmaError, ValueError):
    """Machine settings that cannot produce a working machine."""

    pass
