"""Error types raised by the logging pipeline"""


class ConfigurationError(ValueError):
    """
    Raised when the logging pipeline is wired incorrectly.

    Covers appenders used without a layout, layouts attached to
    appenders that could not be constructed, and malformed config
    descriptors.
    """
