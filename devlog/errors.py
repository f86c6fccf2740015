"""Exceptions raised by devlog."""


class TaskHalted(BaseException):
    """
    Raised after a fatal report (error or failed assertion) has reached
    the sink. The calling task stops here.

    Derives from BaseException so that ordinary ``except Exception``
    handlers in the caller do not swallow it.
    """

    def __init__(self, label: str, text: str):
        super().__init__(f"{label} reported; task halted")
        self.label = label
        self.text = text


class ConfigError(ValueError):
    """Invalid formatter configuration."""
