"""Exception hierarchy for dactyl-oas."""


class DactylError(Exception):
    """Base class for all errors raised by dactyl-oas."""


class ConfigurationError(DactylError):
    """Controller metadata does not have the expected shape."""


class PathConflictError(DactylError):
    """Two routes declare the same path and method while building in strict mode."""

    def __init__(self, path: str, method: str, controller: str | None = None):
        self.path = path
        self.method = method
        self.controller = controller
        where = f" (controller {controller})" if controller else ""
        super().__init__(f"Duplicate operation {method} {path}{where}")
