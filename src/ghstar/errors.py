class GhStarError(Exception):
    pass


class MissingDependencyError(GhStarError):
    def __init__(self, executable: str, hint: str):
        super().__init__(f"{executable} not found, install it from {hint}")
        self.executable = executable
        self.hint = hint


class IdentityError(GhStarError):
    pass


class GhError(GhStarError):
    pass


class ConfigError(GhStarError):
    pass
