class TitleError(Exception):
    """Base class for errors raised while building title inputs."""


class MalformedContainerError(TitleError):
    pass


class ConfigError(TitleError):
    pass
