class DeepCliError(Exception):
    """Base class for every error that terminates a deepcli invocation"""
    pass


class ConfigurationError(DeepCliError):
    """Raised when the API key or runtime options are missing or invalid"""
    pass
