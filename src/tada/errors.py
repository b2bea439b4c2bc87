"""Error types shared across the CLI, store and TUI layers.

Validation failures inside the interactive session are not exceptions:
they live on the text entry as an inline message.
"""


class TadaError(Exception):
    """Base class for all tada failures that reach the CLI."""


class StorageError(TadaError):
    """The item file could not be read, parsed or written."""


class ConfigError(TadaError):
    """The config file or a root option holds an unusable value."""


class CredentialsError(TadaError):
    """The credentials file could not be read or the token is invalid."""


class EmptyTokenError(CredentialsError):
    """`login` was given nothing but whitespace or a bare Bearer prefix."""
