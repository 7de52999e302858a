"""Exceptions raised by gql-doc-catalog."""


class MalformedDocument(ValueError):
    """The input could not be built into a document tree at all."""


class SettingsError(ValueError):
    """A settings file could not be read or validated."""
