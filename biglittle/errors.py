"""Exceptions raised by the biglittle package."""

__all__ = [
    "BigLittleError", "RegistryError", "DuplicateRoleError",
    "DuplicateIdentifierError", "PreferenceError", "MatchingInvariantError"
]


class BigLittleError(Exception):
  """Base class of all biglittle errors."""


class RegistryError(BigLittleError):
  """A participant could not be registered."""


class DuplicateRoleError(RegistryError):
  """An identifier was registered both as an anchor and as a dependent."""


class DuplicateIdentifierError(RegistryError):
  """An identifier was registered twice with conflicting data."""


class PreferenceError(BigLittleError, ValueError):
  """Preference data is malformed or refers to unknown participants."""


class MatchingInvariantError(BigLittleError, RuntimeError):
  """The matching engine reached an inconsistent state.

  This indicates a bug in the engine rather than bad input; the run is
  aborted instead of returning a partial result.
  """
