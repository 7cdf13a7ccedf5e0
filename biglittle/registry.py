"""Participant registry.

Keeps the two disjoint identifier sets of a matching problem, anchors and
dependents, in registration order.
"""

import enum

from biglittle.errors import (
    DuplicateIdentifierError, DuplicateRoleError, RegistryError)

__all__ = ["Kind", "ParticipantRegistry"]


class Kind(enum.Enum):
  """Role of a participant."""
  ANCHOR = "anchor"
  DEPENDENT = "dependent"
  UNKNOWN = "unknown"

  @property
  def opposite(self):
    """The role of the other side, `UNKNOWN` stays `UNKNOWN`."""
    if self is Kind.ANCHOR:
      return Kind.DEPENDENT
    elif self is Kind.DEPENDENT:
      return Kind.ANCHOR
    return Kind.UNKNOWN


class ParticipantRegistry():
  """Insertion-ordered membership table of anchors and dependents.

  Attributes:
    num_anchor: Number of registered anchors.
    num_dependent: Number of registered dependents.
  """
  def __init__(self):
    # identifier -> (kind, index within kind, data)
    self._records = {}
    self._members = {Kind.ANCHOR: [], Kind.DEPENDENT: []}

  def __repr__(self):
    return "<ParticipantRegistry with {a} anchors and {d} dependents>".format(
        a=self.num_anchor, d=self.num_dependent)

  def __contains__(self, identifier):
    try:
      return identifier in self._records
    except TypeError:
      return False

  def __len__(self):
    return len(self._records)

  @property
  def num_anchor(self):
    return len(self._members[Kind.ANCHOR])

  @property
  def num_dependent(self):
    return len(self._members[Kind.DEPENDENT])

  def register(self, identifier, kind, data=None):
    """Registers `identifier` under `kind`.

    Registering the same identifier twice under the same kind with equal
    `data` is a no-op.

    Args:
      identifier: hashable participant key (typically a string or integer).
      kind: `Kind.ANCHOR` or `Kind.DEPENDENT`.
      data: optional payload kept alongside the identifier.

    Raises:
      DuplicateRoleError: `identifier` is registered under the other kind.
      DuplicateIdentifierError: `identifier` is registered under `kind` with
        different `data`.
      RegistryError: `kind` is not a concrete role or `identifier` is not a
        valid key.
    """
    if kind not in (Kind.ANCHOR, Kind.DEPENDENT):
      raise RegistryError("Cannot register {0!r} as {1}.".format(identifier, kind))
    if identifier is None:
      raise RegistryError("Participant identifier cannot be None.")
    try:
      record = self._records.get(identifier)
    except TypeError:
      raise RegistryError(
          "Participant identifier {0!r} is not hashable.".format(identifier))
    if record is not None:
      old_kind, _, old_data = record
      if old_kind is not kind:
        raise DuplicateRoleError(
            "{0!r} is already registered as {1}.".format(
                identifier, old_kind.value))
      if old_data != data:
        raise DuplicateIdentifierError(
            "{0!r} is already registered as {1} with different data.".format(
                identifier, kind.value))
      return
    members = self._members[kind]
    self._records[identifier] = (kind, len(members), data)
    members.append(identifier)

  def kind_of(self, identifier):
    """Returns the `Kind` of `identifier`, `Kind.UNKNOWN` if unregistered."""
    if identifier not in self:
      return Kind.UNKNOWN
    return self._records[identifier][0]

  def index_of(self, identifier):
    """Returns the registration position of `identifier` within its kind.

    Raises:
      KeyError if `identifier` is not registered.
    """
    return self._records[identifier][1]

  def data_of(self, identifier):
    """Returns the payload `identifier` was registered with."""
    return self._records[identifier][2]

  def anchors(self):
    """Returns anchor identifiers in registration order."""
    return list(self._members[Kind.ANCHOR])

  def dependents(self):
    """Returns dependent identifiers in registration order."""
    return list(self._members[Kind.DEPENDENT])

  def members(self, kind):
    return list(self._members[kind])
