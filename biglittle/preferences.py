"""Preference graph of a matching problem."""

import numpy as np
from scipy import sparse as sp

from biglittle.errors import PreferenceError
from biglittle.registry import Kind

__all__ = ["PreferenceGraph"]


class PreferenceGraph():
  """Ranked preference lists of every registered participant.

  Each participant owns an ordered tuple of counterpart identifiers, most
  preferred first. Rank lookup goes through a per-participant dictionary so
  that `rank_of` is constant time.

  Attributes:
    registry: the `ParticipantRegistry` the lists refer to.
  """
  def __init__(self, registry, pref_lists=None):
    """
    Args:
      registry: a `ParticipantRegistry` holding every participant mentioned
        in `pref_lists`.
      pref_lists: mapping from identifier to a sequence of counterpart
        identifiers. Participants missing from the mapping get an empty list.

    Raises:
      PreferenceError if a list belongs to an unregistered participant,
        names a participant of the same kind or an unknown one, or contains
        duplicates.
    """
    self.registry = registry
    self._pref_lists = {}
    self._lookup = {}
    for identifier, li in (pref_lists or {}).items():
      kind = registry.kind_of(identifier)
      if kind is Kind.UNKNOWN:
        raise PreferenceError(
            "Preference list given for unknown participant {0!r}.".format(
                identifier))
      if isinstance(li, (str, bytes)):
        raise PreferenceError(
            "Preference list of {0!r} must be a sequence of identifiers, "
            "not a string.".format(identifier))
      li = tuple(li)
      for other in li:
        if registry.kind_of(other) is not kind.opposite:
          raise PreferenceError(
              "{0} {1!r} ranks {2!r}, which is not a registered {3}.".format(
                  kind.value.capitalize(), identifier, other,
                  kind.opposite.value))
      lookup = {li[i]: i for i in range(len(li))}
      if len(lookup) != len(li):
        raise PreferenceError(
            "Preference list of {0!r} contains duplicates.".format(identifier))
      self._pref_lists[identifier] = li
      self._lookup[identifier] = lookup

  def __repr__(self):
    return "<PreferenceGraph with {0} ranked pairs>".format(
        sum(len(li) for li in self._pref_lists.values()))

  def preferences_of(self, identifier):
    """Returns the preference list of `identifier`, best first.

    An empty tuple is returned when nothing was recorded.
    """
    return self._pref_lists.get(identifier, ())

  def rank_of(self, identifier, counterpart):
    """Obtains the zero-based rank of `counterpart` in `identifier`'s list.

    Returns:
      The rank, or None if `counterpart` is not in the list.
    """
    lookup = self._lookup.get(identifier)
    if lookup is None:
      return None
    return lookup.get(counterpart)

  def accepts(self, identifier, counterpart):
    """True if `counterpart` is in `identifier`'s preference list."""
    return self.rank_of(identifier, counterpart) is not None

  def mutually_accept(self, anchor, dependent):
    """True if the anchor and the dependent list each other."""
    return self.accepts(anchor, dependent) and self.accepts(dependent, anchor)

  def next_acceptable(self, dependent, after=None):
    """Finds the next anchor in `dependent`'s list that accepts it back.

    Args:
      dependent: identifier of a dependent.
      after: optional anchor; the scan starts right after its rank in the
        dependent's list. If None or unranked, the scan starts from the top.

    Returns:
      The first mutually accepting anchor found, or None if the list is
      exhausted.
    """
    li = self.preferences_of(dependent)
    start = 0
    if after is not None:
      rank = self.rank_of(dependent, after)
      if rank is not None:
        start = rank + 1
    for anchor in li[start:]:
      if self.accepts(anchor, dependent):
        return anchor
    return None

  def _rank_matrix(self, owners, counterparts, transpose):
    I, J, V = [], [], []
    for i, owner in enumerate(owners):
      for rank, other in enumerate(self.preferences_of(owner)):
        I.append(i)
        J.append(self.registry.index_of(other))
        V.append(rank + 1)  # shift so that 0 means "not ranked"
    shape = (len(owners), len(counterparts))
    M = sp.coo_matrix((V, (I, J)), shape=shape, dtype=np.int64)
    if transpose:
      M = M.T
    return M.toarray() - 1

  def rank_matrices(self):
    """Creates dense rank matrices indexed by registration order.

    Returns:
      anchor_ranks: (num_anchor, num_dependent) int64 array where entry
        [a, d] is the rank anchor a gives dependent d, -1 if unranked.
      dependent_ranks: array of the same shape where entry [a, d] is the rank
        dependent d gives anchor a, -1 if unranked.
    """
    anchors = self.registry.anchors()
    dependents = self.registry.dependents()
    anchor_ranks = self._rank_matrix(anchors, dependents, transpose=False)
    dependent_ranks = self._rank_matrix(dependents, anchors, transpose=True)
    return anchor_ranks, dependent_ranks

  def to_dict(self):
    """Preference lists as plain lists, in registration order."""
    return {
        identifier: list(self.preferences_of(identifier))
        for identifier in self.registry.anchors() + self.registry.dependents()
    }
