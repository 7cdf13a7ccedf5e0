"""Big-Little matching library for python3.

Create and solve a Big-Little matching instance: anchors ("Bigs") host any
number of dependents ("Littles"), each dependent ends up with at most one
anchor.
"""

import types

import biglittle.core
import biglittle.utils
from biglittle.preferences import PreferenceGraph
from biglittle.registry import Kind, ParticipantRegistry

__all__ = [
    "BigLittleInstance", "MatchingResult", "solve", "resolve_matching"
]


def _build(anchors, dependents, pref_lists):
  """Registers both sides and builds their preference graph.

  Nothing is returned unless both the registry and the graph could be built.
  """
  registry = ParticipantRegistry()
  for a in anchors:
    registry.register(a, Kind.ANCHOR)
  for d in dependents:
    registry.register(d, Kind.DEPENDENT)
  return registry, PreferenceGraph(registry, pref_lists)


class BigLittleInstance():
  """Big-Little matching problem instance.

  An object storing the participants of both sides together with their
  preferences.

  Attributes:
    num_anchor: Number of anchors.
    num_dependent: Number of dependents.
    anchor_pref_list: dict from anchor to its list of dependents, best first.
      A dependent missing from the list is not acceptable to the anchor.
    dependent_pref_list: dict from dependent to its list of anchors, best
      first.
    registry: the `ParticipantRegistry` of the instance. Anchors and
      dependents are registered in the order of the dicts above.
    graph: the `PreferenceGraph` of the instance.
  """
  def __init__(self, anchor_pref_list, dependent_pref_list):
    """
    Create an instance of the Big-Little matching problem.

    Args:
      anchor_pref_list: ordered mapping from anchor identifier to a list of
        dependent identifiers.
      dependent_pref_list: ordered mapping from dependent identifier to a
        list of anchor identifiers.

    Raises:
      RegistryError if an identifier shows up on both sides.
      PreferenceError if a list names an unknown participant, a participant
        of the same side, or the same participant twice.
    """
    self.anchor_pref_list = {a: list(li) for a, li in anchor_pref_list.items()}
    self.dependent_pref_list = {
        d: list(li) for d, li in dependent_pref_list.items()}
    pref_lists = dict(self.anchor_pref_list)
    pref_lists.update(self.dependent_pref_list)
    self.registry, self.graph = _build(
        self.anchor_pref_list, self.dependent_pref_list, pref_lists)
    self.num_anchor = self.registry.num_anchor
    self.num_dependent = self.registry.num_dependent

  def __repr__(self):
    return "<BigLittleInstance with {a} anchors and {d} dependents>".format(
        a=self.num_anchor, d=self.num_dependent)

  def anchors(self):
    return self.registry.anchors()

  def dependents(self):
    return self.registry.dependents()

  def rank_matrices(self):
    """Obtains anchor and dependent rank matrices, see `PreferenceGraph`."""
    return self.graph.rank_matrices()


class MatchingResult():
  """Frozen outcome of a Big-Little matching run.

  One can directly access this object to obtain the solution:
  e.g. for a `MatchingResult` sol,
    `sol["X"]` is the tuple of dependents assigned to anchor "X", in the
      order they were accepted.
    `sol.anchor_of("a")` is the anchor of dependent "a", or None.

  Attributes:
    assignments: read-only mapping from every anchor (registration order) to
      the tuple of its dependents.
    unmatched_anchors: tuple of anchors holding no dependent.
    unmatched_dependents: tuple of dependents without an anchor, in
      registration order.
    num_steps: number of rebalancing steps performed.
    termination: the `Termination` rule which ended rebalancing.
  """
  def __init__(self, registry, slots, num_steps, termination):
    """
    Args:
      registry: the `ParticipantRegistry` the matching was computed on.
      slots: list of dependent lists indexed by anchor registration order.
      num_steps: number of rebalancing steps.
      termination: a `Termination` value.
    """
    anchors = registry.anchors()
    self.assignments = types.MappingProxyType(
        {anchors[h]: tuple(slots[h]) for h in range(len(anchors))})
    self._anchor_of = {
        d: a for a, members in self.assignments.items() for d in members}
    self.unmatched_anchors = tuple(
        a for a, members in self.assignments.items() if not members)
    self.unmatched_dependents = tuple(
        d for d in registry.dependents() if d not in self._anchor_of)
    self.num_steps = num_steps
    self.termination = termination

  def __repr__(self):
    return ("<MatchingResult of {a} anchors and {d} matched dependents, "
            "stopped as {t}>").format(
                a=len(self.assignments), d=len(self._anchor_of),
                t=self.termination.name)

  def __getitem__(self, anchor):
    return self.assignments[anchor]

  def __iter__(self):
    return iter(self.assignments.items())

  def anchor_of(self, dependent):
    """Returns the anchor holding `dependent`, None if it is unmatched."""
    return self._anchor_of.get(dependent)

  def pairs(self):
    """All matched (anchor, dependent) pairs."""
    return [(a, d) for a, members in self.assignments.items() for d in members]

  def deviation_from_stability(self, graph):
    """Number of blocking pairs of the matching under `graph`."""
    return biglittle.utils.count_blocking_pairs(graph, self)

  def is_stable(self, graph):
    return self.deviation_from_stability(graph) == 0

  def to_dict(self):
    return {
        "assignments": {a: list(m) for a, m in self.assignments.items()},
        "unmatched_anchors": list(self.unmatched_anchors),
        "unmatched_dependents": list(self.unmatched_dependents),
        "num_steps": self.num_steps,
        "termination": self.termination.name,
    }

  def display(self):
    """Renders the matching as plain text, one anchor per line."""
    lines = ["{0}: {1}".format(a, ", ".join(str(d) for d in members))
             for a, members in self.assignments.items() if members]
    lines.append("Unmatched anchors: {0}".format(
        ", ".join(str(a) for a in self.unmatched_anchors) or "-"))
    lines.append("Unmatched dependents: {0}".format(
        ", ".join(str(d) for d in self.unmatched_dependents) or "-"))
    return "\n".join(lines)


def solve(ins, verbose=False):
  """Solve a Big-Little matching instance.

  Args:
    ins: a `BigLittleInstance` object.
    verbose: bool, optional
      If set to True, extra information will be printed when running the
      algorithm. Default is False.

  Returns:
    sol: a `MatchingResult` object.
  """
  slots, _, num_steps, termination = biglittle.core.find_matching(
      ins.graph, verbose=verbose)
  return MatchingResult(ins.registry, slots, num_steps, termination)


def resolve_matching(anchors, dependents, preferences, verbose=False):
  """Compute a Big-Little matching from participants and preferences.

  Args:
    anchors: iterable of anchor identifiers. Iteration order is the
      registration order, which decides ties between equally loaded anchors.
    dependents: iterable of dependent identifiers, processed in this order
      by the initial matching.
    preferences: either a mapping from identifier to its preference list, or
      a `PreferenceGraph` whose lists are reused.
    verbose: print progress information.

  Returns:
    a `MatchingResult`.

  Raises:
    RegistryError: an identifier is both an anchor and a dependent.
    PreferenceError: the preference data is malformed.
  """
  if isinstance(preferences, PreferenceGraph):
    preferences = preferences.to_dict()
  registry, graph = _build(anchors, dependents, preferences)
  slots, _, num_steps, termination = biglittle.core.find_matching(
      graph, verbose=verbose)
  return MatchingResult(registry, slots, num_steps, termination)
