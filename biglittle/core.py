"""Big-Little matching algorithm implementation"""

import enum
import time

import numba as nb
import numpy as np

from biglittle.errors import MatchingInvariantError

__all__ = ["Termination", "maximal_matching", "rebalance", "find_matching"]


class Termination(enum.IntEnum):
  """Rule that stopped the rebalancing loop."""
  COVERED = 1  # every anchor holds at least one dependent
  BALANCED = 2  # every anchor holds the same number of dependents
  STALLED = 3  # no eviction can lower the peak load, or step budget spent


@nb.njit('int64(int64[:])')
def _heaviest_anchor(loads):
  """Argmax function, returns the smallest index in the case of a tie."""
  return np.argmax(loads)


@nb.njit('int64(int64[:], int64, int64)')
def _termination_code(loads, num_steps, max_steps):
  """Returns a `Termination` value, or 0 if rebalancing should go on."""
  if len(loads) == 0:
    return 1
  covered = True
  balanced = True
  peak = loads[0]
  for i in range(len(loads)):
    if loads[i] < 1:
      covered = False
    if loads[i] != loads[0]:
      balanced = False
    if loads[i] > peak:
      peak = loads[i]
  if covered:
    return 1
  if balanced:
    return 2
  if peak <= 1 or num_steps >= max_steps:
    return 3
  return 0


def _lowest_ranked(graph, anchor, members):
  """Finds the member `anchor` ranks worst in its own preference list."""
  worst, worst_rank = None, -1
  for dependent in members:
    rank = graph.rank_of(anchor, dependent)
    if rank is None:
      raise MatchingInvariantError(
          "Anchor {0!r} holds {1!r} without ranking it.".format(
              anchor, dependent))
    if rank > worst_rank:
      worst, worst_rank = dependent, rank
  return worst


def maximal_matching(graph, verbose=False):
  """Greedy initial matching.

  Every dependent, in registration order, goes to the first anchor of its
  preference list which lists it back.

  Args:
    graph: a `PreferenceGraph`.
    verbose: print a summary when done.

  Returns:
    slots: list indexed by anchor registration order, each entry the list of
      accepted dependents in acceptance order.
    unmatched: dependents no anchor accepted, in registration order.
  """
  registry = graph.registry
  slots = [[] for _ in range(registry.num_anchor)]
  unmatched = []
  for dependent in registry.dependents():
    anchor = graph.next_acceptable(dependent)
    if anchor is None:
      unmatched.append(dependent)
    else:
      slots[registry.index_of(anchor)].append(dependent)
  if verbose:
    print("Maximal matching placed {0} of {1} dependents.".format(
        registry.num_dependent - len(unmatched), registry.num_dependent))
  return slots, unmatched


def rebalance(graph, slots, unmatched, verbose=False):
  """Moves dependents away from the heaviest anchors.

  Repeatedly evicts the lowest-ranked dependent of the heaviest anchor (first
  registered on ties) and rehomes it at the next mutually accepting anchor of
  its own list, after the one it was evicted from. A dependent whose list runs
  out is appended to `unmatched` for good. `slots` and `unmatched` are updated
  in place.

  The loop stops once every anchor holds a dependent, all loads are equal, no
  anchor holds more than one dependent, or as many steps as there are
  dependents have been taken. An anchor that no dependent accepts can never be
  covered, so in that case evictions go on until one of the last two rules
  fires, and dependents may lose their match without that anchor gaining one.

  Args:
    graph: a `PreferenceGraph`.
    slots: anchor slots as returned by `maximal_matching`.
    unmatched: list of unmatched dependents as returned by `maximal_matching`.
    verbose: print progress information.

  Returns:
    num_steps: number of evictions performed.
    termination: the `Termination` rule that stopped the loop.
  """
  registry = graph.registry
  anchors = registry.anchors()
  loads = np.array([len(s) for s in slots], dtype=np.int64)
  max_steps = registry.num_dependent
  num_steps = 0
  while True:
    code = _termination_code(loads, num_steps, max_steps)
    if code:
      break
    h = _heaviest_anchor(loads)
    anchor = anchors[h]
    dependent = _lowest_ranked(graph, anchor, slots[h])
    if graph.rank_of(dependent, anchor) is None:
      raise MatchingInvariantError(
          "Dependent {0!r} is held by {1!r} which it does not rank.".format(
              dependent, anchor))
    slots[h].remove(dependent)
    loads[h] -= 1
    target = graph.next_acceptable(dependent, after=anchor)
    if target is None:
      unmatched.append(dependent)
    else:
      t = registry.index_of(target)
      slots[t].append(dependent)
      loads[t] += 1
    num_steps += 1
    if verbose and num_steps % 200 == 0:
      print("current rebalancing step: #{0}".format(num_steps))
  termination = Termination(code)
  if verbose:
    print("Rebalanced for {0} steps, stopped as {1}.".format(
        num_steps, termination.name))
  return num_steps, termination


def _check_mutual(graph, slots):
  anchors = graph.registry.anchors()
  for h, members in enumerate(slots):
    for dependent in members:
      if not graph.mutually_accept(anchors[h], dependent):
        raise MatchingInvariantError(
            "{0!r} and {1!r} are matched without mutual acceptance.".format(
                anchors[h], dependent))


def find_matching(graph, verbose=False):
  """Runs both phases of the matching.

  Args:
    graph: a `PreferenceGraph`.
    verbose: bool, optional
      If set to True, extra information will be printed when running the
      algorithm. Default is False.

  Returns:
    slots: final anchor slots indexed by anchor registration order.
    unmatched: unmatched dependents, Phase 1 ones first, then the ones
      dropped while rebalancing in drop order.
    num_steps: number of rebalancing steps.
    termination: the `Termination` rule that stopped rebalancing.
  """
  start_time = time.time()
  slots, unmatched = maximal_matching(graph, verbose)
  _check_mutual(graph, slots)
  num_steps, termination = rebalance(graph, slots, unmatched, verbose)
  _check_mutual(graph, slots)
  if verbose:
    print("Matching found in {0:.3f}s.".format(time.time() - start_time))
  return slots, unmatched, num_steps, termination
