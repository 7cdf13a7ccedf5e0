"""Big-Little matching util functions."""

import numpy as np


def check_mutual_acceptance(graph, sol):
  """Check if every matched pair of `sol` lists each other in `graph`."""
  return all(graph.mutually_accept(a, d) for a, d in sol.pairs())


def check_single_assignment(sol):
  """Check if every dependent is matched at most once.

  Unmatched dependents must not show up under any anchor either.
  """
  matched = [d for _, d in sol.pairs()]
  if len(matched) != len(set(matched)):
    return False
  return not set(matched) & set(sol.unmatched_dependents)


def _assignment_vectors(registry, anchor_ranks, sol):
  """Current anchor of each dependent and worst held rank of each anchor."""
  num_anchor, num_dependent = anchor_ranks.shape
  current = np.full(num_dependent, -1, dtype=np.int64)
  worst = np.full(num_anchor, -1, dtype=np.int64)
  for a, d in sol.pairs():
    i, j = registry.index_of(a), registry.index_of(d)
    current[j] = i
    worst[i] = max(worst[i], anchor_ranks[i, j])
  return current, worst


def count_blocking_pairs(graph, sol):
  """Count the pairs which would rather be matched to each other.

  An anchor a and a dependent d block `sol` if they mutually accept, d is not
  held by a, d is unmatched or ranks a above its anchor, and a is empty or
  ranks d above its worst held dependent.

  Args:
    graph: a `PreferenceGraph`.
    sol: a `MatchingResult` computed on the participants of `graph`.

  Returns:
    Number of blocking pairs.
  """
  anchor_ranks, dependent_ranks = graph.rank_matrices()
  num_anchor, num_dependent = anchor_ranks.shape
  if num_anchor == 0 or num_dependent == 0:
    return 0
  current, worst = _assignment_vectors(graph.registry, anchor_ranks, sol)
  cols = np.arange(num_dependent)
  current_rank = np.where(
      current >= 0, dependent_ranks[np.maximum(current, 0), cols], num_anchor)
  mutual = (anchor_ranks >= 0) & (dependent_ranks >= 0)
  dependent_prefers = dependent_ranks < current_rank[np.newaxis, :]
  anchor_prefers = ((worst < 0)[:, np.newaxis] |
                    (anchor_ranks < worst[:, np.newaxis]))
  elsewhere = current[np.newaxis, :] != np.arange(num_anchor)[:, np.newaxis]
  return int(np.sum(mutual & dependent_prefers & anchor_prefers & elsewhere))
