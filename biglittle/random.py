"""Random Instance Generators"""

import numpy as np

import biglittle.instance

__all__ = ["gen_random_instance"]


def _names(prefix, num):
  return ["{0}{1}".format(prefix, i) for i in range(num)]


def gen_random_instance(num_anchor, num_dependent,
                        anchor_pref_len=0,
                        dependent_pref_len=0, seed=None):
  """Generate a uniform random instance.

  Generate a Big-Little instance where every preference list is an independent
  uniformly random order over the other side, optionally truncated. Anchors
  are named "A0", "A1", ... and dependents "D0", "D1", ...

  Args:
    num_anchor: int
      Number of anchors.
    num_dependent: int
      Number of dependents.
    anchor_pref_len: int, optional
      Length of anchors' preference lists. Dependents outside the list are not
      acceptable to the anchor. Default: generate full preference list.
    dependent_pref_len: int, optional
      Length of dependents' preference lists. Default: generate full
      preference list.
    seed: int, optional
      Seed of the random number generator.

  Returns:
    A `BigLittleInstance` object.
  """
  rs = np.random.RandomState(seed)
  anchors = _names("A", num_anchor)
  dependents = _names("D", num_dependent)
  anchor_orders = np.argsort(rs.rand(num_anchor, num_dependent)).tolist()
  dependent_orders = np.argsort(rs.rand(num_dependent, num_anchor)).tolist()
  if anchor_pref_len:
    anchor_orders = [li[:anchor_pref_len] for li in anchor_orders]
  if dependent_pref_len:
    dependent_orders = [li[:dependent_pref_len] for li in dependent_orders]
  anchor_pref_list = {
      anchors[a]: [dependents[d] for d in anchor_orders[a]]
      for a in range(num_anchor)
  }
  dependent_pref_list = {
      dependents[d]: [anchors[a] for a in dependent_orders[d]]
      for d in range(num_dependent)
  }
  return biglittle.instance.BigLittleInstance(
      anchor_pref_list=anchor_pref_list,
      dependent_pref_list=dependent_pref_list
  )
