"""
Big-Little
=============================================
Matching Littles to Bigs with mutual ranked preferences.

Example:

Suppose that we would like to match 3 Littles (a, b, c) to 2 Bigs (X, Y).
Littles are the "dependents": each of them ends up with at most one Big.
Bigs are the "anchors": each of them may host several Littles.

Every participant ranks the other side, from the most preferrable to the
least preferrable. Anyone left out of a list is not acceptable at all.
---------------------------------------------
  >>> anchor_pref = {"X": ["a", "b", "c"],
  ...                "Y": ["a", "b", "c"]}
  >>> dependent_pref = {"a": ["X", "Y"],
  ...                   "b": ["X", "Y"],
  ...                   "c": ["X", "Y"]}
---------------------------------------------
Construct the instance and solve it:
----------------------------------------------
  >>> import biglittle
  >>> S = biglittle.BigLittleInstance(anchor_pref, dependent_pref)
  >>> sol = biglittle.solve(S)
  >>> sol["X"], sol["Y"]
  (('a', 'b'), ('c',))
----------------------------------------------
The first pass gives every Little to the first Big on its list that ranks it
back, so X receives a, b and c. The rebalancing pass then takes the Little the
busiest Big likes least (c) and moves it on to the next Big on c's own list
that accepts it (Y). Rebalancing stops once every Big has a Little, all Bigs
have the same load, or no move can lower the peak load.

Littles no Big accepts stay unmatched, and Littles that are unmatched after
the first pass are not reconsidered. This is not a Gale-Shapley matching and
need not be stable; `sol.deviation_from_stability(S.graph)` counts the
blocking pairs.

Participants given as plain collections work too:
----------------------------------------------
  >>> sol = biglittle.resolve_matching(
  ...     anchors=["X", "Y"], dependents=["a", "b", "c"],
  ...     preferences={**anchor_pref, **dependent_pref})
----------------------------------------------
Please refer to the docstring of biglittle.MatchingResult to see different
ways to access the solution.
"""

from biglittle.errors import *
from biglittle.registry import *
from biglittle.preferences import *
from biglittle.core import Termination
from biglittle.instance import *
from biglittle.io import *
from biglittle.random import *
