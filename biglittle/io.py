"""Big-Little instance input/output."""

import csv
import json
import os

import numpy as np
from scipy import io as sio

import biglittle.instance
from biglittle.errors import DuplicateIdentifierError

__all__ = ["load_csv", "load_instance", "save_json", "load_json", "save_mat",
           "save_result_json"]

NAME_HEADER = "Name"


def _check_csv_extension(filename):
  ext = os.path.splitext(filename)[1]
  if not ext:
    raise ValueError("Unable to parse input path: {0}.".format(filename))
  if ext.lower() != ".csv":
    raise ValueError("Unrecognized input file format: {0}.".format(ext[1:]))


def load_csv(filename):
  """Read one side of a matching problem from a CSV table.

  The header must have a `Name` column. Columns to the left of it are ignored
  (e.g. form timestamps); the columns to the right are rank columns, most
  preferred first. Cells are stripped and empty rank cells skipped, so rows may
  have different lengths.

  Args:
    filename: path of a `.csv` file.

  Returns:
    dict from participant name to the list of counterpart names, in file
    order.

  Raises:
    ValueError if the file is not a CSV file, lacks the `Name` header, or a
      row has no name.
    DuplicateIdentifierError if a name appears on two rows.
  """
  _check_csv_extension(filename)
  with open(filename, newline="", encoding="utf-8-sig") as f:
    reader = csv.reader(f)
    header = [h.strip() for h in next(reader, [])]
    if NAME_HEADER not in header:
      raise ValueError("Missing `{0}` header in {1}.".format(
          NAME_HEADER, filename))
    start = header.index(NAME_HEADER)
    records = {}
    for row in reader:
      row = [cell.strip() for cell in row]
      if not any(row):
        continue
      cells = row[start:]
      if not cells or not cells[0]:
        raise ValueError("Missing `{0}` record on line {1} of {2}.".format(
            NAME_HEADER, reader.line_num, filename))
      name = cells[0]
      if name in records:
        raise DuplicateIdentifierError(
            "{0!r} appears twice in {1}.".format(name, filename))
      records[name] = [cell for cell in cells[1:] if cell]
  return records


def load_instance(anchor_filename, dependent_filename):
  """Read an instance from an anchor CSV table and a dependent CSV table.

  Returns:
    A `BigLittleInstance` object.
  """
  return biglittle.instance.BigLittleInstance(
      anchor_pref_list=load_csv(anchor_filename),
      dependent_pref_list=load_csv(dependent_filename)
  )


def save_json(ins, filename):
  """Save BigLittleInstance to json format.

  Integer identifiers used as keys come back as strings from `load_json`.

  Args:
    ins: a `BigLittleInstance` object.
    filename: output file name.
  """
  with open(filename, mode="w") as g:
    json.dump(
        {
            "anchor_pref_list": ins.anchor_pref_list,
            "dependent_pref_list": ins.dependent_pref_list
        }, g, indent=4
    )


def load_json(filename):
  """Read instance from a json file of preferences.

  Args:
    filename: input json file name.
  Returns:
    A `BigLittleInstance` object.
  """
  with open(filename) as f:
    all_fields = json.load(f)
  return biglittle.instance.BigLittleInstance(
      anchor_pref_list=all_fields["anchor_pref_list"],
      dependent_pref_list=all_fields["dependent_pref_list"]
  )


def save_mat(ins, filename):
  """Save the rank matrices to MATLAB style .mat file.

  Rows are anchors and columns dependents, in registration order; -1 marks
  an unranked pair.

  Args:
    ins: A `BigLittleInstance`.
    filename: output filename with or without '.mat' extension.
  """
  anchor_ranks, dependent_ranks = ins.rank_matrices()
  sio.savemat(
        filename,
        {
            "anchor_ranks": anchor_ranks.astype(np.int32),
            "dependent_ranks": dependent_ranks.astype(np.int32)
        }
  )


def save_result_json(sol, filename):
  """Save a MatchingResult to json format.

  Args:
    sol: a `MatchingResult`.
    filename: output file name.
  """
  with open(filename, mode="w") as g:
    json.dump(sol.to_dict(), g, indent=4)
