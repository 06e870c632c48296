# src/tilecollapse/tsv.py
# Tab-separated tile matrices, as written by `wfctool.py emit`.
import csv
from typing import List, Sequence

from .errors import ConfigurationError

Matrix = List[List[int]]


def header_row(width: int) -> List[int]:
    """Column indices 0..width-1; `emit --header` writes this above the map."""
    return list(range(width))


def write_tsv(mat: Sequence[Sequence[int]], path: str, include_header: bool = False) -> None:
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f, delimiter="\t")
        if include_header:
            w.writerow(header_row(len(mat[0])))
        for r in mat:
            w.writerow(r)


def read_tsv(path: str) -> Matrix:
    """
    Load a tile matrix, dropping the optional column-index header.

    Emitted maps are fully collapsed, so no data row starts with 0 and a
    leading row equal to 0..width-1 can only be the header.
    """
    rows: Matrix = []
    with open(path, newline="", encoding="utf-8") as f:
        for lineno, rec in enumerate(csv.reader(f, delimiter="\t"), 1):
            if not rec:
                continue
            try:
                rows.append([int(x) for x in rec])
            except ValueError as e:
                raise ConfigurationError(f"{path}:{lineno}: {e}") from e
    if rows and rows[0] == header_row(len(rows[0])):
        rows = rows[1:]
    if not rows or any(len(r) != len(rows[0]) for r in rows):
        raise ConfigurationError(f"{path}: expected a rectangular grid")
    return rows
