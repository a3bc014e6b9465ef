"""Filter expression parser.

Grammar::

    expression := clause (";" clause)*
    clause     := ["+" | "-"] key [":" value ("," value)*]

Example::

    animalStatus:Available,Hold;-animalColor:Black;thumb

parses to::

    [Filter(key="animalStatus", values=("Available", "Hold"), action=KEEP),
     Filter(key="animalColor", values=("Black",), action=REMOVE),
     Filter(key="thumb", action=KEEP)]

Parsing never fails. Blank clauses and clauses without a key are skipped,
and repeated keys yield independent filters.
"""

from __future__ import annotations

from ..core.enums import FilterAction
from ..models.filter import Filter, FilterList


def parse(expression: str | None) -> FilterList:
    """Parse a filter expression into an ordered filter list."""
    result: FilterList = []
    if not expression:
        return result

    for clause in expression.split(";"):
        clause = clause.strip()
        if not clause:
            continue

        key, colon, raw_values = clause.partition(":")
        action = FilterAction.KEEP
        if key[:1] == "+":
            key = key[1:]
        elif key[:1] == "-":
            key = key[1:]
            action = FilterAction.REMOVE
        if not key:
            continue

        values = tuple(raw_values.split(",")) if colon else None
        result.append(Filter(key=key, values=values, action=action))
    return result
