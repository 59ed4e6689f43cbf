"""Helpers for building SQL fragments from request data."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NamedTuple

from jobly.errors import BadRequestError


class PartialUpdate(NamedTuple):
    set_cols: str
    values: list[Any]
    columns: list[str]

    def params(self) -> dict[str, Any]:
        """Column -> value mapping, in clause order."""
        return dict(zip(self.columns, self.values))


def sql_for_partial_update(data: Mapping[str, Any], js_to_sql: Mapping[str, str]) -> PartialUpdate:
    """Build the SET clause of an UPDATE for the fields present in ``data``.

    ``js_to_sql`` maps request field names to column names; fields without an
    entry are used as the column name verbatim. Only column names end up in
    the clause text, values are returned separately for binding.

        >>> sql_for_partial_update({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
        PartialUpdate(set_cols='"first_name"=$1, "age"=$2', values=['Aliya', 32], columns=['first_name', 'age'])

    Raises:
        BadRequestError: if ``data`` is empty.
    """
    keys = list(data.keys())
    if not keys:
        raise BadRequestError("No data")

    columns = [js_to_sql.get(key, key) for key in keys]
    set_cols = ", ".join(f'"{column}"=${idx}' for idx, column in enumerate(columns, start=1))
    return PartialUpdate(set_cols=set_cols, values=[data[key] for key in keys], columns=columns)
