"""Pure builder for partial UPDATE statements with numbered bind placeholders."""

from collections.abc import Mapping, Sequence
from typing import Any, NamedTuple

from app.core.errors import BadRequestError


class UpdateStatement(NamedTuple):
    """SQL text using :p1..:pN placeholders and the parameters in placeholder order."""

    sql: str
    params: list[Any]

    def bind_params(self) -> dict[str, Any]:
        """Parameters keyed by placeholder name, as SQLAlchemy text() expects them."""
        return {f"p{i}": value for i, value in enumerate(self.params, start=1)}


def build_update_statement(
    table: str,
    fields: Sequence[tuple[str, str]],
    changes: Mapping[str, Any],
    key_column: str,
    key: Any,
    returning: Sequence[str] = (),
) -> UpdateStatement:
    """
    Build an UPDATE that assigns only the fields present in changes.

    fields is the fixed (field name, column) order; changes is keyed by field
    name. Each present field appends "column = :pN" and its value, and key is
    appended last for the WHERE clause, so placeholder N is always params[N-1]
    whatever subset was supplied. Only table, column and returning identifiers
    from the caller are written into the SQL text; values never are.

    Raises BadRequestError if no known field is present or an unknown field is given.
    """
    known = {name for name, _ in fields}
    unknown = sorted(set(changes) - known)
    if unknown:
        raise BadRequestError(f"Unknown field(s): {', '.join(unknown)}")

    assignments: list[str] = []
    params: list[Any] = []
    for name, column in fields:
        if name not in changes:
            continue
        params.append(changes[name])
        assignments.append(f"{column} = :p{len(params)}")

    if not assignments:
        allowed = ", ".join(name for name, _ in fields)
        raise BadRequestError(f"At least one field ({allowed}) must be provided for update.")

    params.append(key)
    sql = f"UPDATE {table} SET {', '.join(assignments)} WHERE {key_column} = :p{len(params)}"
    if returning:
        sql += f" RETURNING {', '.join(returning)}"
    return UpdateStatement(sql=sql, params=params)
