"""Unit tests for app.services.update_builder: partial UPDATE text and parameter ordering."""

import itertools
import re
import unittest

from app.core.errors import BadRequestError
from app.services.products import PRODUCT_UPDATE_FIELDS
from app.services.update_builder import build_update_statement

VALUES = {"productName": "Sneaker", "price": 120000, "isAvailable": False}


def _build(changes: dict, key: str = "SHOE01", returning: tuple = ()):
    return build_update_statement(
        table="fashion",
        fields=PRODUCT_UPDATE_FIELDS,
        changes=changes,
        key_column="sku",
        key=key,
        returning=returning,
    )


class TestPlaceholderLockstep(unittest.TestCase):
    """Placeholder :pN always refers to params[N-1] for every non-empty field subset."""

    def test_every_subset(self) -> None:
        names = [name for name, _ in PRODUCT_UPDATE_FIELDS]
        columns = dict(PRODUCT_UPDATE_FIELDS)
        for size in range(1, len(names) + 1):
            for subset in itertools.combinations(names, size):
                with self.subTest(subset=subset):
                    changes = {name: VALUES[name] for name in subset}
                    stmt = _build(changes)

                    self.assertEqual(len(stmt.params), len(subset) + 1)
                    self.assertEqual(stmt.params[-1], "SHOE01")

                    pairs = re.findall(r"(\w+) = :p(\d+)", stmt.sql)
                    self.assertEqual(len(pairs), len(subset) + 1)
                    for column, index in pairs:
                        value = stmt.params[int(index) - 1]
                        if column == "sku":
                            self.assertEqual(value, "SHOE01")
                        else:
                            field = next(n for n, c in columns.items() if c == column)
                            self.assertEqual(value, VALUES[field])

                    indices = [int(i) for _, i in pairs]
                    self.assertEqual(indices, list(range(1, len(subset) + 2)))

    def test_fixed_field_order_regardless_of_input_order(self) -> None:
        stmt = _build({"isAvailable": True, "productName": "Boot"})
        self.assertEqual(
            stmt.sql,
            "UPDATE fashion SET product_name = :p1, is_available = :p2 WHERE sku = :p3",
        )
        self.assertEqual(stmt.params, ["Boot", True, "SHOE01"])

    def test_single_field(self) -> None:
        stmt = _build({"price": 120000})
        self.assertEqual(stmt.sql, "UPDATE fashion SET price = :p1 WHERE sku = :p2")
        self.assertEqual(stmt.params, [120000, "SHOE01"])

    def test_bind_params_names_match_placeholders(self) -> None:
        stmt = _build({"productName": "Boot", "price": 5})
        self.assertEqual(stmt.bind_params(), {"p1": "Boot", "p2": 5, "p3": "SHOE01"})

    def test_false_and_zero_are_present_values(self) -> None:
        stmt = _build({"price": 0, "isAvailable": False})
        self.assertEqual(stmt.params, [0, False, "SHOE01"])


class TestReturningClause(unittest.TestCase):
    def test_returning_columns_appended(self) -> None:
        stmt = _build({"price": 1}, returning=("id", "sku"))
        self.assertTrue(stmt.sql.endswith("WHERE sku = :p2 RETURNING id, sku"))

    def test_no_returning_by_default(self) -> None:
        self.assertNotIn("RETURNING", _build({"price": 1}).sql)


class TestRejectedInput(unittest.TestCase):
    def test_empty_changes(self) -> None:
        with self.assertRaises(BadRequestError) as ctx:
            _build({})
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertIn("At least one field", ctx.exception.message)

    def test_unknown_field(self) -> None:
        with self.assertRaises(BadRequestError) as ctx:
            _build({"price": 1, "sku": "OTHER"})
        self.assertIn("sku", ctx.exception.message)


class TestValuesNeverInterpolated(unittest.TestCase):
    def test_hostile_values_stay_in_params(self) -> None:
        hostile = "x'; DROP TABLE fashion; --"
        stmt = _build({"productName": hostile}, key=hostile)
        self.assertNotIn(hostile, stmt.sql)
        self.assertEqual(stmt.params, [hostile, hostile])


if __name__ == "__main__":
    unittest.main()
