import unittest

import parquet_files  # noqa: F401
from parquet_browser.schema import (
    count_leaf_columns,
    decimal_params,
    find_schema_element,
    format_converted_type,
    format_logical_type,
    format_path_in_schema,
    resolve_leaf,
)
from parquet_browser.ttypes import (
    ConvertedType,
    DecimalType,
    IntType,
    LogicalType,
    MicroSeconds,
    NanoSeconds,
    SchemaElement,
    StringType,
    TimestampType,
    TimeType,
    TimeUnit,
    Type,
    UUIDType,
)


def group(name, num_children):
    return SchemaElement(name=name, num_children=num_children)


def leaf(name, physical_type=Type.INT32, **kwargs):
    return SchemaElement(name=name, type=physical_type, **kwargs)


class TestFindSchemaElement(unittest.TestCase):
    def setUp(self):
        # root
        # |- id
        # |- tags (LIST) / list / element
        # |- address / city, zip
        # `- Key_Value / key
        self.schema = [
            group("schema", 4),
            leaf("id", Type.INT64),
            group("tags", 1),
            group("list", 1),
            leaf("element", Type.BYTE_ARRAY),
            group("address", 2),
            leaf("city", Type.BYTE_ARRAY),
            leaf("zip", Type.INT32),
            group("Key_Value", 1),
            leaf("key", Type.BYTE_ARRAY),
        ]

    def test_nested_path(self):
        """Test resolving a path below a nested group"""
        schema = [group("root", 1), group("nested", 1), leaf("field")]
        self.assertIs(find_schema_element(schema, ["nested", "field"]), schema[2])

    def test_bare_name_fallback(self):
        """Test that a bare leaf name resolves when no full path matches"""
        schema = [group("root", 1), group("nested", 1), leaf("field")]
        self.assertIs(find_schema_element(schema, ["field"]), schema[2])

    def test_deep_paths(self):
        self.assertIs(find_schema_element(self.schema, ["tags", "list", "element"]), self.schema[4])
        self.assertIs(find_schema_element(self.schema, ["address", "zip"]), self.schema[7])
        self.assertIs(find_schema_element(self.schema, ["id"]), self.schema[1])

    def test_sibling_after_closed_group(self):
        """Test that a group's frame is popped once its children are consumed"""
        self.assertIs(find_schema_element(self.schema, ["Key_Value", "key"]), self.schema[9])
        schema = [group("root", 2), group("a", 1), leaf("x"), leaf("x")]
        self.assertIs(find_schema_element(schema, ["x"]), schema[3])
        self.assertIs(find_schema_element(schema, ["a", "x"]), schema[2])

    def test_case_insensitive(self):
        self.assertIs(find_schema_element(self.schema, ["key_value", "KEY"]), self.schema[9])

    def test_first_match_wins(self):
        schema = [group("root", 2), group("a", 1), leaf("x"), group("b", 1), leaf("x")]
        self.assertIs(find_schema_element(schema, ["b", "x"]), schema[4])
        self.assertIs(find_schema_element(schema, ["c", "x"]), schema[2])

    def test_group_node_can_match(self):
        self.assertIs(find_schema_element(self.schema, ["address"]), self.schema[5])

    def test_not_found(self):
        self.assertIsNone(find_schema_element(self.schema, ["missing"]))
        self.assertIsNone(find_schema_element(self.schema, []))
        self.assertIsNone(find_schema_element([], ["id"]))

    def test_legacy_root_and_empty_names_are_skipped(self):
        schema = [group("Parquet_go_root", 1), group("", 0), leaf("value")]
        self.assertIs(find_schema_element(schema, ["value"]), schema[2])

    def test_single_leaf_schema(self):
        schema = [leaf("only")]
        self.assertIs(find_schema_element(schema, ["only"]), schema[0])


class TestFormatTypes(unittest.TestCase):
    def test_logical_types(self):
        cases = [
            (None, "-"),
            (LogicalType(), "-"),
            (LogicalType(STRING=StringType()), "STRING"),
            (LogicalType(UUID=UUIDType()), "UUID"),
            (LogicalType(DECIMAL=DecimalType(scale=2, precision=10)), "DECIMAL(10,2)"),
            (
                LogicalType(TIMESTAMP=TimestampType(True, TimeUnit(MICROS=MicroSeconds()))),
                "TIMESTAMP(MICROS,true)",
            ),
            (
                LogicalType(TIME=TimeType(False, TimeUnit(NANOS=NanoSeconds()))),
                "TIME(NANOS,false)",
            ),
            (LogicalType(INTEGER=IntType(bitWidth=8, isSigned=False)), "INTEGER(8,unsigned)"),
            (LogicalType(INTEGER=IntType(bitWidth=32, isSigned=True)), "INTEGER(32,signed)"),
        ]
        for logical_type, expected in cases:
            with self.subTest(expected=expected):
                self.assertEqual(format_logical_type(logical_type), expected)

    def test_converted_types(self):
        self.assertEqual(format_converted_type(None), "-")
        self.assertEqual(format_converted_type(ConvertedType.UTF8), "UTF8")
        self.assertEqual(format_converted_type(ConvertedType.TIMESTAMP_MICROS), "TIMESTAMP_MICROS")
        self.assertEqual(format_converted_type(99), "UNKNOWN(99)")

    def test_path_and_leaf_count(self):
        self.assertEqual(format_path_in_schema(["a", "b", "c"]), "a.b.c")
        schema = [group("root", 2), group("g", 1), leaf("x"), leaf("y")]
        self.assertEqual(count_leaf_columns(schema), 2)


class TestResolveLeaf(unittest.TestCase):
    def test_decimal_leaf(self):
        schema = [
            group("root", 1),
            leaf(
                "price",
                Type.FIXED_LEN_BYTE_ARRAY,
                converted_type=ConvertedType.DECIMAL,
                precision=12,
                scale=3,
                logicalType=LogicalType(DECIMAL=DecimalType(scale=3, precision=12)),
            ),
        ]
        resolved = resolve_leaf(schema, ["price"])
        self.assertEqual(resolved.path, "price")
        self.assertEqual(resolved.physical_type, "FIXED_LEN_BYTE_ARRAY")
        self.assertEqual(resolved.logical_type, "DECIMAL(12,3)")
        self.assertEqual(resolved.converted_type, "DECIMAL")
        self.assertEqual((resolved.precision, resolved.scale), (12, 3))
        self.assertIs(resolved.element, schema[1])
        self.assertEqual(resolved.to_dict()["logicalType"], "DECIMAL(12,3)")

    def test_missing_leaf(self):
        self.assertIsNone(resolve_leaf([group("root", 1), leaf("a")], ["b"]))

    def test_decimal_defaults(self):
        self.assertEqual(decimal_params(None), (10, 0))
        self.assertEqual(decimal_params(leaf("n", scale=2)), (10, 2))
        only_logical = leaf("n", logicalType=LogicalType(DECIMAL=DecimalType(scale=4, precision=9)))
        self.assertEqual(decimal_params(only_logical), (9, 4))


if __name__ == "__main__":
    unittest.main()
