import logging
from dataclasses import dataclass, field

from .ttypes import ConvertedType, SchemaElement, Type, enum_name

logger = logging.getLogger(__name__)

DEFAULT_DECIMAL_PRECISION = 10
DEFAULT_DECIMAL_SCALE = 0

# Name parquet-go gives the root group.
LEGACY_ROOT_NAME = "Parquet_go_root"


@dataclass(frozen=True)
class SchemaLeaf:
    path: str
    physical_type: str
    logical_type: str
    converted_type: str
    precision: int
    scale: int
    element: SchemaElement = field(default=None, compare=False, repr=False)

    def to_dict(self):
        return {
            "path": self.path,
            "physicalType": self.physical_type,
            "logicalType": self.logical_type,
            "convertedType": self.converted_type,
            "precision": self.precision,
            "scale": self.scale,
        }


def _is_root(index, elem):
    if elem.name in ("", None, LEGACY_ROOT_NAME):
        return True
    # schema[0] is the root group, its name never appears in path_in_schema
    return index == 0 and bool(elem.num_children)


def _path_matches(current_path, target_path):
    if len(current_path) != len(target_path):
        return False
    return all(a.casefold() == b.casefold() for a, b in zip(current_path, target_path))


def find_schema_element(schema, path_in_schema):
    """Find the element of a flat depth-first schema list at ``path_in_schema``.

    The tree is rebuilt with a stack of ``[path, remaining_children]``
    frames. Segments compare case-insensitively and the first match wins.
    When no full path matches, the first element whose bare name matches the
    last path segment is returned. Returns None when nothing matches.
    """
    if not schema or not path_in_schema:
        return None

    stack = []
    for index, elem in enumerate(schema):
        if _is_root(index, elem):
            continue

        while stack:
            if stack[-1][1] > 0:
                stack[-1][1] -= 1
                break
            stack.pop()

        parent_path = stack[-1][0] if stack else []
        current_path = parent_path + [elem.name]

        if _path_matches(current_path, path_in_schema):
            return elem

        if elem.num_children:
            stack.append([current_path, elem.num_children])

    leaf_name = path_in_schema[-1].casefold()
    for elem in schema:
        if elem.name is not None and elem.name.casefold() == leaf_name:
            logger.debug(f"Resolved {path_in_schema} by leaf name only")
            return elem

    return None


def format_path_in_schema(path_in_schema):
    return ".".join(path_in_schema)


def count_leaf_columns(schema):
    return sum(1 for elem in schema if elem.type is not None)


def _format_time_unit(unit):
    if unit is None:
        return "UNKNOWN"
    return unit.name()


def _format_decimal(decimal):
    return f"DECIMAL({decimal.precision},{decimal.scale})"


def _format_time(time):
    return f"TIME({_format_time_unit(time.unit)},{str(bool(time.isAdjustedToUTC)).lower()})"


def _format_timestamp(ts):
    return f"TIMESTAMP({_format_time_unit(ts.unit)},{str(bool(ts.isAdjustedToUTC)).lower()})"


def _format_integer(integer):
    sign = "signed" if integer.isSigned else "unsigned"
    return f"INTEGER({integer.bitWidth},{sign})"


# Union members carrying parameters; every other member formats as its name.
LOGICAL_TYPE_FORMATTERS = {
    "DECIMAL": _format_decimal,
    "TIME": _format_time,
    "TIMESTAMP": _format_timestamp,
    "INTEGER": _format_integer,
}


def format_logical_type(logical_type):
    if logical_type is None:
        return "-"
    member = logical_type.set_member()
    if member is None:
        return "-"
    formatter = LOGICAL_TYPE_FORMATTERS.get(member)
    if formatter is None:
        return member
    return formatter(getattr(logical_type, member))


def format_converted_type(converted_type):
    return enum_name(ConvertedType, converted_type)


def decimal_params(schema_elem):
    """``(precision, scale)`` of a decimal element, defaults when unknown."""
    precision = DEFAULT_DECIMAL_PRECISION
    scale = DEFAULT_DECIMAL_SCALE
    if schema_elem is None:
        return precision, scale
    if schema_elem.precision is not None:
        precision = schema_elem.precision
    if schema_elem.scale is not None:
        scale = schema_elem.scale
    logical = schema_elem.logicalType
    if logical is not None and logical.DECIMAL is not None:
        if logical.DECIMAL.precision is not None:
            precision = logical.DECIMAL.precision
        if logical.DECIMAL.scale is not None:
            scale = logical.DECIMAL.scale
    return precision, scale


def resolve_leaf(schema, path_in_schema):
    elem = find_schema_element(schema, path_in_schema)
    if elem is None:
        return None
    precision, scale = decimal_params(elem)
    return SchemaLeaf(
        path=format_path_in_schema(path_in_schema),
        physical_type=enum_name(Type, elem.type),
        logical_type=format_logical_type(elem.logicalType),
        converted_type=format_converted_type(elem.converted_type),
        precision=precision,
        scale=scale,
        element=elem,
    )
