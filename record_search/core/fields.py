"""Dotted-path field resolution and scalar field discovery for records."""

from numbers import Number
from typing import Any, List, Mapping, Optional, Sequence


def _child(current: Any, key: str) -> Any:
    if isinstance(current, Mapping):
        return current.get(key)
    if isinstance(current, (str, bytes, bytearray, Number)):
        return None
    if isinstance(current, Sequence) and not isinstance(current, (str, bytes, bytearray)):
        if key.isdigit() and int(key) < len(current):
            return current[int(key)]
        return None
    return getattr(current, key, None)


def get_nested_value(record: Any, path: str) -> Optional[Any]:
    """
    Resolve a dotted path such as ``lotPassport.itemName`` against a record.
    
    Mappings are looked up by key, sequences by numeric segment and other
    objects by attribute. Missing segments resolve to None.
    """
    current = record
    for key in path.split("."):
        if current is None:
            return None
        current = _child(current, key)
    return current


def _is_scalar(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (str, Number))


def _members(obj: Any) -> Optional[Mapping]:
    if isinstance(obj, Mapping):
        return obj
    if isinstance(obj, (str, bytes, bytearray, Sequence, Number)) or obj is None:
        return None
    try:
        return vars(obj)
    except TypeError:
        return None


def discover_fields(record: Any) -> List[str]:
    """
    List dotted paths of every string or numeric field in a record.
    
    Nested mappings and objects are walked recursively; sequences are not.
    """
    fields: List[str] = []
    
    def add_fields(obj: Any, prefix: str) -> None:
        members = _members(obj)
        if members is None:
            return
        for key, value in members.items():
            if not isinstance(key, str) or (key.startswith("_") and not isinstance(obj, Mapping)):
                continue
            field_path = f"{prefix}.{key}" if prefix else key
            if _is_scalar(value):
                fields.append(field_path)
            elif _members(value) is not None:
                add_fields(value, field_path)
    
    add_fields(record, "")
    return fields
