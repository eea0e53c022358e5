"""Empty-object elimination for persisted block attributes."""

from typing import Any, Mapping


def clean_empty_object(value: Any) -> Any:
    """Recursively drop unset fields and collapse empty mappings to None.

    A field is unset when it is ``None`` or the empty string. A mapping whose
    fields are all unset (after cleaning its nested mappings) becomes
    ``None``, so no attribute is ever persisted as ``{}``. Non-mapping values,
    lists included, are returned unchanged.

    >>> clean_empty_object({"border": {"color": None, "width": "2px"}, "color": {}})
    {'border': {'width': '2px'}}
    >>> clean_empty_object({"border": {"top": {"color": None}}}) is None
    True
    """
    if not isinstance(value, Mapping):
        return value

    cleaned = {}
    for key, item in value.items():
        item = clean_empty_object(item)
        if item is None or item == "":
            continue
        cleaned[key] = item

    return cleaned or None
