import html
import json
from typing import Any

BOM = "\ufeff"


def escape_html(value: Any) -> str:
    """Escape report text before it is stored, so it can be rendered safely."""
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


def load_json_object(content: str) -> dict[str, Any]:
    """Parse ``content`` as a JSON object.

    Raises ``ValueError`` when the text is not JSON or nests too deeply to
    decode, and ``TypeError`` when it is JSON but not an object.
    """
    try:
        data = json.loads(content.lstrip(BOM))
    except RecursionError as e:
        raise ValueError("JSON nesting too deep to decode") from e
    if not isinstance(data, dict):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")
    return data
