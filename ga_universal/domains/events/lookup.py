"""Safe nested lookups over loosely-typed message documents.

Keys are matched case-insensitively and ignoring separators, so ``userId``,
``user_id`` and ``User Id`` are the same key. A key that itself contains
dots (``{"page.url": ...}``) is found for the path ``page.url`` too.
Missing segments yield ``None``; nothing here raises.
"""

import re
from typing import Any, Mapping, Optional, Sequence

_NON_KEY_CHARS = re.compile(r"[^\w.]|_")


def normalize_key(key: Any) -> str:
    """Lowercase ``key`` and strip everything but letters, digits and dots.

    Letters and digits from any script are kept, so ``価格`` and ``名前``
    stay distinct.
    """
    return _NON_KEY_CHARS.sub("", str(key).lower())


def _find_key(obj: Mapping[str, Any], candidate: str) -> Optional[Any]:
    if candidate in obj:
        return candidate
    target = normalize_key(candidate)
    # Keys made only of separators match nothing but themselves.
    if not target.strip("."):
        return None
    for key in obj:
        if normalize_key(key) == target:
            return key
    return None


def _lookup_segments(obj: Any, segments: Sequence[str]) -> Any:
    if not segments:
        return obj

    if isinstance(obj, list):
        head = segments[0]
        if head.isdigit() and int(head) < len(obj):
            return _lookup_segments(obj[int(head)], segments[1:])
        return None

    if not isinstance(obj, Mapping):
        return None

    # Longest key first so literal dotted keys win over nesting.
    for split in range(len(segments), 0, -1):
        key = _find_key(obj, ".".join(segments[:split]))
        if key is None:
            continue
        value = _lookup_segments(obj[key], segments[split:])
        if value is not None:
            return value
    return None


def lookup(obj: Any, path: str) -> Any:
    """Return the value at dotted ``path`` inside ``obj``, or ``None``.

    Example:
        lookup({"context": {"Page": {"url": "http://x"}}}, "context.page.url")
        # => "http://x"
    """
    if not path:
        return obj
    return _lookup_segments(obj, path.split("."))
