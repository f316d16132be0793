from typing import Any


def contains_target(text: str, target: str) -> bool:
    return bool(target) and target in text


def split_highlight(text: str, target: str, base_style: Any, match_style: Any) -> list[tuple[str, Any]]:
    """Split ``text`` on ``target`` and interleave styled match spans.

    Returns ``(text, style)`` pairs; callers wrap them in whatever span type
    their backend uses. Empty pieces are kept so the pairs line up with
    ``str.split``.
    """
    if not target:
        return [(text, base_style)]
    spans: list[tuple[str, Any]] = []
    for part in text.split(target):
        spans.append((part, base_style))
        spans.append((target, match_style))
    spans.pop()
    return spans
