"""Path normalization and segment splitting."""

from __future__ import annotations

from .segments import Segment, classify_segment

ROOT_SIGILS = ("$", "@")
_NAME_STOP = ".["


def normalize_path(path: str) -> str:
    """Trim ``path`` and drop at most one ``$`` followed by at most one ``@``."""

    normalized = path.strip()
    for sigil in ROOT_SIGILS:
        if normalized.startswith(sigil):
            normalized = normalized[len(sigil) :]
    return normalized


def _name_end(path: str, start: int) -> int:
    end = start
    while end < len(path) and path[end] not in _NAME_STOP:
        end += 1
    return end


def split_segments(path: str) -> list[str]:
    """Split a normalized path into raw segment tokens.

    Three shapes are recognized, tried in this order at every position:
    ``[content]`` (non-empty content up to the first ``]``), ``..name`` and
    ``.name``, where ``name`` is a non-empty run without ``.`` or ``[``.
    Characters that begin none of them are skipped.
    """

    tokens: list[str] = []
    pos = 0
    while pos < len(path):
        if path[pos] == "[":
            close = path.find("]", pos + 1)
            if close > pos + 1:
                tokens.append(path[pos : close + 1])
                pos = close + 1
                continue

        if path.startswith("..", pos):
            end = _name_end(path, pos + 2)
            if end > pos + 2:
                tokens.append(path[pos:end])
                pos = end
                continue

        if path[pos] == ".":
            end = _name_end(path, pos + 1)
            if end > pos + 1:
                tokens.append(path[pos:end])
                pos = end
                continue

        pos += 1
    return tokens


def parse_segments(path: str) -> list[Segment]:
    return [classify_segment(token) for token in split_segments(path)]


__all__ = ["ROOT_SIGILS", "normalize_path", "parse_segments", "split_segments"]
