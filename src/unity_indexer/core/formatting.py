"""Short, single-line renderings for the command's summary output."""

from __future__ import annotations


def compress_path(path: str, max_len: int = 30) -> str:
    """Shorten a "/"-separated path to its top directory and file name.

    The top directory is the category a script is filed under in the index,
    so it survives compression when it fits:

        Assets/Scripts/Player/PlayerMover.cs -> Assets/.../PlayerMover.cs
        Scripts/Player.cs -> Scripts/Player.cs
    """
    if len(path) <= max_len:
        return path

    head, _, rest = path.partition("/")
    if "/" not in rest:
        return path

    name = rest.rsplit("/", 1)[-1]
    shortened = f"{head}/.../{name}"
    return shortened if len(shortened) <= max_len else name


def format_path_list(paths: list[str], *, max_total: int = 80, max_shown: int = 3) -> str:
    """Join compressed paths, collapsing the tail into "+N more".

    Falls back to a bare count when even one path does not fit in max_total.
    """
    if not paths:
        return ""

    shown = [compress_path(p) for p in paths]
    if len(shown) > max_shown:
        text = ", ".join(shown[: max_shown - 1]) + f", +{len(shown) - max_shown + 1} more"
    else:
        text = ", ".join(shown)

    if len(text) > max_total and len(shown) > 1:
        text = f"{shown[0]}, +{len(shown) - 1} more"
    if len(text) > max_total:
        return pluralize(len(paths), "file")
    return text


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Count with the matching word form, e.g. "1 file" or "3 files"."""
    word = singular if count == 1 else (plural or singular + "s")
    return f"{count} {word}"


def format_duration(seconds: float) -> str:
    """Human-readable elapsed time: 0.3s, 1m 30s, 1h 1m."""
    if seconds < 0:
        raise ValueError("Duration must be non-negative")
    if seconds < 60:
        return f"{seconds:.1f}s"

    minutes, secs = divmod(int(seconds), 60)
    if minutes < 60:
        return f"{minutes}m {secs}s"
    hours, minutes = divmod(minutes, 60)
    return f"{hours}h {minutes}m"
