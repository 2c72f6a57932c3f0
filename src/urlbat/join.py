"""Joining a base and a path with exactly one slash."""


def join_segments(base: str, path: str) -> str:
    """
    Join ``base`` and ``path`` with a single separating slash.

    An empty side returns the other unchanged. Otherwise one trailing slash
    is stripped from ``base`` and one leading slash from ``path``; any
    further slashes are kept.

    Examples:
        >>> join_segments("http://example.com/", "/path")
        'http://example.com/path'
        >>> join_segments("http://example.com/", "//")
        'http://example.com//'
        >>> join_segments("yep/", "/")
        'yep/'
    """
    if not base:
        return path
    if not path:
        return base

    if base.endswith("/"):
        base = base[:-1]
    if path.startswith("/"):
        path = path[1:]

    return f"{base}/{path}"


__all__ = ["join_segments"]
