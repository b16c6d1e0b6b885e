"""Slash-separated path joining and splitting."""

from __future__ import annotations

from stringkit.tokenizers import tokenize


def cat_paths(prefix: str, suffix: str) -> str:
    """Concatenate two '/'-separated paths, resolving leading '..' in suffix.

    Each leading '..' component of suffix removes the last component of
    prefix. Once prefix runs out, remaining '..' components are kept:

        cat_paths("foo/bar", "jive") == "foo/bar/jive"
        cat_paths("foo/bar", "../jive") == "foo/jive"
        cat_paths("foo", "../../jive") == "../jive"
    """
    prefix_parts = tokenize(prefix, "/")
    suffix_parts = tokenize(suffix, "/")

    i = 0
    while i < len(suffix_parts) and suffix_parts[i] == ".." and prefix_parts:
        prefix_parts.pop()
        i += 1

    return "/".join(prefix_parts + suffix_parts[i:])


def base_name(path: str) -> str:
    """Return the final component of path.

    A single trailing slash is ignored, so ``base_name("foo/bar/")`` is "bar".
    """
    if path.endswith("/"):
        path = path[:-1]
    return path[path.rfind("/") + 1 :]


def path_name(path: str) -> str:
    """Return everything up to and including the last '/', or "" if none.

    ``path_name(s) + base_name(s) == s`` for any s without a trailing slash.
    """
    i = path.rfind("/")
    return path[: i + 1]
