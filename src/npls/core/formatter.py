"""Presentation of the captured ``npm ls`` output.

The listing is passed through untouched apart from trimming and hiding
the scratch directory path, so that output from different runs can be
compared line by line.
"""

from __future__ import annotations

from pathlib import Path

from npls.utils.constants import PATH_PLACEHOLDER


def format_listing(
    raw: str,
    workspace_path: str | Path,
    placeholder: str = PATH_PLACEHOLDER,
) -> str:
    """Trim *raw* and replace every occurrence of *workspace_path*.

    Tree text and ``--json`` output are treated alike; nothing is
    parsed or validated.
    """
    text = raw.strip()
    needle = str(workspace_path)
    if not needle:
        return text
    return text.replace(needle, placeholder)
