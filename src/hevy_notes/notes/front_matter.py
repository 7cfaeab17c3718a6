"""YAML front matter parsing and rendering."""

from typing import Any, Dict, Tuple

import yaml


FENCE = "---"


class FrontMatterError(ValueError):
    """Front matter exists but is not a YAML mapping."""


class _FrontMatterDumper(yaml.SafeDumper):
    """Block-style mappings with inline lists: ``exercises: [Squat, Row]``."""


def _represent_inline_list(dumper: yaml.SafeDumper, data: list) -> yaml.Node:
    return dumper.represent_sequence("tag:yaml.org,2002:seq", data, flow_style=True)


_FrontMatterDumper.add_representer(list, _represent_inline_list)


def split_front_matter(text: str) -> Tuple[Dict[str, Any], str]:
    """
    Split a note into its front matter mapping and the text after it.

    The remainder is returned exactly as stored so it can be written back
    unchanged. A note without a leading '---' fence has empty metadata.

    Raises:
        FrontMatterError: If the fenced block is not valid YAML or not a mapping
    """
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip("\r\n") != FENCE:
        return {}, text

    for index in range(1, len(lines)):
        if lines[index].rstrip("\r\n") == FENCE:
            raw = "".join(lines[1:index])
            remainder = "".join(lines[index + 1:])
            break
    else:
        # Unterminated fence: treat the whole note as body
        return {}, text

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise FrontMatterError(str(e)) from e

    if data is None:
        return {}, remainder
    if not isinstance(data, dict):
        raise FrontMatterError(f"expected a mapping, got {type(data).__name__}")
    return data, remainder


def dump_front_matter(data: Dict[str, Any]) -> str:
    """Render a mapping as a fenced YAML block, preserving key order."""
    if not data:
        return f"{FENCE}\n{FENCE}\n"
    body = yaml.dump(
        data,
        Dumper=_FrontMatterDumper,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        width=1000,
    )
    return f"{FENCE}\n{body}{FENCE}\n"


def join_front_matter(data: Dict[str, Any], remainder: str) -> str:
    """Inverse of split_front_matter."""
    return dump_front_matter(data) + remainder
