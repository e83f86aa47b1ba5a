"""Fill {group} placeholders (alert titles, fingerprints) from captured groups."""

from __future__ import annotations

import re
from collections.abc import Mapping

_PLACEHOLDER_RE = re.compile(r"\{(?P<key>[A-Za-z0-9_]+)\}")


def render_template(template: str, groups: Mapping[str, str]) -> str:
    """Replace ``{key}`` with ``groups[key]``; unknown keys are left untouched."""

    def _sub(m: re.Match[str]) -> str:
        return groups.get(m.group("key"), m.group(0))

    return _PLACEHOLDER_RE.sub(_sub, template)
