"""HTML fragments and the aggregated index page."""

from __future__ import annotations

from html import escape
from pathlib import Path
from typing import Optional

from .errors import IndexWriteError

_HEADER = """<html>
<head>
<title>{title}</title>
</head>
<body style="background:#e8e9ff;padding: 20px;font-family: monospace">
<div style="width:100%; max-width:700px;text-align:left;padding: 20px;border:1px solid #c7c2c2; background:white">
<h1>{title}</h1>
"""

_FOOTER = """</div>
</body>
</html>
"""


def spec_heading(spec_name: str) -> str:
    return f"<hr/><h2>{escape(spec_name)}</h2>\n"


def release_item(checkout_target: str, href: str, release_date: Optional[str]) -> str:
    return (
        f'<li><div><h3><a href="{escape(href)}">{escape(checkout_target)}</a></h3>'
        f"<p>release date: {escape(release_date or 'unknown')}</p></div></li>\n"
    )


def render_index(title: str, body: str) -> str:
    return _HEADER.format(title=escape(title)) + body + _FOOTER


def write_index(path: Path, document: str) -> None:
    try:
        path.write_text(document, encoding="utf-8")
    except OSError as e:
        raise IndexWriteError(f"Cannot write index {path}: {e}", data={"path": str(path)}) from e
