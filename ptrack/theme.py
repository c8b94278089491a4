"""Shared visual constants and helpers for ptrack."""

from __future__ import annotations

import os

from rich.style import Style
from rich.text import Text

# ── Color Palette (GitHub Dark) ─────────────────────────────────────────

SURFACE = "#161b22"
MUTED = "#8b949e"

CYAN = "#58a6ff"
GREEN = "#39d353"
RED = "#f85149"

# ── ASCII Banner ────────────────────────────────────────────────────────

BANNER = r"""
        _                  _
  _ __ | |_ _ __ __ _  ___| | __
 | '_ \| __| '__/ _` |/ __| |/ /
 | |_) | |_| | | (_| | (__|   <
 | .__/ \__|_|  \__,_|\___|_|\_\
 |_|"""

TAGLINE = "every project under one roof"


def render_banner() -> Text:
    """Render the ptrack ASCII banner as styled Rich Text."""
    text = Text()
    for line in BANNER.strip("\n").split("\n"):
        text.append(line + "\n", style=Style(color=GREEN, bold=True))
    text.append(f"  {TAGLINE}\n", style=Style(color=MUTED, italic=True))
    return text


def project_label(path: str, root: str) -> Text:
    """Path relative to the scan root, with the project name highlighted."""
    rel = os.path.relpath(path, root)
    head, name = os.path.split(rel)
    text = Text()
    if head:
        text.append(head + os.sep, style=Style(color=MUTED))
    text.append(name or rel, style=Style(color=CYAN, bold=True))
    return text
