# -*- coding: utf-8 -*-
"""
models

In-memory entities used by the example panel.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass
class DemoNote:
    """Short note displayed in the example CRUD listing."""

    id: int
    title: str
    status: str
    body: str = ""


class DemoNoteStore:
    """Keep demo notes in memory."""

    def __init__(self) -> None:
        """Seed the store with a few notes."""

        self._notes: List[DemoNote] = [
            DemoNote(1, "Welcome", "active", "First note"),
            DemoNote(2, "Release checklist", "pending", "Tag and publish"),
            DemoNote(3, "Archive old tickets", "archived"),
        ]

    def all(self) -> List[DemoNote]:
        """Return every stored note."""

        return list(self._notes)


notes = DemoNoteStore()


__all__ = ["DemoNote", "DemoNoteStore", "notes"]

# The End
