"""Toolkit-independent tray menu model.

The tray menu is described by a MenuTemplate: an ordered tuple of
MenuEntry descriptors ending with the exit entry. Folder entries (ids of
the form ``file-<folder id>``) form one contiguous block right before the
exit entry and are only ever replaced as a block or removed one at a time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import partial
from typing import Callable, Iterable, Protocol, Sequence

from auto_seedr.client import SeedrClient
from auto_seedr.models import Folder

logger = logging.getLogger(__name__)

FOLDER_ID_PREFIX = "file-"
EXIT_ID = "exit"


@dataclass(frozen=True, slots=True)
class MenuEntry:
    """Single menu item, submenu or separator.

    ``action`` is excluded from equality so that two renderings of the same
    folder list compare equal.
    """

    label: str
    id: str | None = None
    action: Callable[[], None] | None = field(default=None, compare=False)
    submenu: tuple[MenuEntry, ...] = ()
    enabled: bool = True
    separator: bool = False


def separator() -> MenuEntry:
    return MenuEntry(label="", separator=True)


def folder_entry_id(folder_id: int) -> str:
    return f"{FOLDER_ID_PREFIX}{folder_id}"


def is_folder_entry(entry: MenuEntry) -> bool:
    return entry.id is not None and entry.id.startswith(FOLDER_ID_PREFIX)


class FolderActions(Protocol):
    """Callbacks invoked from a folder's submenu."""

    def download(self, folder: Folder) -> None: ...

    def copy_url(self, folder: Folder) -> None: ...

    def delete(self, folder: Folder) -> None: ...


def build_folder_entries(
    folders: Iterable[Folder], actions: FolderActions
) -> list[MenuEntry]:
    """Return one submenu entry per folder.

    Nothing remote happens here; the archive URL is requested only when
    "download" or "copy url" is clicked.
    """
    entries: list[MenuEntry] = []
    seen: set[str] = set()
    for folder in folders:
        entry_id = folder_entry_id(folder.id)
        if entry_id in seen:
            logger.warning("Skipping duplicate folder id %s", folder.id)
            continue
        seen.add(entry_id)
        entries.append(
            MenuEntry(
                label=folder.name,
                id=entry_id,
                submenu=(
                    MenuEntry("download", action=partial(actions.download, folder)),
                    MenuEntry("copy url", action=partial(actions.copy_url, folder)),
                    MenuEntry("delete", action=partial(actions.delete, folder)),
                ),
            )
        )
    return entries


class MenuTemplate:
    """Mutable holder of the tray menu description.

    Only two mutators exist, ``replace_folder_block`` and ``remove_entry``.
    Both swap in a new tuple, so snapshots handed out by ``entries`` never
    change underneath their readers.
    """

    def __init__(self, entries: Iterable[MenuEntry]) -> None:
        snapshot = tuple(entries)
        if not snapshot or snapshot[-1].id != EXIT_ID:
            raise ValueError("menu template must end with the exit entry")
        self._entries = snapshot

    @property
    def entries(self) -> tuple[MenuEntry, ...]:
        return self._entries

    def ids(self) -> list[str]:
        return [e.id for e in self._entries if e.id is not None]

    def folder_entries(self) -> tuple[MenuEntry, ...]:
        return tuple(e for e in self._entries if is_folder_entry(e))

    def replace_folder_block(self, block: Sequence[MenuEntry]) -> None:
        """Drop all folder entries and insert *block* just before exit."""
        for entry in block:
            if not is_folder_entry(entry):
                raise ValueError(f"not a folder entry: {entry.id!r}")
        header = tuple(e for e in self._entries[:-1] if not is_folder_entry(e))
        self._entries = (*header, *block, self._entries[-1])

    def remove_entry(self, entry_id: str) -> bool:
        """Remove the entry with *entry_id*; return True if one was removed."""
        if entry_id == EXIT_ID:
            raise ValueError("the exit entry cannot be removed")
        remaining = tuple(e for e in self._entries if e.id != entry_id)
        if len(remaining) == len(self._entries):
            return False
        self._entries = remaining
        return True


class MenuSynchronizer:
    """Keep the folder block of a MenuTemplate in line with Seedr.

    ``fetch_entries`` does the network part and may run on any thread;
    ``apply`` mutates the template and belongs to the thread owning it.
    """

    def __init__(
        self, client: SeedrClient, template: MenuTemplate, actions: FolderActions
    ) -> None:
        self.client = client
        self.template = template
        self.actions = actions

    def fetch_entries(self) -> list[MenuEntry]:
        result = self.client.list_folders()
        return build_folder_entries(result.value, self.actions)

    def apply(self, entries: Sequence[MenuEntry]) -> None:
        self.template.replace_folder_block(entries)
        logger.debug("Menu now lists %d folder(s)", len(entries))

    def refresh(self) -> None:
        self.apply(self.fetch_entries())
