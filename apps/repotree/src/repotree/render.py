"""Tree listing renderer."""

from collections.abc import Iterable

from gh import EntryKind, TreeEntry

KIND_LABELS = {
    EntryKind.DIRECTORY: "DIR",
    EntryKind.FILE: "FILE",
    EntryKind.OTHER: "UNK",
}


def format_entry(entry: TreeEntry) -> str:
    return f"{KIND_LABELS[entry.kind]} {entry.path}\n"


def format_tree(entries: Iterable[TreeEntry]) -> str:
    """Render one "<DIR|FILE|UNK> <path>" line per entry, in input order."""
    return "".join(format_entry(entry) for entry in entries)
