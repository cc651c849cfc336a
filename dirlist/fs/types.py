"""Domain datatypes for filesystem objects seen during one listing pass."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass


@dataclass(frozen=True)
class Metadata:
    """Snapshot of the stat fields a listing needs.

    Captured once per filesystem object and never refreshed, so sorting and
    rendering always agree on the same values.
    """

    mode: int
    link_count: int
    owner_id: int
    group_id: int
    size: int
    modified_time: float
    inode: int

    @classmethod
    def from_stat(cls, result: os.stat_result) -> Metadata:
        return cls(
            mode=int(result.st_mode),
            link_count=int(result.st_nlink),
            owner_id=int(result.st_uid),
            group_id=int(result.st_gid),
            size=int(result.st_size),
            modified_time=float(result.st_mtime),
            inode=int(result.st_ino),
        )

    @property
    def is_directory(self) -> bool:
        return stat.S_ISDIR(self.mode)

    @property
    def is_file(self) -> bool:
        return stat.S_ISREG(self.mode)

    @property
    def is_symlink(self) -> bool:
        return stat.S_ISLNK(self.mode)

    @property
    def is_block_device(self) -> bool:
        return stat.S_ISBLK(self.mode)

    @property
    def is_char_device(self) -> bool:
        return stat.S_ISCHR(self.mode)

    @property
    def is_socket(self) -> bool:
        return stat.S_ISSOCK(self.mode)


@dataclass(frozen=True)
class RawEntry:
    """One named filesystem object prior to filtering and rendering."""

    name: str
    metadata: Metadata

    @property
    def dotted(self) -> bool:
        return self.name.startswith(".")

    @property
    def implied(self) -> bool:
        return self.name in {".", ".."}


__all__ = [
    "Metadata",
    "RawEntry",
]
