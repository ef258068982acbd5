# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/bootcfg/ignition/models.py

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .constants import DEFAULT_FILE_MODE, IGNITION_VERSION


class IgnitionSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: str


class FileContents(BaseModel):
    source: str                      # data URL, never re-escaped


class FileEntry(BaseModel):
    path: str                        # absolute path on the node
    contents: FileContents
    mode: int = DEFAULT_FILE_MODE


class Unit(BaseModel):
    name: str
    enabled: bool = True
    contents: Optional[str] = None   # literal unit text


class Storage(BaseModel):
    files: List[FileEntry] = Field(default_factory=list)


class Systemd(BaseModel):
    units: List[Unit] = Field(default_factory=list)


class Document(BaseModel):
    """
    First-boot Ignition document.

    Appenders mutate ``storage.files`` and ``systemd.units`` in place.
    The ``ignition`` section is fixed when the document is created.
    """
    ignition: IgnitionSection = Field(frozen=True)
    storage: Storage = Field(default_factory=Storage)
    systemd: Systemd = Field(default_factory=Systemd)

    @property
    def version(self) -> str:
        return self.ignition.version

    @property
    def files(self) -> List[FileEntry]:
        return self.storage.files

    @property
    def units(self) -> List[Unit]:
        return self.systemd.units

    def paths(self) -> List[str]:
        return [f.path for f in self.storage.files]

    def to_json(self) -> str:
        return self.model_dump_json(exclude_none=True)


def new_document(version: str = IGNITION_VERSION) -> Document:
    """Returns an empty document with the version set."""
    return Document(ignition=IgnitionSection(version=version))
