# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/bootcfg/config/models.py

from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field

from ..ignition.constants import IGNITION_VERSION


class BootstrapSettings(BaseModel):
    ignition_version: str = IGNITION_VERSION
    kubeconfig_path: Path
    root_ca_path: Optional[Path] = None
    os_image_url: str = ""                      # empty disables the initial pivot
    retrieval_retries: int = Field(default=1, ge=1)
    retrieval_delay_seconds: float = Field(default=2.0, ge=0)
    log_dir: Optional[Path] = None

    def kubeconfig_source(self):
        """
        Build the file-backed kubeconfig source, retried when
        retrieval_retries > 1.
        """
        from ..credentials.sources import file_kubeconfig_source, with_retries

        source = file_kubeconfig_source(self.kubeconfig_path, self.root_ca_path)
        if self.retrieval_retries > 1:
            source = with_retries(
                source,
                retries=self.retrieval_retries,
                delay=self.retrieval_delay_seconds,
            )
        return source
