# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/bootcfg/credentials/sources.py

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from ..errors import RetrievalError
from ..server.appenders import KubeconfigSource
from ..utils.retry import retry

log = logging.getLogger("bootcfg")


def static_kubeconfig_source(
    kubeconfig: Union[bytes, str],
    root_ca: Optional[bytes] = None,
) -> KubeconfigSource:
    data = kubeconfig.encode("utf-8") if isinstance(kubeconfig, str) else kubeconfig

    def _source() -> Tuple[bytes, Optional[bytes]]:
        return data, root_ca

    return _source


def file_kubeconfig_source(
    kubeconfig_path: Union[str, Path],
    root_ca_path: Optional[Union[str, Path]] = None,
) -> KubeconfigSource:
    """
    Source that reads the kubeconfig (and optionally the root CA) from disk
    on every call.
    """
    def _source() -> Tuple[bytes, Optional[bytes]]:
        try:
            kubeconfig = Path(kubeconfig_path).read_bytes()
            root_ca = Path(root_ca_path).read_bytes() if root_ca_path else None
        except OSError as exc:
            raise RetrievalError(f"could not read kubeconfig: {exc}") from exc
        return kubeconfig, root_ca

    return _source


def with_retries(source: KubeconfigSource, *, retries: int, delay: float = 1.0) -> KubeconfigSource:
    """Retry *source* on RetrievalError; the last error is raised as-is."""

    def _on_retry(attempt: int, exc: Exception) -> None:
        log.warning(f"kubeconfig retrieval attempt {attempt}/{retries} failed: {exc}")

    return retry(
        retries=retries,
        delay=delay,
        retry_on=(RetrievalError,),
        on_retry=_on_retry,
        reraise=True,
    )(source)
