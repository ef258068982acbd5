# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/bootcfg/server/assembler.py

from __future__ import annotations

import logging
import time
from typing import Optional

from pydantic import BaseModel

from ..config.models import BootstrapSettings
from ..ignition.models import Document, new_document
from ..logging.log import init_logging
from .appenders import KubeconfigSource, get_appenders
from .pipeline import run_appenders

log = logging.getLogger("bootcfg")


class BootstrapRequest(BaseModel):
    pool: str                       # machine pool the node belongs to
    current_config: str             # rendered config last applied to the pool
    os_image_url: str = ""


def assemble_config(
    request: BootstrapRequest,
    kubeconfig_source: KubeconfigSource,
    *,
    base: Optional[Document] = None,
) -> Document:
    """
    Build the first-boot document for one request.

    *base* is used as the starting document when given; otherwise a fresh
    empty one is created. Errors from any appender propagate unchanged.
    """
    document = base if base is not None else new_document()
    appenders = get_appenders(request.current_config, kubeconfig_source, request.os_image_url)

    log.info(f"assembling config pool={request.pool} config={request.current_config}")
    t0 = time.time()
    try:
        run_appenders(document, appenders)
    except Exception as exc:
        log.error(f"config assembly failed pool={request.pool}: {exc}")
        raise

    duration_ms = int((time.time() - t0) * 1000)
    log.info(
        f"assembled config pool={request.pool} files={len(document.files)} "
        f"units={len(document.units)} duration_ms={duration_ms}"
    )
    return document


def assemble_from_settings(
    settings: BootstrapSettings,
    request: BootstrapRequest,
    *,
    verbose: bool = False,
) -> Document:
    """
    Assemble a document using loaded settings: logging goes to
    ``settings.log_dir``, the kubeconfig is read from the configured files,
    and the settings' OS image is used when the request names none.
    """
    _, run_id, log_path = init_logging(log_dir=settings.log_dir, verbose=verbose)
    log.debug(f"run_id={run_id} pool={request.pool} log_file={log_path}")

    if not request.os_image_url and settings.os_image_url:
        request = request.model_copy(update={"os_image_url": settings.os_image_url})

    return assemble_config(
        request,
        settings.kubeconfig_source(),
        base=new_document(settings.ignition_version),
    )
