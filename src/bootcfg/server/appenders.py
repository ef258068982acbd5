# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/bootcfg/server/appenders.py

from __future__ import annotations

import json
from functools import partial
from typing import Callable, List, Optional, Tuple

from ..errors import SerializationError
from ..ignition.codec import append_file
from ..ignition.constants import (
    CURRENT_CONFIG_ANNOTATION,
    DAEMON_STATE_ANNOTATION,
    DAEMON_STATE_DONE,
    DESIRED_CONFIG_ANNOTATION,
    KUBECONFIG_PATH,
    NODE_ANNOTATIONS_PATH,
    PIVOT_IMAGE_PATH,
)
from ..ignition.models import Document
from .units import pivot_reboot_unit

# () -> (kubeconfig, root CA); raises RetrievalError on failure
KubeconfigSource = Callable[[], Tuple[bytes, Optional[bytes]]]

# Each appender owns one entry in the document and raises on failure.
Appender = Callable[[Document], None]


def get_node_annotation(current_config: str) -> str:
    """Marshal the initial node annotations as compact JSON with sorted keys."""
    annotations = {
        CURRENT_CONFIG_ANNOTATION: current_config,
        DESIRED_CONFIG_ANNOTATION: current_config,
        DAEMON_STATE_ANNOTATION: DAEMON_STATE_DONE,
    }
    try:
        return json.dumps(annotations, sort_keys=True, separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"could not marshal node annotations, err: {exc}") from exc


def append_node_annotations(document: Document, current_config: str) -> None:
    append_file(document, NODE_ANNOTATIONS_PATH, get_node_annotation(current_config))


def append_initial_pivot(document: Document, os_image_url: Optional[str]) -> None:
    if not os_image_url:
        return

    # Tell pivot.service to pivot early
    append_file(document, PIVOT_IMAGE_PATH, os_image_url + "\n")
    document.systemd.units.append(pivot_reboot_unit())


def append_kubeconfig(document: Document, source: KubeconfigSource) -> None:
    kubeconfig, _ = source()
    append_file(document, KUBECONFIG_PATH, kubeconfig)


def get_appenders(
    current_config: str,
    kubeconfig_source: KubeconfigSource,
    os_image_url: Optional[str] = "",
) -> List[Appender]:
    """
    Build the ordered appender list for one request.
    Order: node annotations, initial pivot, kubeconfig.
    """
    return [
        partial(append_node_annotations, current_config=current_config),
        partial(append_initial_pivot, os_image_url=os_image_url),
        partial(append_kubeconfig, source=kubeconfig_source),
    ]
