# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Iterable

from ..ignition.models import Document
from .appenders import Appender


def run_appenders(document: Document, appenders: Iterable[Appender]) -> None:
    """
    Apply each appender to *document* in the given order.

    Stops at the first exception and re-raises it unchanged. Entries added
    by earlier appenders stay in the document; callers discard it on error.
    """
    for append in appenders:
        append(document)
