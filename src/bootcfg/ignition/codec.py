# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/bootcfg/ignition/codec.py

from __future__ import annotations

import base64
import binascii
import logging
import re
from pathlib import Path
from typing import Optional, Union
from urllib.parse import quote, unquote_to_bytes

from ..errors import BootstrapError, MalformedEncodingError
from .constants import DATA_URL_PREFIX, DEFAULT_FILE_MODE
from .models import Document, FileContents, FileEntry

log = logging.getLogger("bootcfg")

# Only the RFC 2396 mark characters are kept besides what quote() never
# escapes; reserved characters such as "#" and "?" are always escaped.
_SAFE_CHARS = "!~*'()"

_DATA_URL_RE = re.compile(r"^(?i:data):(?P<meta>[^,]*),(?P<body>.*)$", re.DOTALL)
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")

Payload = Union[bytes, str]


def _as_bytes(payload: Payload) -> bytes:
    if isinstance(payload, str):
        return payload.encode("utf-8")
    return bytes(payload)


def encode_content(payload: Payload) -> str:
    """
    Encode an arbitrary payload as a ``data:`` URL with a percent-escaped body.

    Never fails: empty, binary and non UTF-8 payloads are all accepted.
    """
    return f"{DATA_URL_PREFIX},{quote(_as_bytes(payload), safe=_SAFE_CHARS)}"


def decode_content(inline: str) -> bytes:
    """
    Decode a data URL back into bytes.

    Accepts an optional media type and the ``;base64`` marker so documents
    produced by other tools can be read too.
    """
    if not isinstance(inline, str):
        raise MalformedEncodingError(f"expected a data URL string, got {type(inline).__name__}")

    m = _DATA_URL_RE.match(inline)
    if m is None:
        raise MalformedEncodingError(f"not a data URL: {inline[:40]!r}")

    meta, body = m.group("meta"), m.group("body")
    bad = _BAD_ESCAPE_RE.search(body)
    if bad:
        raise MalformedEncodingError(
            f"invalid escape sequence at offset {bad.start()}: {body[bad.start():bad.start() + 3]!r}"
        )

    raw = unquote_to_bytes(body)

    params = [p.strip().lower() for p in meta.split(";")]
    if params[-1] == "base64":
        try:
            return base64.b64decode(raw, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise MalformedEncodingError(f"invalid base64 body: {exc}") from exc

    return raw


def append_file(
    document: Document,
    path: str,
    contents: Payload,
    mode: int = DEFAULT_FILE_MODE,
) -> FileEntry:
    """Embed *contents* at *path* and append the entry to the document's file list."""
    entry = FileEntry(
        path=path,
        contents=FileContents(source=encode_content(contents)),
        mode=mode,
    )
    document.storage.files.append(entry)
    log.debug(f"appended file path={path} mode={oct(mode)}")
    return entry


def copy_file(
    document: Document,
    out_path: str,
    src_path: Union[str, Path],
    mode: int = DEFAULT_FILE_MODE,
) -> FileEntry:
    """Read a local file and embed it at *out_path*."""
    try:
        contents = Path(src_path).read_bytes()
    except OSError as exc:
        raise BootstrapError(f"could not read file from: {src_path}, err: {exc}") from exc
    return append_file(document, out_path, contents, mode=mode)


def read_file(document: Document, path: str) -> Optional[bytes]:
    """
    Return the decoded contents embedded at *path*, or None.
    The last entry wins when a path was appended more than once.
    """
    for entry in reversed(document.storage.files):
        if entry.path == path:
            return decode_content(entry.contents.source)
    return None
