# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/bootcfg/errors.py
class BootstrapError(RuntimeError):
    """Base class for bootstrap document assembly failures."""

class RetrievalError(BootstrapError):
    """Raised when a credential source cannot produce its payload."""

class SerializationError(BootstrapError):
    """Raised when an annotation payload cannot be marshalled."""

class MalformedEncodingError(BootstrapError, ValueError):
    """Raised when an inline data URL cannot be decoded."""
