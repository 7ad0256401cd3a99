# SPDX-License-Identifier: Apache-2.0
# Copyright 2024-2026 CAB Ingénierie / Christophe ABOULICAM
"""Flux exceptions.

Resolution problems never escape the filter: the resolver turns
InvalidTransformerConfigError into "no transformer". The remaining errors
flag programming mistakes and propagate.
"""


class FluxError(Exception):
    """Base class for Flux errors."""

    pass


class InvalidTransformerConfigError(FluxError):
    """Raised when a transformer config descriptor cannot be constructed."""

    def __init__(self, message: str, descriptor: object = None):
        super().__init__(message)
        self.descriptor = descriptor


class TransformerRegistrationError(FluxError):
    """Raised when a value cannot be registered as a transformer."""

    pass


class MissingRequestParameterError(FluxError):
    """Raised when a decorated endpoint does not accept a ``request`` argument."""

    pass
