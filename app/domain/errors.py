# app/domain/errors.py
"""
Error taxonomy shared by services and routers.

Each error carries the HTTP status it maps to; the API layer turns any
AppError into the `{success: false, error}` envelope. Nothing is retried.
"""
from __future__ import annotations
from typing import Optional


class AppError(Exception):
    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ClientInputError(AppError):
    """Missing/invalid field, oversized or wrong-type upload."""
    status_code = 400


class NotFoundError(AppError):
    status_code = 404


class ConfigurationError(AppError):
    """Missing vendor credential or other server-side setup problem."""
    status_code = 500


class UpstreamError(AppError):
    """Vendor returned non-2xx, or a 2xx without a usable payload."""
    status_code = 502

    def __init__(self, message: str, upstream_status: Optional[int] = None):
        super().__init__(message)
        self.upstream_status = upstream_status


class ReferenceImageError(UpstreamError):
    """A reference image URL could not be downloaded."""
