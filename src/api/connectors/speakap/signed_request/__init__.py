"""Signed request Speakap: canonicalização, assinatura e verificação."""

from ..encoding import (
    EXCLUDED_FROM_CANONICAL,
    ISSUED_AT_KEY,
    SIGNATURE_KEY,
    build_signed_request_string,
    canonicalize,
    percent_encode,
)
from .context import SignedRequestContext, parse_signed_request
from .verify import (
    SIGNATURE_WINDOW_MS,
    compute_signature,
    parse_issued_at,
    sign_params,
    validate_signature,
)

__all__ = [
    "EXCLUDED_FROM_CANONICAL",
    "ISSUED_AT_KEY",
    "SIGNATURE_KEY",
    "SIGNATURE_WINDOW_MS",
    "SignedRequestContext",
    "build_signed_request_string",
    "canonicalize",
    "compute_signature",
    "parse_issued_at",
    "parse_signed_request",
    "percent_encode",
    "sign_params",
    "validate_signature",
]
