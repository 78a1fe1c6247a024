"""Conector Speakap - adapter de borda para a plataforma Speakap.

Responsabilidades:
- Signed request (canonicalização, assinatura HMAC, validade)
- Cliente HTTP da API REST (headers, corpo, normalização de resultado)
- Erros e logging de chamadas à API
"""

from .api_errors import (
    REQUEST_FAILED_CODE,
    UNEXPECTED_REPLY_CODE,
    ApiError,
)
from .encoding import form_encode, percent_encode
from .http_base import DEFAULT_API_VERSION, SpeakapApiConfig
from .http_client import SpeakapApiClient, create_speakap_api_client
from .models import ApiCallOptions, ApiResult
from .signed_request import (
    SIGNATURE_WINDOW_MS,
    SignedRequestContext,
    build_signed_request_string,
    canonicalize,
    compute_signature,
    parse_signed_request,
    sign_params,
    validate_signature,
)

__all__ = [
    "DEFAULT_API_VERSION",
    "REQUEST_FAILED_CODE",
    "SIGNATURE_WINDOW_MS",
    "UNEXPECTED_REPLY_CODE",
    "ApiCallOptions",
    "ApiError",
    "ApiResult",
    "SignedRequestContext",
    "SpeakapApiClient",
    "SpeakapApiConfig",
    "build_signed_request_string",
    "canonicalize",
    "compute_signature",
    "create_speakap_api_client",
    "form_encode",
    "parse_signed_request",
    "percent_encode",
    "sign_params",
    "validate_signature",
]
