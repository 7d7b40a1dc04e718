"""Client for the Text Embeddings Inference HTTP API."""

from teiclient.client import EmbeddingServiceClient
from teiclient.config import ClientConfig
from teiclient.exceptions import (
    BackendError,
    EmptyInputError,
    OverloadedError,
    ResponseDecodeError,
    ServerError,
    TEIClientError,
    TokenizerError,
    TransportError,
    UnknownServerError,
    ValidationError,
)
from teiclient.logging_config import install_null_handler, setup_logging
from teiclient.models import (
    ErrorType,
    InfoResponse,
    Prediction,
    Rank,
    SimpleToken,
    SparseValue,
)

install_null_handler()

__all__ = [
    "EmbeddingServiceClient",
    "ClientConfig",
    "TEIClientError",
    "EmptyInputError",
    "TransportError",
    "ResponseDecodeError",
    "ServerError",
    "ValidationError",
    "TokenizerError",
    "BackendError",
    "OverloadedError",
    "UnknownServerError",
    "ErrorType",
    "InfoResponse",
    "Prediction",
    "Rank",
    "SimpleToken",
    "SparseValue",
    "setup_logging",
]
