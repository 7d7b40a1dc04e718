"""Text Embeddings Inference HTTP API client."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from http.cookiejar import CookieJar, DefaultCookiePolicy
from typing import TypeVar

import httpx
import pydantic
from pydantic import BaseModel, TypeAdapter

from teiclient import models
from teiclient.config import ClientConfig
from teiclient.exceptions import (
    BackendError,
    EmptyInputError,
    OverloadedError,
    ResponseDecodeError,
    ServerError,
    TokenizerError,
    TransportError,
    UnknownServerError,
    ValidationError,
)
from teiclient.models import ErrorType

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MESSAGE_ERRORS: dict[str, type[ServerError]] = {
    ErrorType.VALIDATION.value: ValidationError,
    ErrorType.TOKENIZER.value: TokenizerError,
    ErrorType.BACKEND.value: BackendError,
}


class EmbeddingServiceClient:
    """Synchronous wrapper around the HTTP API of an embedding server.

    Usage::

        with EmbeddingServiceClient("http://localhost:8080", timeout=30) as client:
            vectors = client.embed("Hi there!")

    Every call is one independent round trip. Nothing is retried; callers
    decide how to react to OverloadedError and friends.
    """

    def __init__(
        self,
        base_url: str,
        headers: Mapping[str, str] | None = None,
        cookies: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> None:
        self._config = ClientConfig.explicit(
            base_url=base_url,
            headers=dict(headers or {}),
            cookies=dict(cookies or {}),
            timeout=timeout,
        )
        # Set-Cookie from the server is never stored; only configured cookies are sent
        self._client = httpx.Client(
            timeout=self._config.http_timeout,
            cookies=CookieJar(policy=DefaultCookiePolicy(allowed_domains=[])),
        )

    @classmethod
    def from_config(cls, config: ClientConfig) -> EmbeddingServiceClient:
        return cls(config.base_url, config.headers, config.cookies, config.timeout)

    @classmethod
    def from_env(cls) -> EmbeddingServiceClient:
        """TEI_* 환경변수 / .env 에서 설정을 읽어 생성."""
        return cls.from_config(ClientConfig())

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def config(self) -> ClientConfig:
        return self._config

    def close(self) -> None:
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    # ── Public API ──

    def info(self) -> models.InfoResponse:
        """서버 모델/배칭 정보 조회."""
        response = self._send("GET", "info")
        return self._decode(response, models.INFO_ADAPTER)

    def health_check(self) -> bool:
        """200이면 True. 그 외 상태 코드는 에러가 아니라 False."""
        response = self._send("GET", "health")
        return response.status_code == 200

    def metrics(self) -> str:
        """Prometheus text format 메트릭 원문."""
        response = self._send("GET", "metrics")
        if response.status_code != 200:
            raise self._error_from_response(response)
        return response.text

    def embed(self, inputs: str, truncate: bool = False) -> models.EmbedResponse:
        """Pooled embedding. 빈 문자열은 요청 없이 EmptyInputError."""
        if inputs == "":
            raise EmptyInputError()
        payload = models.EmbedRequest(inputs=inputs, truncate=truncate)
        return self._post("embed", payload, models.EMBED_ADAPTER)

    def embed_all(self, inputs: Sequence[str], truncate: bool = False) -> models.EmbedAllResponse:
        """Per-token embeddings without pooling."""
        payload = models.EmbedAllRequest(inputs=list(inputs), truncate=truncate)
        return self._post("embed_all", payload, models.EMBED_ALL_ADAPTER)

    def embed_sparse(
        self, inputs: Sequence[str], truncate: bool = False
    ) -> models.EmbedSparseResponse:
        """SPLADE sparse embeddings, if the served model supports it."""
        payload = models.EmbedSparseRequest(inputs=list(inputs), truncate=truncate)
        return self._post("embed_sparse", payload, models.EMBED_SPARSE_ADAPTER)

    def predict(self, inputs: str) -> list[models.Prediction]:
        payload = models.PredictRequest(inputs=inputs)
        return self._post("predict", payload, models.PREDICT_ADAPTER)

    def rerank(self, query: str, texts: Sequence[str]) -> list[models.Rank]:
        """query 기준으로 texts 재정렬. 서버 순서/점수는 유지하고 text만 index로 채운다."""
        texts = list(texts)
        payload = models.RerankRequest(query=query, texts=texts)
        ranks = self._post("rerank", payload, models.RERANK_ADAPTER)
        for rank in ranks:
            if not 0 <= rank.index < len(texts):
                raise ResponseDecodeError(
                    f"rerank index {rank.index} out of range for {len(texts)} texts"
                )
            rank.text = texts[rank.index]
        return ranks

    def tokenize(
        self, inputs: Sequence[str], add_special_tokens: bool = True
    ) -> list[list[models.SimpleToken]]:
        payload = models.TokenizeRequest(
            inputs=list(inputs), add_special_tokens=add_special_tokens
        )
        return self._post("tokenize", payload, models.TOKENIZE_ADAPTER)

    def decode(self, ids: Sequence[Sequence[int]], skip_special_tokens: bool = True) -> list[str]:
        payload = models.DecodeRequest(
            ids=[list(seq) for seq in ids], skip_special_tokens=skip_special_tokens
        )
        return self._post("decode", payload, models.DECODE_ADAPTER)

    # ── Internal ──

    def _prepare_headers(self) -> httpx.Headers:
        headers = httpx.Headers({"Content-Type": "application/json"})
        # case-insensitive overwrite of defaults
        for name, value in self._config.headers.items():
            headers[name] = value
        if self._config.cookies:
            cookie = "; ".join(f"{name}={value}" for name, value in self._config.cookies.items())
            existing = headers.get("Cookie")
            headers["Cookie"] = f"{existing}; {cookie}" if existing else cookie
        return headers

    def _send(self, method: str, path: str, payload: BaseModel | None = None) -> httpx.Response:
        url = f"{self._config.base_url}/{path}"
        body = payload.model_dump(mode="json") if payload is not None else None
        try:
            logger.debug("Request: %s %s", method, url)
            response = self._client.request(
                method, url, json=body, headers=self._prepare_headers()
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"failed to execute http request ({method} {url})", e) from e
        logger.debug("Response: %s %s → %d", method, url, response.status_code)
        return response

    def _post(self, path: str, payload: BaseModel, adapter: TypeAdapter[T]) -> T:
        response = self._send("POST", path, payload)
        return self._decode(response, adapter)

    def _decode(self, response: httpx.Response, adapter: TypeAdapter[T]) -> T:
        if response.status_code != 200:
            raise self._error_from_response(response)
        return _parse(response, adapter, "response")

    def _error_from_response(self, response: httpx.Response) -> ServerError:
        """에러 payload를 error_type에 따라 정규화된 예외로 변환."""
        payload = _parse(response, models.ERROR_ADAPTER, "error response")
        status = response.status_code

        if payload.error_type == ErrorType.OVERLOADED.value:
            return OverloadedError(status_code=status)
        error_cls = _MESSAGE_ERRORS.get(payload.error_type)
        if error_cls is not None:
            return error_cls(payload.error, status_code=status)
        return UnknownServerError(payload.error_type, payload.error, status_code=status)


def _parse(response: httpx.Response, adapter: TypeAdapter[T], what: str) -> T:
    # strict: "0.1" is not a float and "1" is not an int; JSON ints still widen to float
    try:
        return adapter.validate_json(response.content, strict=True)
    except pydantic.ValidationError as e:
        raise ResponseDecodeError(
            f"failed to parse {what} (status {response.status_code}): {e}"
        ) from e
