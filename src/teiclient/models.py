"""Text Embeddings Inference HTTP API의 요청/응답 모델."""

from enum import Enum

from pydantic import BaseModel, TypeAdapter


class ErrorType(str, Enum):
    """서버 에러 payload의 error_type 태그."""

    VALIDATION = "validation"
    TOKENIZER = "tokenizer"
    BACKEND = "backend"
    OVERLOADED = "overloaded"
    UNHEALTHY = "unhealthy"  # 어떤 엔드포인트도 현재 반환하지 않음


# ── 요청 모델 ──


class EmbedRequest(BaseModel):
    inputs: str
    truncate: bool = False


class EmbedAllRequest(BaseModel):
    inputs: list[str]
    truncate: bool = False


class EmbedSparseRequest(BaseModel):
    inputs: list[str]
    truncate: bool = False


class PredictRequest(BaseModel):
    inputs: str


class RerankRequest(BaseModel):
    query: str
    texts: list[str]


class TokenizeRequest(BaseModel):
    inputs: list[str]
    add_special_tokens: bool = True


class DecodeRequest(BaseModel):
    ids: list[list[int]]
    skip_special_tokens: bool = True


# ── 응답 모델 ──


class SparseValue(BaseModel):
    """Sparse embedding의 (vocab index, weight) 한 쌍."""

    index: int
    value: float


class Prediction(BaseModel):
    label: str
    score: float


class Rank(BaseModel):
    """Rerank 결과 한 건. text는 서버가 아니라 클라이언트가 채운다."""

    index: int
    score: float
    text: str | None = None


class SimpleToken(BaseModel):
    id: int
    text: str
    special: bool
    start: int | None = None  # 문자 offset, special token은 null일 수 있음
    stop: int | None = None


class InfoResponse(BaseModel):
    """서버 메타데이터 (/info)."""

    model_config = {"protected_namespaces": ()}

    model_id: str
    model_sha: str | None = None
    model_dtype: str
    max_concurrent_requests: int
    max_input_length: int
    max_batch_tokens: int
    max_batch_requests: int | None = None
    max_client_batch_size: int
    tokenization_workers: int
    version: str
    sha: str | None = None
    docker_label: str | None = None


class ErrorPayload(BaseModel):
    """200이 아닌 응답의 본문. error_type은 미지의 태그도 받도록 str로 둔다."""

    error: str
    error_type: str


EmbedResponse = list[list[float]]
EmbedAllResponse = list[list[list[float]]]
EmbedSparseResponse = list[list[SparseValue]]

# ── 응답 디코더 ──

EMBED_ADAPTER = TypeAdapter(EmbedResponse)
EMBED_ALL_ADAPTER = TypeAdapter(EmbedAllResponse)
EMBED_SPARSE_ADAPTER = TypeAdapter(EmbedSparseResponse)
PREDICT_ADAPTER = TypeAdapter(list[Prediction])
RERANK_ADAPTER = TypeAdapter(list[Rank])
TOKENIZE_ADAPTER = TypeAdapter(list[list[SimpleToken]])
DECODE_ADAPTER = TypeAdapter(list[str])
INFO_ADAPTER = TypeAdapter(InfoResponse)
ERROR_ADAPTER = TypeAdapter(ErrorPayload)
