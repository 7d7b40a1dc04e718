import pytest
from pydantic import ValidationError as PydanticValidationError

from teiclient.models import (
    ERROR_ADAPTER,
    INFO_ADAPTER,
    TOKENIZE_ADAPTER,
    DecodeRequest,
    EmbedRequest,
    ErrorType,
    Rank,
    TokenizeRequest,
)

INFO_JSON = {
    "model_id": "BAAI/bge-base-en-v1.5",
    "model_sha": "a5beb1e3e68b9ab74eb54cfd186867f64f240e1a",
    "model_dtype": "float16",
    "model_type": {"embedding": {"pooling": "cls"}},
    "max_concurrent_requests": 512,
    "max_input_length": 512,
    "max_batch_tokens": 16384,
    "max_batch_requests": None,
    "max_client_batch_size": 32,
    "tokenization_workers": 8,
    "version": "1.5.0",
}


class TestRequestSerialization:
    def test_embed_request_defaults(self):
        assert EmbedRequest(inputs="hi").model_dump() == {"inputs": "hi", "truncate": False}

    def test_tokenize_request_wire_names(self):
        body = TokenizeRequest(inputs=["a"], add_special_tokens=False).model_dump()
        assert body == {"inputs": ["a"], "add_special_tokens": False}

    def test_decode_request_wire_names(self):
        body = DecodeRequest(ids=[[101, 102]]).model_dump()
        assert body == {"ids": [[101, 102]], "skip_special_tokens": True}


class TestInfoResponse:
    def test_optional_fields_absent(self):
        """docker_label, sha가 없으면 None."""
        info = INFO_ADAPTER.validate_python(INFO_JSON)
        assert info.model_id == "BAAI/bge-base-en-v1.5"
        assert info.max_batch_requests is None
        assert info.docker_label is None
        assert info.sha is None

    def test_optional_fields_present(self):
        info = INFO_ADAPTER.validate_python(
            {**INFO_JSON, "max_batch_requests": 4, "sha": "abc123", "docker_label": "sha-abc123"}
        )
        assert info.max_batch_requests == 4
        assert info.sha == "abc123"
        assert info.docker_label == "sha-abc123"

    def test_missing_required_field_rejected(self):
        data = {k: v for k, v in INFO_JSON.items() if k != "model_id"}
        with pytest.raises(PydanticValidationError):
            INFO_ADAPTER.validate_python(data)


class TestResponseModels:
    def test_rank_text_defaults_to_none(self):
        assert Rank(index=0, score=0.5).text is None

    def test_special_token_offsets_may_be_null(self):
        tokens = TOKENIZE_ADAPTER.validate_python(
            [[{"id": 101, "text": "[CLS]", "special": True, "start": None, "stop": None}]]
        )
        assert tokens[0][0].start is None
        assert tokens[0][0].special is True

    def test_error_payload_accepts_unknown_tag(self):
        payload = ERROR_ADAPTER.validate_python({"error": "x", "error_type": "quota"})
        assert payload.error_type == "quota"


class TestErrorType:
    def test_tag_values(self):
        assert {t.value for t in ErrorType} == {
            "validation",
            "tokenizer",
            "backend",
            "overloaded",
            "unhealthy",
        }
