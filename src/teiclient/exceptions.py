"""tei-client 예외 계층.

계층 구조:
    TEIClientError
    ├── EmptyInputError         (로컬 검증: 빈 입력)
    ├── TransportError          (DNS, 연결 거부, 타임아웃 등 전송 실패)
    ├── ResponseDecodeError     (응답 본문 파싱 실패)
    └── ServerError             (서버가 보고한 에러)
        ├── ValidationError     (error_type="validation")
        ├── TokenizerError      (error_type="tokenizer")
        ├── BackendError        (error_type="backend")
        ├── OverloadedError     (error_type="overloaded")
        └── UnknownServerError  (그 외 error_type)
"""


class TEIClientError(Exception):
    """tei-client의 모든 예외의 기반 클래스."""


class EmptyInputError(TEIClientError):
    """입력이 비어 있어 요청을 보내지 않았다."""

    def __init__(self, message: str = "inputs cannot be empty"):
        super().__init__(message)


class TransportError(TEIClientError):
    """HTTP 요청 자체가 실패. 원인 예외를 cause에 보존한다."""

    def __init__(self, message: str, cause: Exception):
        self.cause = cause
        super().__init__(f"{message}: {cause}")


class ResponseDecodeError(TEIClientError):
    """응답 본문이 기대한 JSON 형태가 아니다."""


class ServerError(TEIClientError):
    """서버가 200이 아닌 상태 코드와 에러 payload를 반환."""

    error_type: str = ""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ValidationError(ServerError):
    error_type = "validation"

    def __str__(self) -> str:
        return f"validation error: {self.message}"


class TokenizerError(ServerError):
    error_type = "tokenizer"

    def __str__(self) -> str:
        return f"tokenizer error: {self.message}"


class BackendError(ServerError):
    error_type = "backend"

    def __str__(self) -> str:
        return f"backend error: {self.message}"


class OverloadedError(ServerError):
    """서버 과부하. 서버 메시지는 버리고 고정 메시지를 쓴다."""

    error_type = "overloaded"

    def __init__(self, status_code: int | None = None):
        super().__init__("server overloaded", status_code=status_code)


class UnknownServerError(ServerError):
    """인식하지 못한 error_type. 원래 태그를 error_type에 보존한다."""

    def __init__(self, error_type: str, message: str, status_code: int | None = None):
        super().__init__(message, status_code=status_code)
        self.error_type = error_type

    def __str__(self) -> str:
        return f"unhandled error type {self.error_type!r}: {self.message}"
