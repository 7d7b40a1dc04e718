import httpx
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientConfig(BaseSettings):
    """클라이언트 설정. 생성자 인자, 환경변수(TEI_*) 또는 .env 파일에서 로드."""

    model_config = SettingsConfigDict(
        env_prefix="TEI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # 서버 연결
    base_url: str = "http://localhost:8080"

    # 모든 요청에 붙는 pass-through 인증 정보
    headers: dict[str, str] = Field(default_factory=dict)
    cookies: dict[str, str] = Field(default_factory=dict)

    # 요청 타임아웃(초). None 또는 0이면 제한 없음.
    timeout: float | None = Field(default=None, ge=0)

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slashes(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("headers", "cookies", mode="before")
    @classmethod
    def _none_as_empty(cls, v):
        return {} if v is None else v

    @classmethod
    def explicit(cls, **values) -> "ClientConfig":
        """인자만으로 설정 생성. 환경변수와 .env는 읽지 않는다.

        model_validate는 BaseSettings.__init__의 settings source를 거치지 않고
        field validator만 실행한다.
        """
        return cls.model_validate(values)

    @property
    def http_timeout(self) -> httpx.Timeout:
        return httpx.Timeout(self.timeout or None)
