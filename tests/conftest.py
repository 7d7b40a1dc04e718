import pytest

from teiclient.config import ClientConfig

TEI_ENV_VARS = ("TEI_BASE_URL", "TEI_HEADERS", "TEI_COOKIES", "TEI_TIMEOUT")


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, request):
    """단위 테스트가 실제 TEI_* 환경변수나 .env 파일을 읽지 않도록 차단."""
    if request.node.get_closest_marker("integration"):
        return
    monkeypatch.setattr(ClientConfig, "model_config", {**ClientConfig.model_config, "env_file": None})
    for name in TEI_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
