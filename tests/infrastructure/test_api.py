"""API tests for the FastAPI app built by create_app()."""

import pytest
from fastapi.testclient import TestClient

from marketlens.domain.entities.analysis import (
    KD,
    AnalysisResult,
    CrossSignal,
    IndicatorSnapshot,
    Narrative,
    Strategy,
)
from marketlens.domain.entities.market_data import AssetClass, Quote
from marketlens.domain.errors import (
    DataProviderUnavailableError,
    InsufficientHistoryError,
    NotFoundError,
)
from marketlens.infrastructure.entrypoints.api import create_app

RESULT = AnalysisResult(
    symbol="BTC",
    name="BTC/USDT",
    asset_class=AssetClass.CRYPTO,
    quote=Quote(price=65000.0, change=650.0, change_percent=1.01, volume=1234.5),
    indicators=IndicatorSnapshot(rsi=55.0, kd=KD(k=60.0, d=58.0), cross_signal=CrossSignal.GOLDEN),
    score=70,
    strategy=Strategy(buy=63050.0, sell=69875.0, stop=57375.5),
    history_prices=(64350.0, 65000.0),
    history_dates=("2024-05-01", "2024-05-02"),
    news=(),
    narrative=Narrative.neutral_fallback(),
)


class StubUseCase:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def execute(self, asset_class, query):
        self.calls.append((asset_class, query))
        if self.error:
            raise self.error
        return self.result


def client_for(use_case):
    return TestClient(create_app(use_case))


class TestAnalysisEndpoint:
    def test_returns_serialized_result(self):
        use_case = StubUseCase(RESULT)
        response = client_for(use_case).get("/analysis/crypto", params={"q": "btc"})

        assert response.status_code == 200
        data = response.json()
        assert data["symbol"] == "BTC"
        assert data["asset_class"] == "crypto"
        assert data["indicators"]["cross_signal"] == "golden"
        assert data["indicators"]["kd"] == {"k": 60.0, "d": 58.0}
        assert data["strategy"]["buy"] == 63050.0
        assert data["narrative"]["sentiment"] == "Neutral"
        assert data["history_dates"] == ["2024-05-01", "2024-05-02"]
        assert use_case.calls == [(AssetClass.CRYPTO, "btc")]

    @pytest.mark.parametrize(
        "error,status",
        [
            (NotFoundError("Crypto 'NOPE' not found."), 404),
            (InsufficientHistoryError(12, 30), 422),
            (DataProviderUnavailableError("all routes failed"), 502),
            (ValueError("query must be a non-empty string"), 400),
        ],
    )
    def test_error_mapping(self, error, status):
        response = client_for(StubUseCase(error=error)).get("/analysis/equity", params={"q": "x"})
        assert response.status_code == status
        assert response.json()["detail"] == str(error)

    def test_unknown_asset_class_is_rejected(self):
        response = client_for(StubUseCase(RESULT)).get("/analysis/bonds", params={"q": "x"})
        assert response.status_code == 422

    def test_missing_query_is_rejected(self):
        response = client_for(StubUseCase(RESULT)).get("/analysis/metal")
        assert response.status_code == 422


def test_health():
    response = client_for(StubUseCase()).get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
