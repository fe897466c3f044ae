"""
FastAPI application factory.

Maps domain errors to HTTP status codes; the analysis result is returned as
the plain dataclass tree (enums serialize to their values).
"""

import dataclasses

from fastapi import FastAPI, HTTPException, Query

from marketlens.application.use_cases.analyze_market import AnalyzeMarketUseCase
from marketlens.domain.entities.market_data import AssetClass
from marketlens.domain.errors import (
    DataProviderUnavailableError,
    InsufficientHistoryError,
    NotFoundError,
)


def create_app(use_case: AnalyzeMarketUseCase, lifespan=None) -> FastAPI:
    app = FastAPI(title="MarketLens Analysis API", lifespan=lifespan)

    @app.get("/analysis/{asset_class}")
    def analyze(asset_class: AssetClass, q: str = Query(..., min_length=1)):
        """Run the technical analysis pipeline for query *q*."""
        try:
            result = use_case.execute(asset_class, q)
        except NotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except InsufficientHistoryError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except DataProviderUnavailableError as exc:
            raise HTTPException(status_code=502, detail=str(exc)) from exc
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return dataclasses.asdict(result)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app
