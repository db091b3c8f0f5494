"""FastAPI entrypoint and HTTP routes."""

from __future__ import annotations

from typing import Any, AsyncIterator

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from wardrobe.config.settings import get_settings
from wardrobe.monitoring.logging import configure_logging
from wardrobe.vision import AnalysisInput, ClothingAnalyzer, ImageInputError, build_analyzer
from wardrobe.vision.views import AnalysisView, render


class VisionAnalyzeRequest(BaseModel):
    """Body of an analysis request; exactly one image reference is expected."""

    model_config = ConfigDict(populate_by_name=True)

    image: str | None = None
    http_url: str | None = Field(default=None, alias="httpUrl")
    gcs_uri: str | None = Field(default=None, alias="gcsUri")
    analysis_type: str | None = Field(default=None, alias="analysisType")


async def get_analyzer() -> AsyncIterator[ClothingAnalyzer]:
    """Provide an analyzer for the current request and release it afterwards."""

    analyzer = build_analyzer(get_settings())
    try:
        yield analyzer
    finally:
        await analyzer.close()


def create_app() -> FastAPI:
    """Initialise the FastAPI application."""

    configure_logging()
    settings = get_settings()
    app = FastAPI(
        title="Wardrobe Vision API",
        version="0.1.0",
        docs_url="/docs" if settings.environment != "prod" else None,
        redoc_url="/redoc" if settings.environment != "prod" else None,
    )

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Simple health endpoint used for readiness probes."""

        return {"status": "ok"}

    @app.post("/vision/analyze", tags=["vision"], response_model=None)
    async def vision_analyze(
        payload: VisionAnalyzeRequest,
        analyzer: ClothingAnalyzer = Depends(get_analyzer),
    ) -> dict[str, Any] | JSONResponse:
        """Analyse one clothing photo and return the requested view."""

        if not (payload.image or payload.http_url or payload.gcs_uri):
            return JSONResponse(status_code=400, content={"error": "Image data is required"})

        image = AnalysisInput(
            base64=payload.image,
            http_url=payload.http_url,
            gcs_uri=payload.gcs_uri,
        )
        try:
            analysis = await analyzer.analyze(image)
        except ImageInputError as exc:
            return JSONResponse(status_code=400, content={"error": str(exc)})
        return render(analysis, AnalysisView.parse(payload.analysis_type))

    return app


app = create_app()
