"""FastAPI application for the AiSG audit engine: evaluation endpoint."""

from __future__ import annotations

import logging
from datetime import date
from functools import lru_cache
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from aisg.config.settings import Settings
from aisg.engine.calculator import AuditEngine
from aisg.errors import ConfigurationError, ValidationError
from aisg.hooks.audit_hooks import log_evaluation
from aisg.methodology.loader import load_methodology
from aisg.models.submission import (
    AuditSubmission,
    PersonalMetrics,
    PillarSelfAnswer,
    TeamMetrics,
    TeamStructure,
)
from aisg.serialization import result_to_payload

settings = Settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="AiSG Audit API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class PillarAnswerIn(BaseModel):
    pillarId: int = Field(ge=1, le=18)
    selfScore: int = Field(ge=1, le=5)


class EvaluateAuditRequest(BaseModel):
    """Intake payload, one flat camelCase object per audit."""

    nama: str = Field(min_length=1)
    jabatan: str = Field(min_length=1)
    cabang: str
    tanggalLahir: str = Field(pattern=r"^\d{2}-\d{2}-\d{4}$")

    marginTimQ1: int = Field(ge=0)
    marginTimQ2: int = Field(ge=0)
    marginTimQ3: int = Field(ge=0)
    marginTimQ4: int = Field(ge=0)

    naTimQ1: int = Field(ge=0)
    naTimQ2: int = Field(ge=0)
    naTimQ3: int = Field(ge=0)
    naTimQ4: int = Field(ge=0)

    # Personal figures may be negative (client withdrawals)
    marginPribadiQ1: int
    marginPribadiQ2: int
    marginPribadiQ3: int
    marginPribadiQ4: int

    nasabahPribadiQ1: int
    nasabahPribadiQ2: int
    nasabahPribadiQ3: int
    nasabahPribadiQ4: int

    jumlahBC: int = Field(default=0, ge=0)
    jumlahSBC: int = Field(default=0, ge=0)
    jumlahBsM: int = Field(default=0, ge=0)
    jumlahSBM: int = Field(default=0, ge=0)
    jumlahEM: int = Field(default=0, ge=0)
    jumlahSEM: int = Field(default=0, ge=0)
    jumlahVBM: int = Field(default=0, ge=0)
    jumlahBrM: int = Field(default=0, ge=0)

    pillarAnswers: list[PillarAnswerIn] = Field(min_length=18, max_length=18)

    asOf: Optional[date] = None

    def to_submission(self) -> AuditSubmission:
        return AuditSubmission(
            nama=self.nama,
            jabatan=self.jabatan,
            cabang=self.cabang,
            tanggal_lahir=self.tanggalLahir,
            team_metrics=TeamMetrics(
                margin=(self.marginTimQ1, self.marginTimQ2, self.marginTimQ3, self.marginTimQ4),
                new_accounts=(self.naTimQ1, self.naTimQ2, self.naTimQ3, self.naTimQ4),
            ),
            personal_metrics=PersonalMetrics(
                margin=(
                    self.marginPribadiQ1,
                    self.marginPribadiQ2,
                    self.marginPribadiQ3,
                    self.marginPribadiQ4,
                ),
                new_clients=(
                    self.nasabahPribadiQ1,
                    self.nasabahPribadiQ2,
                    self.nasabahPribadiQ3,
                    self.nasabahPribadiQ4,
                ),
            ),
            team_structure=TeamStructure(
                bc=self.jumlahBC,
                sbc=self.jumlahSBC,
                bsm=self.jumlahBsM,
                sbm=self.jumlahSBM,
                em=self.jumlahEM,
                sem=self.jumlahSEM,
                vbm=self.jumlahVBM,
                brm=self.jumlahBrM,
            ),
            pillar_answers=tuple(
                PillarSelfAnswer(pillar_id=a.pillarId, self_score=a.selfScore)
                for a in self.pillarAnswers
            ),
        )


@lru_cache(maxsize=1)
def get_engine() -> AuditEngine:
    """Engine bound to the configured methodology (bundled V1 by default)."""
    if settings.methodology_path:
        return AuditEngine(load_methodology(Path(settings.methodology_path)))
    return AuditEngine()


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid audit submission", "field": exc.field, "details": exc.message},
    )


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    logger.error("Methodology configuration error: %s", exc)
    return JSONResponse(status_code=500, content={"error": "Methodology configuration error"})


@app.post("/api/audit/evaluate")
async def evaluate_audit(body: EvaluateAuditRequest):
    """Run the 18 Pilar engine and return the camelCase result payload."""
    submission = body.to_submission()
    result = get_engine().evaluate(submission, as_of=body.asOf)
    log_evaluation(submission, result)
    return result_to_payload(result)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("aisg.main:app", host="0.0.0.0", port=8000)
