"""HTTP front end for the random number generator.

This module exposes a FastAPI app that holds one generator engine, accepts
typed generation parameters, and translates engine errors into messages
for the user. Filenames are resolved inside a configurable data directory.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from generator_config import Mode, universe_size
from generator_engine import GeneratorEngine
from generator_errors import (
    DataFormatError,
    EmptyList,
    GeneratorError,
    InvalidBounds,
    InvalidInputFormat,
    IoError,
    TooManyNumbers,
)
from generator_stats import GeneratorStats
from seeded_random import RandomSource

GUI_VERSION = "v1.1"
LICENSE = "MPL-2.0"
DEFAULT_FILENAME = "numbers.txt"

logger = logging.getLogger(__name__)

app = FastAPI(title="Random Generator API", version=GUI_VERSION)


def _env_seed() -> Optional[int]:
    raw = os.getenv("RANDOM_TOOL_SEED")
    return int(raw) if raw else None


@dataclass
class AppSettings:
    data_dir: str = field(default_factory=lambda: os.getenv("RANDOM_TOOL_DATA_DIR", "."))
    seed: Optional[int] = field(default_factory=_env_seed)

    def engine(self) -> GeneratorEngine:
        return GeneratorEngine(rng=RandomSource(self.seed))


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return AppSettings()


@lru_cache(maxsize=1)
def get_engine() -> GeneratorEngine:
    return get_settings().engine()


# -------------------------
# Models
# -------------------------
class ConfigUpdate(BaseModel):
    lower_bound: Optional[int] = None
    upper_bound: Optional[int] = None
    num_to_generate: Optional[int] = Field(default=None, ge=0)
    allow_duplicates: Optional[bool] = None
    mode: Optional[Mode] = None
    custom_list_input: Optional[str] = Field(
        default=None,
        description="Candidates separated by commas, semicolons or whitespace",
    )


class ConfigResponse(BaseModel):
    lower_bound: int
    upper_bound: int
    num_to_generate: int
    allow_duplicates: bool
    mode: Mode
    custom_list: List[int]
    custom_list_input: str
    universe_size: int


class NumbersResponse(BaseModel):
    numbers: List[int]
    total: int


class FileRequest(BaseModel):
    filename: str = Field(default=DEFAULT_FILENAME, min_length=1)


class FileResult(BaseModel):
    filename: str
    count: int
    message: str


class AboutResponse(BaseModel):
    gui_version: str
    core_version: str
    license: str


# -------------------------
# Error translation
# -------------------------
def describe_error(exc: GeneratorError) -> str:
    if isinstance(exc, InvalidBounds):
        if exc.lower > exc.upper:
            return "Lower bound > upper bound"
        return "Bounds must fit in a 64-bit signed integer"
    if isinstance(exc, TooManyNumbers):
        return "Not enough unique numbers"
    if isinstance(exc, EmptyList):
        return "Custom list is empty"
    if isinstance(exc, InvalidInputFormat):
        return f"Invalid number in list: {exc.token}"
    if isinstance(exc, DataFormatError):
        return f"Invalid numbers file: {exc}"
    if isinstance(exc, IoError):
        return f"File error: {exc}"
    return str(exc)


@app.exception_handler(GeneratorError)
async def handle_generator_error(request: Request, exc: GeneratorError) -> JSONResponse:
    status_code = 500 if isinstance(exc, IoError) else 422
    if status_code == 500:
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status_code,
        content={"detail": describe_error(exc), "error": exc.kind},
    )


def _config_response(engine: GeneratorEngine) -> ConfigResponse:
    config = engine.config
    return ConfigResponse(
        lower_bound=config.lower_bound,
        upper_bound=config.upper_bound,
        num_to_generate=config.num_to_generate,
        allow_duplicates=config.allow_duplicates,
        mode=config.mode,
        custom_list=list(config.custom_list),
        custom_list_input=config.custom_list_input,
        universe_size=universe_size(config),
    )


def _numbers_response(engine: GeneratorEngine) -> NumbersResponse:
    numbers = engine.get_numbers()
    return NumbersResponse(numbers=list(numbers), total=len(numbers))


def _resolve_path(filename: str, settings: AppSettings) -> Path:
    base = Path(settings.data_dir).resolve()
    path = (base / filename).resolve()
    if path == base or not path.is_relative_to(base):
        raise HTTPException(status_code=400, detail="Filename must stay inside the data directory")
    return path


# -------------------------
# Routes
# -------------------------
@app.get("/config", response_model=ConfigResponse)
def read_config(engine: GeneratorEngine = Depends(get_engine)):
    return _config_response(engine)


@app.put("/config", response_model=ConfigResponse)
def update_config(update: ConfigUpdate, engine: GeneratorEngine = Depends(get_engine)):
    engine.configure(**update.model_dump(exclude_none=True))
    return _config_response(engine)


@app.post("/generate", response_model=NumbersResponse)
def generate(engine: GeneratorEngine = Depends(get_engine)):
    engine.generate()
    return _numbers_response(engine)


@app.post("/clear", response_model=NumbersResponse)
def clear(engine: GeneratorEngine = Depends(get_engine)):
    engine.clear()
    return _numbers_response(engine)


@app.get("/numbers", response_model=NumbersResponse)
def read_numbers(engine: GeneratorEngine = Depends(get_engine)):
    return _numbers_response(engine)


@app.get("/stats", response_model=GeneratorStats)
def read_stats(engine: GeneratorEngine = Depends(get_engine)):
    return engine.get_stats()


@app.post("/save", response_model=FileResult)
def save(
    request: FileRequest,
    engine: GeneratorEngine = Depends(get_engine),
    settings: AppSettings = Depends(get_settings),
):
    numbers = engine.get_numbers()
    if not numbers:
        raise HTTPException(status_code=409, detail="No numbers to save")
    engine.save(_resolve_path(request.filename, settings))
    return FileResult(
        filename=request.filename,
        count=len(numbers),
        message=f"Saved to {request.filename}",
    )


@app.post("/load", response_model=FileResult)
def load(
    request: FileRequest,
    engine: GeneratorEngine = Depends(get_engine),
    settings: AppSettings = Depends(get_settings),
):
    numbers = engine.load(_resolve_path(request.filename, settings))
    return FileResult(
        filename=request.filename,
        count=len(numbers),
        message=f"Loaded from {request.filename}",
    )


@app.get("/about", response_model=AboutResponse)
def about(engine: GeneratorEngine = Depends(get_engine)):
    return AboutResponse(gui_version=GUI_VERSION, core_version=engine.get_core_version(), license=LICENSE)


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
