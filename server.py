# server.py
# FastAPI entrypoint: accepts HTML (JSON body or file upload) plus a root
# selector and returns the skeleton CSS rule blocks.

from __future__ import annotations

import logging
import os

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware

from css_skeleton.errors import EmptySelectorError, ExtractionError, RootNotFoundError
from css_skeleton.flatten import render_css
from service.pipeline import extract_lines
from service.schemas import ErrorResponse, ExtractRequest, ExtractResponse, HealthResponse
from service.settings import get_settings

log = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# App setup
# -----------------------------------------------------------------------------
app = FastAPI(title="HTML to CSS skeleton")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
}


def _run_extract(html: str, root_selector: str, emit_intermediate: bool) -> ExtractResponse:
    try:
        lines = extract_lines(html, root_selector, emit_intermediate=emit_intermediate)
    except EmptySelectorError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except RootNotFoundError as e:
        log.warning("%s", e)
        raise HTTPException(status_code=404, detail=str(e))
    except ExtractionError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ExtractResponse(root_selector=root_selector.strip(), lines=lines, css=render_css(lines))


# -----------------------------------------------------------------------------
# Routes
# -----------------------------------------------------------------------------
@app.get("/api/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok", ignore_class_patterns=get_settings().IGNORE_CLASS_PATTERNS)


@app.post("/api/extract", response_model=ExtractResponse, responses=_ERRORS)
def extract(req: ExtractRequest):
    return _run_extract(req.html, req.root_selector, req.emit_intermediate)


@app.post("/api/extract/upload", response_model=ExtractResponse, responses=_ERRORS)
async def extract_upload(
    file: UploadFile = File(...),
    root_selector: str = Form(...),
    emit_intermediate: bool = Form(True),
):
    # reject an empty selector before reading the upload
    if not root_selector.strip():
        raise HTTPException(status_code=422, detail=str(EmptySelectorError()))

    raw = await file.read()
    try:
        html = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise HTTPException(status_code=400, detail=f"Cannot read HTML file: {e}")

    return _run_extract(html, root_selector, emit_intermediate)


@app.get("/")
def root():
    return {"message": "HTML to CSS skeleton is running. POST /api/extract with html + root_selector"}


# -----------------------------------------------------------------------------
# Local dev
# -----------------------------------------------------------------------------
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("server:app", host="0.0.0.0", port=int(os.getenv("PORT", "8000")), reload=False)
