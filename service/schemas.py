# service/schemas.py
# Pydantic models for the extract API.

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = Field(..., examples=["ok"])
    ignore_class_patterns: List[str]


class ExtractRequest(BaseModel):
    html: str = Field(..., description="HTML document or fragment to read.")
    root_selector: str = Field(..., examples=[".sec01 .card"], description="CSS selector of the root element.")
    emit_intermediate: bool = Field(True, description="Also emit blocks for elements that have children.")


class ExtractResponse(BaseModel):
    root_selector: str
    lines: List[str] = Field(..., description="One 'selector {}' block per entry, in document order.")
    css: str = Field(..., description="The lines joined with newlines.")


class ErrorResponse(BaseModel):
    detail: str
