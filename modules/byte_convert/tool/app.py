from __future__ import annotations

from pathlib import Path
from typing import List

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, Field, field_validator

from modules.byte_convert.core.convert import convert, convert_value
from modules.byte_convert.core.errors import ConversionError
from modules.byte_convert.core.formats import Format, parse_format
from modules.byte_convert.core.random_bytes import MAX_RANDOM_BYTES, generate_random_bytes
from universe.errors import install_error_handlers
from universe.registry import load_manifest
from universe.settings import configure_templates, get_settings, shared_templates_dir

BASE_DIR = Path(__file__).parent
MODULE_DIR = BASE_DIR.parent
ROOT_DIR = BASE_DIR.parents[2]
SHARED_TEMPLATES = shared_templates_dir(ROOT_DIR)
MANIFEST = load_manifest(MODULE_DIR) or {}

app = FastAPI(title=MANIFEST.get("title", "Byte Converter"))
install_error_handlers(app, ConversionError)

templates = Jinja2Templates(
    directory=[str(BASE_DIR / "templates"), str(SHARED_TEMPLATES)]
)
configure_templates(templates)


class ConvertRequest(BaseModel):
    tokens: List[str] = Field(min_length=1)
    source: Format = Format.DEC
    target: Format = Format.DEC
    upper: bool = False

    @field_validator("source", "target", mode="before")
    @classmethod
    def _resolve_alias(cls, value):
        return parse_format(value)


@app.get("/", response_class=HTMLResponse)
def index(request: Request):
    base_path = request.url.path.rstrip("/")
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "manifest": MANIFEST,
            "formats": [item.value for item in Format],
            "max_random_bytes": MAX_RANDOM_BYTES,
            "base_path": base_path,
        },
    )


@app.post("/convert")
def convert_form(
    value: str | None = Form(None),
    base_from: str | None = Form(None),
    base_to: str | None = Form(None),
    upper: bool = Form(False),
):
    result, error = convert_value(
        value,
        base_from,
        base_to,
        upper=upper,
        max_length=get_settings().byte_convert_max_input,
    )
    if error:
        return JSONResponse({"error": error}, status_code=400)
    return result


@app.post("/api/convert")
def convert_tokens(payload: ConvertRequest):
    output = convert(
        payload.tokens, payload.source, payload.target, upper=payload.upper
    )
    return {
        "from": payload.source.value,
        "to": payload.target.value,
        "output": output,
    }


@app.post("/random")
def random_bytes(
    count: str | None = Form(None),
    fmt: str | None = Form(None, alias="format"),
    upper: bool = Form(False),
):
    result, error = generate_random_bytes(count, fmt, upper=upper)
    if error:
        return JSONResponse({"error": error}, status_code=400)
    return result
