from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, List

import structlog
from fastapi import FastAPI

from universe.errors import install_error_handlers
from universe.logger import setup_logger
from universe.registry import load_modules

logger = structlog.get_logger(__name__)


def import_attr(path: str) -> Any:
    if ":" not in path:
        raise ValueError(f"Invalid entrypoint '{path}'. Expected module:attr.")
    module_path, attr = path.split(":", 1)
    module = import_module(module_path)
    return getattr(module, attr)


def module_index(modules: Dict[str, Dict[str, Any]]) -> List[Dict[str, Any]]:
    items = [
        {
            "name": meta["name"],
            "title": meta.get("title") or meta["name"],
            "description": meta.get("description") or "",
            "category": meta.get("category") or "Other",
            "mount": meta["mount"],
        }
        for meta in modules.values()
        if meta.get("public", True)
    ]
    items.sort(key=lambda item: item["title"])
    return items


def build_app() -> FastAPI:
    setup_logger()
    app = FastAPI(title="Sparky Universe")
    install_error_handlers(app)

    modules = load_modules()

    @app.get("/")
    def universe_index():
        return {"modules": module_index(modules)}

    for meta in modules.values():
        entrypoints = meta.get("entrypoints") or {}
        api_entry = entrypoints.get("api")
        if not api_entry:
            continue

        subapp = import_attr(api_entry)
        app.mount(meta["mount"], subapp)
        logger.info("universe.mounted", module=meta["name"], mount=meta["mount"])

    return app
