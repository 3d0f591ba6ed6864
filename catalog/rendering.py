"""Jinja2 template rendering."""

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from catalog.models import BookInstanceStatus
from catalog.settings import app_settings

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals["app_title"] = app_settings.APP_TITLE
templates.env.globals["instance_statuses"] = [
    status.value for status in BookInstanceStatus
]


def render(
    request: Request,
    name: str,
    context: dict[str, Any] | None = None,
    status_code: int = 200,
) -> HTMLResponse:
    """
    Render template ``name`` with ``context``.

    Values stored in the catalog are escaped when they are submitted, so
    templates output them with ``|safe``.
    """
    return templates.TemplateResponse(
        request, name, context or {}, status_code=status_code
    )
