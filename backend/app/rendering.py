"""
Template rendering helpers.

Every page render merges the shared site data with page-specific data and
the request's CSP nonce, so inline scripts in the templates are allowed by
that response's Content-Security-Policy and no other.
"""

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def get_nonce(request: Request) -> str:
    return getattr(request.state, "csp_nonce", "")


def render_page(
    request: Request,
    template: str,
    status_code: int = 200,
    **page_data: Any,
):
    """
    Render ``template`` with the site-wide context.

    Args:
        request: Current request (provides app state, path and nonce).
        template: Template file name under ``templates/``.
        status_code: HTTP status for the response.
        **page_data: Page-specific values; may override site data, and may
            pass ``canonical_url`` explicitly.
    """
    settings = request.app.state.settings
    context = dict(request.app.state.site_data)
    context.update(page_data)
    context.setdefault("canonical_url", settings.base_url + request.url.path)
    context.setdefault("nonce", get_nonce(request))

    return templates.TemplateResponse(request, template, context, status_code=status_code)
