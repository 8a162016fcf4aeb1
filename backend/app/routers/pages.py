"""
HTML page routes.

Content pages are plain title + template pairs; the home, pricing, locations
and status pages add their own data on top of the shared site context.
"""

from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse

from ..content import BEDROCK_PLANS, JAVA_PLANS, LOCATION, PRICING, pricing_title
from ..rendering import render_page

router = APIRouter(tags=["pages"], default_response_class=HTMLResponse)

# path -> (page name, title)
CONTENT_PAGES = {
    "/support": ("support", "Support Center & Knowledge Base - Rivix Servers"),
    "/about": ("about", "About Us - Rivix Servers"),
    "/contact": ("contact", "Contact Us - Rivix Servers"),
    "/terms": ("terms", "Terms of Service - Rivix Servers"),
    "/privacy": ("privacy", "Privacy Policy - Rivix Servers"),
    "/refunds": ("refunds", "Refund Policy - Rivix Servers"),
    "/aup": ("aup", "Acceptable Use Policy - Rivix Servers"),
    "/tools": ("dev_tools", "Integrated Administrator Tools - Rivix Servers"),
    "/dev-tools": ("dev_tools", "Integrated Administrator Tools - Rivix Servers"),
    "/ai-support": ("ai_support", "AI Support Assistant - RyzenBot | Rivix Servers"),
    "/mop": ("launch_mop", "Launch MOP - Rivix Servers"),
}


@router.get("/")
def index(request: Request):
    return render_page(
        request,
        "page.html",
        page="index",
        title="Premium Minecraft Server Hosting - Rivix Servers",
        java_plans=JAVA_PLANS,
        bedrock_plans=BEDROCK_PLANS,
    )


@router.get("/pricing")
def pricing(request: Request, server_type: str | None = Query(default=None, alias="type")):
    """Pricing table; ``?type=bedrock`` selects Bedrock, anything else Java."""
    server_type = "bedrock" if server_type == "bedrock" else "java"
    return render_page(
        request,
        "pricing.html",
        page="pricing",
        title=pricing_title(server_type),
        server_type=server_type,
        plan_category="minecraft",
        plans=PRICING[server_type],
        features=PRICING["standard_features"][server_type],
    )


@router.get("/locations")
def locations(request: Request):
    return render_page(
        request,
        "page.html",
        page="locations",
        title="Server Locations - Rivix Servers",
        location=LOCATION,
    )


@router.get("/status")
def status_page(request: Request):
    return render_page(request, "status.html", page="status", title="System Status - Rivix Servers")


def _content_page(page: str, title: str):
    def endpoint(request: Request):
        return render_page(request, "page.html", page=page, title=title)

    endpoint.__name__ = f"{page}_page"
    return endpoint


for _path, (_page, _title) in CONTENT_PAGES.items():
    router.add_api_route(_path, _content_page(_page, _title), methods=["GET"], name=_path.strip("/"))

# Paths listed in the startup log
PAGE_PATHS = ["/", "/pricing", "/locations", "/status", *CONTENT_PAGES]
