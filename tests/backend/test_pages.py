import re

import pytest

NONCE_RE = re.compile(r"'nonce-([^']+)'")

PAGE_PATHS = [
    "/",
    "/pricing",
    "/support",
    "/about",
    "/contact",
    "/locations",
    "/status",
    "/terms",
    "/privacy",
    "/refunds",
    "/aup",
    "/tools",
    "/dev-tools",
    "/ai-support",
    "/mop",
]


@pytest.mark.parametrize("path", PAGE_PATHS)
def test_page_renders_with_headers(client, path):
    response = client.get(path)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert response.headers["X-Frame-Options"] == "SAMEORIGIN"
    assert response.headers["Strict-Transport-Security"] == "max-age=31536000; includeSubDomains; preload"


def test_inline_scripts_carry_response_nonce(client):
    response = client.get("/")

    nonce = NONCE_RE.search(response.headers["Content-Security-Policy"]).group(1)
    assert f'nonce="{nonce}"' in response.text


def test_each_page_view_gets_new_nonce(client):
    first = NONCE_RE.search(client.get("/").headers["Content-Security-Policy"]).group(1)
    second = NONCE_RE.search(client.get("/").headers["Content-Security-Policy"]).group(1)

    assert first != second


def test_canonical_url_uses_base_url(client):
    response = client.get("/status")

    assert '<link rel="canonical" href="https://rivix.test/status">' in response.text


def test_pricing_defaults_to_java(client):
    response = client.get("/pricing")

    assert "<title>Minecraft Java Server Pricing - Rivix Servers</title>" in response.text
    assert "Netherite Block" in response.text


def test_pricing_bedrock(client):
    response = client.get("/pricing", params={"type": "bedrock"})

    assert "<title>Minecraft Bedrock Server Pricing - Rivix Servers</title>" in response.text
    assert "minecraft-bedrock-hosting/bedrock-16gb" in response.text
    assert "Netherite Block" not in response.text


def test_pricing_unknown_type_falls_back_to_java(client):
    response = client.get("/pricing", params={"type": "pocket"})

    assert "Minecraft Java Server Pricing" in response.text


def test_status_page_lists_incidents(client):
    response = client.get("/status")

    assert "DDoS Mitigation" in response.text
    assert "US West (Los Angeles)" in response.text


def test_company_details_rendered(client):
    response = client.get("/contact")

    assert "support@rivixservers.com" in response.text
