"""
Static site data rendered into the page templates.

Everything here is in-memory and read-only; company details come from
settings so each deployment can brand its own pages.
"""

from __future__ import annotations

from typing import Any

from rivix_core.config import Settings

from .schemas import FaqEntry, Incident, Location, PricingPlan, StatusNode

BILLING_PRODUCTS = "https://billing.rivixservers.com/products"

TRUST_METRICS = {
    "uptime": "99.9%",  # SLA commitment, not historical data
    "servers": "Growing",
    "latency": "<20ms",
    "support": "24/7",
    "rating": None,
    "customers": "Growing",
}

IMAGES = {
    "logo": "/images/rivix-logo.png",
    "logo_alt": "/images/rivix-logo-2.png",
    "hero": "/images/hero-custom.jpg",
}

STATUS_NODES = [
    StatusNode(id="us-east-1", name="US East (Vint Hill)", location="Ashburn, VA", load="22%"),
    StatusNode(id="us-east-2", name="US East (New York)", location="New York, NY", load="18%"),
    StatusNode(id="us-west-1", name="US West (Los Angeles)", location="Los Angeles, CA", load="31%"),
]

INCIDENTS = [
    Incident(
        id=1,
        title="Minor Network Degradation",
        date="2025-11-15",
        status="resolved",
        description="Brief latency spike in US West region. Resolved within 15 minutes.",
    ),
    Incident(
        id=2,
        title="Scheduled Maintenance",
        date="2025-10-28",
        status="resolved",
        description="Routine hardware upgrade completed successfully.",
    ),
    Incident(
        id=3,
        title="DDoS Mitigation",
        date="2025-09-12",
        status="resolved",
        description="Automated DDoS protection successfully mitigated attack with zero downtime.",
    ),
]

STATUS_DATA = {
    "overall_status": "operational",
    "uptime": "99.9%",
    "cpu_usage": "25%",
    "ram_utilization": "68%",
    "network_latency": "45ms",
    "nodes": STATUS_NODES,
    "incidents": INCIDENTS,
}


def _plan(
    edition: str,
    slug: str,
    name: str,
    memory: str,
    monthly: float,
    yearly: float,
    best_for: str,
    product_id: str,
    plan: int,
    popular: bool = False,
) -> PricingPlan:
    return PricingPlan(
        name=name,
        memory=memory,
        price_monthly=monthly,
        price_yearly=yearly,
        popular=popular,
        best_for=best_for,
        product_id=product_id,
        product_url=f"{BILLING_PRODUCTS}/minecraft-{edition}-hosting/{slug}/checkout?plan={plan}",
    )


JAVA_PLANS = [
    _plan("java", "dirt-block-2gb", "Dirt Block", "2GB", 6.99, 69.99, "Small servers up to 15 players", "1", 1),
    _plan("java", "grass-block-4gb", "Grass Block", "4GB", 9.99, 99.99, "Small to medium servers up to 25 players", "2", 5),
    _plan("java", "stone-block-6gb", "Stone Block", "6GB", 12.99, 129.99, "Medium servers up to 35 players", "3", 7),
    _plan("java", "cobblestone-8gb", "Cobblestone", "8GB", 15.99, 159.99, "Medium to large servers up to 50 players", "4", 10),
    _plan("java", "iron-block-12gb", "Iron Block", "12GB", 22.99, 229.99, "Large servers up to 75 players", "5", 12),
    _plan("java", "gold-block-16gb", "Gold Block", "16GB", 29.99, 299.99, "Large servers up to 100 players", "6", 14, popular=True),
    _plan("java", "diamond-block-24gb", "Diamond Block", "24GB", 44.99, 449.99, "Enterprise servers up to 150 players", "7", 16),
    _plan("java", "netherite-block-32gb", "Netherite Block", "32GB", 64.99, 649.99, "Enterprise servers up to 200+ players", "8", 18),
]

BEDROCK_PLANS = [
    _plan("bedrock", "bedrock-2gb", "Bedrock", "2GB", 3.99, 39.99, "Small servers up to 15 players", "10", 20),
    _plan("bedrock", "bedrock-4gb", "Bedrock", "4GB", 7.99, 79.99, "Small to medium servers up to 25 players", "11", 22),
    _plan("bedrock", "bedrock-6gb", "Bedrock", "6GB", 10.99, 109.99, "Medium servers up to 35 players", "12", 24),
    _plan("bedrock", "bedrock-8gb", "Bedrock", "8GB", 13.99, 139.99, "Medium to large servers up to 50 players", "13", 26),
    _plan("bedrock", "bedrock-12gb", "Bedrock", "12GB", 19.99, 199.99, "Large servers up to 75 players", "14", 28),
    _plan("bedrock", "bedrock-16gb", "Bedrock", "16GB", 24.99, 249.99, "Large servers up to 100 players", "15", 30, popular=True),
    _plan("bedrock", "bedrock-24gb", "Bedrock", "24GB", 36.99, 369.99, "Enterprise servers up to 150 players", "16", 32),
    _plan("bedrock", "bedrock-32gb", "Bedrock", "32GB", 49.99, 499.99, "Enterprise servers up to 200+ players", "17", 34),
]

STANDARD_FEATURES = {
    "java": [
        "Dedicated Ryzen 7 CPU",
        "Unlimited SSD Storage",
        "Full FTP Access",
        "One-Click Modpack Installer",
        "MySQL Database Included",
        "Custom JAR Support",
        "99.9% Uptime SLA",
    ],
    "bedrock": [
        "Dedicated Ryzen 7 CPU",
        "Unlimited SSD Storage",
        "Full FTP Access",
        "Bedrock Edition Support",
        "MySQL Database Included",
        "Custom Server Software",
        "99.9% Uptime SLA",
    ],
}

PRICING = {
    "java": JAVA_PLANS,
    "bedrock": BEDROCK_PLANS,
    "standard_features": STANDARD_FEATURES,
}

PRICING_TITLES = {
    "java": "Minecraft Java Server Pricing - Rivix Servers",
    "bedrock": "Minecraft Bedrock Server Pricing - Rivix Servers",
}

LOCATION = Location(
    name="US-East (Vint Hill)",
    location="Ashburn, Virginia",
    datacenter="Vint Hill Data Center",
    latency=12,
)

FAQS = [
    FaqEntry(
        id=1,
        question="What payment methods do you accept?",
        answer="We accept all major credit cards, PayPal, and cryptocurrency.",
    ),
    FaqEntry(
        id=2,
        question="Do you offer refunds?",
        answer="Yes, we offer a 7-day money-back guarantee on all plans.",
    ),
    FaqEntry(
        id=3,
        question="Can I upgrade my plan later?",
        answer="Yes, you can upgrade or downgrade your plan at any time through your control panel.",
    ),
    FaqEntry(
        id=4,
        question="What makes Ryzen 7 CPUs better for Minecraft?",
        answer=(
            "AMD Ryzen 7 CPUs have exceptional single-core performance, which is critical for "
            "Minecraft's single-threaded nature. This ensures higher TPS and zero lag."
        ),
    ),
    FaqEntry(
        id=5,
        question="Do you oversell CPU resources?",
        answer=(
            "No. Every server gets a dedicated Ryzen 7 CPU core. We never share CPU cores between "
            "servers, ensuring consistent performance."
        ),
    ),
]


def pricing_title(server_type: str) -> str:
    return PRICING_TITLES.get(server_type, "Minecraft Server Pricing - Rivix Servers")


def build_site_data(settings: Settings) -> dict[str, Any]:
    """Template context shared by every page."""
    return {
        "env": settings.env,
        "base_url": settings.base_url,
        "trust_metrics": TRUST_METRICS,
        "company": {
            "name": settings.company_name,
            "email": settings.company_email,
            "billing_url": settings.billing_url,
            "ticket_url": settings.ticket_url,
        },
        "images": IMAGES,
        "status_data": STATUS_DATA,
    }
