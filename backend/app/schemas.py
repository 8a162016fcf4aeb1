"""
Pydantic schemas for site data and API payloads.
"""

from typing import Literal

from pydantic import BaseModel, Field


class PricingPlan(BaseModel):
    name: str
    memory: str
    price_monthly: float
    price_yearly: float
    popular: bool = False
    best_for: str
    product_id: str
    product_url: str


class StatusNode(BaseModel):
    id: str
    name: str
    status: Literal["operational", "degraded", "outage", "maintenance"] = "operational"
    location: str
    load: str


class Incident(BaseModel):
    id: int
    title: str
    date: str
    status: Literal["investigating", "monitoring", "resolved"]
    description: str


class Location(BaseModel):
    name: str
    location: str
    datacenter: str
    latency: int = Field(description="Typical round-trip latency in milliseconds")
    status: str = "operational"


class FaqEntry(BaseModel):
    id: int
    question: str
    answer: str


class SubscribeRequest(BaseModel):
    email: str | None = None


class ApiMessage(BaseModel):
    success: bool
    message: str
