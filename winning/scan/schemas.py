"""Scan domain schemas.

Product records as produced by the scan workflow (or the model standing in
for it).
"""

from enum import Enum

from pydantic import BaseModel, Field


class Platform(str, Enum):
    tiktok = "tiktok"
    facebook = "facebook"
    instagram = "instagram"


class ScoreBreakdown(BaseModel):
    trend: float
    engagement: float
    platform_diversity: float
    buy_intent: float
    dropshipping_friendly: float


class Signals(BaseModel):
    viral_potential: bool
    high_engagement: bool
    multi_platform: bool
    strong_buy_intent: bool


class Analysis(BaseModel):
    winning_reasons: list[str]
    ad_hooks: list[str]
    ad_angles: list[str]
    pricing: str
    target_audience: str


class Product(BaseModel):
    product_name: str
    score: float
    score_breakdown: ScoreBreakdown
    signals: Signals
    platforms: list[str]
    appearances: int
    total_views: int
    total_engagement: int
    analysis: Analysis


class ScanRequest(BaseModel):
    niche: str = Field(default="", max_length=200)
    platforms: list[Platform] = Field(default_factory=list)


class ScanSource(str, Enum):
    workflow = "workflow"
    model = "model"


class ScanResult(BaseModel):
    scan_id: str
    source: ScanSource
    products: list[Product]
