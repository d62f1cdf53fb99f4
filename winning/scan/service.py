"""Product scan service.

Posts the scan to the workflow webhook once. If the webhook is unreachable
or answers with something that is not a product list, asks the generative
model once to play the workflow and parses products out of its reply.
"""

import json
import logging
import re
import time
from typing import Annotated, Any

import httpx
from fastapi import Depends
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from winning.core.deps import SettingsDep
from winning.core.http import get_scan_client
from winning.core.settings import Settings
from winning.scan.exceptions import InvalidScanRequestError, ScanFailedError
from winning.scan.schemas import Platform, Product, ScanRequest, ScanResult, ScanSource

logger = logging.getLogger(__name__)

COUNTRY = "DZ"

_products_adapter = TypeAdapter(list[Product])

_CODE_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)

_PROMPT_TEMPLATE = """Act as an n8n workflow engine for "Winning Products DZ".
Follow the scoring and logic defined in the documentation:
- Input Niche: "{niche}"
- Platforms: {platforms}
- Market: Algeria (DZ)

Generate 3 potential winning products with these exact scoring rules:
1. Trend Score (0-30): based on views and appearances.
2. Engagement Score (0-25).
3. Platform Diversity (0-15): {platform_count} platforms * 5.
4. Buy Intent (0-20).
5. Dropshipping Friendly (0-10).

Output ONLY a JSON array of objects strictly matching this structure (Return in Arabic):
{{
  "product_name": string,
  "score": number (70-95),
  "score_breakdown": {{ "trend": number, "engagement": number, "platform_diversity": number, "buy_intent": number, "dropshipping_friendly": number }},
  "signals": {{ "viral_potential": boolean, "high_engagement": boolean, "multi_platform": boolean, "strong_buy_intent": boolean }},
  "platforms": string[],
  "appearances": number,
  "total_views": number,
  "total_engagement": number,
  "analysis": {{
    "winning_reasons": string[] (3-4 reasons),
    "ad_hooks": string[] (5 hooks in Arabic/French),
    "ad_angles": string[] (3 angles),
    "pricing": string (e.g., "2500-4500 DZD"),
    "target_audience": string
  }}
}}
Return only the JSON, no markdown code blocks."""


def build_prompt(niche: str, platforms: list[Platform]) -> str:
    return _PROMPT_TEMPLATE.format(
        niche=niche,
        platforms=", ".join(p.value for p in platforms),
        platform_count=len(platforms),
    )


def strip_code_fences(text: str) -> str:
    """Remove Markdown code fences models wrap JSON in despite instructions."""
    return _CODE_FENCE_RE.sub("", text).strip()


def parse_products(data: Any) -> list[Product]:
    return _products_adapter.validate_python(data)


def new_scan_id() -> str:
    return f"scan_{int(time.time() * 1000)}"


class ScanService:
    """Runs product scans against the workflow, with the model as fallback."""

    def __init__(self, client: httpx.AsyncClient, settings: Settings) -> None:
        self._client = client
        self._settings = settings

    async def scan(self, account_id: str, request: ScanRequest) -> ScanResult:
        """Run one scan for an account.

        Raises:
            InvalidScanRequestError: If the niche or the platform list is empty
            ScanFailedError: If both the workflow and the fallback fail
        """
        niche = request.niche.strip()
        if not niche:
            raise InvalidScanRequestError("Enter a niche to scan")
        platforms = list(dict.fromkeys(request.platforms))
        if not platforms:
            raise InvalidScanRequestError("Choose at least one platform")

        scan_id = new_scan_id()
        payload = {
            "scan_id": scan_id,
            "user_id": account_id,
            "niche": niche,
            "platforms": [p.value for p in platforms],
            "country": COUNTRY,
            "callback_url": self._settings.scan_callback_url,
        }

        products = await self._call_workflow(payload)
        if products is not None:
            logger.info(
                "Scan %s answered by workflow with %d products",
                scan_id,
                len(products),
                extra={"scan_id": scan_id, "scan_source": ScanSource.workflow.value},
            )
            return ScanResult(scan_id=scan_id, source=ScanSource.workflow, products=products)

        products = await self._call_model(build_prompt(niche, platforms))
        logger.info(
            "Scan %s answered by model fallback with %d products",
            scan_id,
            len(products),
            extra={"scan_id": scan_id, "scan_source": ScanSource.model.value},
        )
        return ScanResult(scan_id=scan_id, source=ScanSource.model, products=products)

    async def _call_workflow(self, payload: dict[str, Any]) -> list[Product] | None:
        """POST to the webhook; None means "fall back"."""
        scan_id = payload["scan_id"]
        try:
            response = await self._client.post(
                self._settings.scan_webhook_url, json=payload
            )
        except httpx.HTTPError as e:
            logger.warning(
                "Scan webhook request failed, falling back to model: %s",
                e,
                extra={"scan_id": scan_id},
            )
            return None

        if not response.is_success:
            logger.warning(
                "Scan webhook returned %s, falling back to model",
                response.status_code,
                extra={"scan_id": scan_id, "status_code": response.status_code},
            )
            return None

        try:
            data = response.json()
        except ValueError:
            logger.warning(
                "Scan webhook returned non-JSON body, falling back to model",
                extra={"scan_id": scan_id},
            )
            return None

        if isinstance(data, dict) and data.get("products") is not None:
            data = data["products"]
        if not isinstance(data, list):
            logger.warning(
                "Scan webhook returned no product list, falling back to model",
                extra={"scan_id": scan_id},
            )
            return None

        try:
            return parse_products(data)
        except PydanticValidationError as e:
            logger.warning(
                "Scan webhook products are malformed, falling back to model: %s",
                e.error_count(),
                extra={"scan_id": scan_id},
            )
            return None

    async def _call_model(self, prompt: str) -> list[Product]:
        settings = self._settings
        if not settings.gemini_api_key:
            raise ScanFailedError(
                "Scan workflow is unavailable and no AI fallback is configured"
            )

        url = (
            f"{settings.gemini_base_url}/v1beta/models/"
            f"{settings.gemini_model}:generateContent"
        )
        try:
            response = await self._client.post(
                url,
                headers={"x-goog-api-key": settings.gemini_api_key},
                json={"contents": [{"parts": [{"text": prompt}]}]},
            )
            response.raise_for_status()
            body = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise ScanFailedError(f"AI fallback request failed: {e}") from e

        text = _response_text(body) or "[]"
        try:
            return parse_products(json.loads(strip_code_fences(text)))
        except (json.JSONDecodeError, PydanticValidationError) as e:
            raise ScanFailedError("AI fallback did not return a product list") from e


def _response_text(body: Any) -> str:
    """Concatenate the text parts of the first candidate."""
    try:
        parts = body["candidates"][0]["content"]["parts"]
    except (KeyError, IndexError, TypeError):
        return ""
    return "".join(part.get("text", "") for part in parts if isinstance(part, dict))


def get_scan_service(settings: SettingsDep) -> ScanService:
    return ScanService(get_scan_client(), settings)


ScanServiceDep = Annotated[ScanService, Depends(get_scan_service)]
