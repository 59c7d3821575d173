"""CategoryClassifier backed by an OpenAI-compatible chat completions API.

The model is forced to answer through a single tool call, whose JSON
arguments are validated with pydantic before they become domain decisions.
Any endpoint speaking the chat completions protocol with tool calls works
(AI gateways, OpenAI, OpenRouter, vLLM, ...).
"""

import json
import logging
from typing import Any, Optional, Sequence

import httpx
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from revcat.domain.classification.entities import LineItemClassification
from revcat.domain.classification.exceptions import (
    ClassifierContractViolationError,
    ClassifierUnavailableError,
)
from revcat.domain.classification.services import (
    PROMPT_SAMPLE_SIZE,
    CategoryClassifier,
)
from revcat.domain.classification.value_objects import (
    AmortizationTechnique,
    CategoryFeedbackDecision,
    ReclassificationDecision,
    RevenueRecognitionTiming,
    numbered_category_list,
)

logger = logging.getLogger(__name__)

FEEDBACK_TOOL = "categorization_update"
RECLASSIFY_TOOL = "classify_prpc"


class CategorizationUpdateArguments(BaseModel):
    """Arguments of the bulk feedback tool call."""

    model_config = ConfigDict(extra="ignore")

    new_category: str
    pattern_to_match: str
    rationale: str


class ClassifyPrpcArguments(BaseModel):
    """Arguments of the single-item reclassification tool call."""

    model_config = ConfigDict(extra="ignore")

    category: str
    pob: str
    revenue_recognition_timing: RevenueRecognitionTiming
    amortization_technique: AmortizationTechnique
    rationale: str
    # Strict: booleans and numeric strings are rejected, not coerced
    confidence: float = Field(ge=0.0, le=1.0, strict=True)


class ChatCompletionsCategoryClassifier(CategoryClassifier):
    """
    Classifier calling a chat completions endpoint with a forced tool call.

    One HTTP request per operation. Transport failures and non-2xx answers
    raise ClassifierUnavailableError; answers without a valid tool call
    raise ClassifierContractViolationError. Nothing is retried.
    """

    FEEDBACK_SYSTEM_PROMPT = """You are a product categorization assistant. Read the user's feedback about product categories and work out:
1. Which products or naming patterns the feedback refers to
2. Which category those products belong to
Answer only through the categorization_update tool.

Available categories:
{categories}"""  # NOQA: E501

    FEEDBACK_USER_PROMPT = """User feedback: "{feedback}"

Current category: {current_category}

PRPCs in scope (product - rate plan - charge):
{prpc_list}

Which category update should be made based on this feedback?"""

    RECLASSIFY_SYSTEM_PROMPT = (
        "You are a revenue recognition expert. "
        "Answer only through the classify_prpc tool."
    )

    RECLASSIFY_USER_PROMPT = """A PRPC (product - rate plan - charge) has been classified, but the user disagrees.

Current classification:
- Product: {product}
- Rate Plan: {rate_plan}
- Charge: {charge}
- Current Category: {category}
- Current POB: {pob}

Original rationale: {rationale}

User feedback: {feedback}

Available categories:
{categories}

Provide a NEW classification with product category, pattern of business (POB),
revenue recognition timing, amortization technique, a confidence between 0 and 1
and a detailed rationale that:
- explains the different signals in the data (billing frequency, charge structure, naming)
- addresses conflicts between those signals
- explains why the classification matches the user's feedback"""  # NOQA: E501

    def __init__(  # NOQA: PLR0913
        self,
        api_key: Optional[str],
        base_url: str = "https://ai.gateway.lovable.dev/v1",
        model: str = "google/gemini-2.5-flash",
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._model = model
        self._timeout = timeout
        self._transport = transport

    @property
    def model_name(self) -> str:
        return self._model

    async def classify_feedback(
        self,
        feedback: str,
        candidates: Sequence[LineItemClassification],
        current_category: Optional[str] = None,
    ) -> CategoryFeedbackDecision:
        sample = candidates[:PROMPT_SAMPLE_SIZE]
        prpc_list = "\n".join(c.prpc_label for c in sample) or "(none)"
        messages = [
            {
                "role": "system",
                "content": self.FEEDBACK_SYSTEM_PROMPT.format(
                    categories=numbered_category_list(),
                ),
            },
            {
                "role": "user",
                "content": self.FEEDBACK_USER_PROMPT.format(
                    feedback=feedback,
                    current_category=current_category or "(all categories)",
                    prpc_list=prpc_list,
                ),
            },
        ]
        tool = {
            "name": FEEDBACK_TOOL,
            "description": "Update product categorization based on user feedback",
            "parameters": {
                "type": "object",
                "properties": {
                    "new_category": {
                        "type": "string",
                        "description": "The correct product category",
                    },
                    "pattern_to_match": {
                        "type": "string",
                        "description": (
                            "Keyword that identifies the products to update "
                            '(e.g. "hardware", "server")'
                        ),
                    },
                    "rationale": {
                        "type": "string",
                        "description": "Why this categorization is correct",
                    },
                },
                "required": ["new_category", "pattern_to_match", "rationale"],
                "additionalProperties": False,
            },
        }

        data = await self._complete(messages, tool)
        args = self._validated_arguments(data, FEEDBACK_TOOL, CategorizationUpdateArguments)

        try:
            return CategoryFeedbackDecision(
                new_category=args.new_category,
                pattern_to_match=args.pattern_to_match,
                rationale=args.rationale,
            )
        except ValueError as e:
            raise self._contract_violation(str(e), data) from e

    async def reclassify_item(
        self,
        classification: LineItemClassification,
        feedback: str,
    ) -> ReclassificationDecision:
        messages = [
            {"role": "system", "content": self.RECLASSIFY_SYSTEM_PROMPT},
            {
                "role": "user",
                "content": self.RECLASSIFY_USER_PROMPT.format(
                    product=classification.product_name,
                    rate_plan=classification.rate_plan_name,
                    charge=classification.charge_name,
                    category=classification.inferred_category or "(none)",
                    pob=classification.inferred_pattern_of_business or "(none)",
                    rationale=classification.rationale or "(none)",
                    feedback=feedback,
                    categories=numbered_category_list(),
                ),
            },
        ]
        tool = {
            "name": RECLASSIFY_TOOL,
            "description": "Classify a PRPC based on user feedback",
            "parameters": {
                "type": "object",
                "properties": {
                    "category": {"type": "string", "description": "Product category"},
                    "pob": {"type": "string", "description": "Pattern of business"},
                    "revenue_recognition_timing": {
                        "type": "string",
                        "enum": [t.value for t in RevenueRecognitionTiming],
                    },
                    "amortization_technique": {
                        "type": "string",
                        "enum": [t.value for t in AmortizationTechnique],
                    },
                    "rationale": {
                        "type": "string",
                        "description": (
                            "Detailed explanation of the signals, conflicts "
                            "and reasoning behind the classification"
                        ),
                    },
                    "confidence": {
                        "type": "number",
                        "description": "Confidence score between 0 and 1",
                    },
                },
                "required": [
                    "category",
                    "pob",
                    "revenue_recognition_timing",
                    "amortization_technique",
                    "rationale",
                    "confidence",
                ],
                "additionalProperties": False,
            },
        }

        data = await self._complete(messages, tool)
        args = self._validated_arguments(data, RECLASSIFY_TOOL, ClassifyPrpcArguments)

        try:
            return ReclassificationDecision(
                category=args.category,
                pattern_of_business=args.pob,
                revenue_recognition_timing=args.revenue_recognition_timing,
                amortization_technique=args.amortization_technique,
                rationale=args.rationale,
                confidence=args.confidence,
            )
        except ValueError as e:
            raise self._contract_violation(str(e), data) from e

    async def _complete(
        self,
        messages: list[dict[str, str]],
        tool: dict[str, Any],
    ) -> dict[str, Any]:
        if not self._api_key:
            msg = "Classifier API key not configured"
            raise ClassifierUnavailableError(msg)

        payload = {
            "model": self._model,
            "messages": messages,
            "tools": [{"type": "function", "function": tool}],
            "tool_choice": {"type": "function", "function": {"name": tool["name"]}},
        }
        logger.debug("Classifier request (%s): %s", tool["name"], messages[-1]["content"])

        timeout = httpx.Timeout(connect=5.0, read=self._timeout, write=10.0, pool=5.0)
        try:
            async with httpx.AsyncClient(
                timeout=timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    f"{self._base_url}/chat/completions",
                    json=payload,
                    headers={"Authorization": f"Bearer {self._api_key}"},
                )
                response.raise_for_status()
        except httpx.TimeoutException as e:
            logger.warning("Classifier request timed out after %.1fs", self._timeout)
            raise ClassifierUnavailableError("timeout") from e
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Classifier returned HTTP %s: %s",
                e.response.status_code,
                e.response.text[:500],
            )
            raise ClassifierUnavailableError(
                f"HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.warning(
                "Could not reach classifier at %s: %s",
                self._base_url,
                str(e) or type(e).__name__,
            )
            raise ClassifierUnavailableError(type(e).__name__) from e

        try:
            data = response.json()
        except ValueError as e:
            raise self._contract_violation("response is not JSON", response.text) from e

        logger.debug("Classifier response: %s", data)
        return data

    def _validated_arguments(
        self,
        data: Any,
        tool_name: str,
        schema: type[BaseModel],
    ):
        try:
            tool_call = data["choices"][0]["message"]["tool_calls"][0]
            function = tool_call["function"]
        except (KeyError, IndexError, TypeError) as e:
            raise self._contract_violation("no tool call in response", data) from e

        if not isinstance(function, dict):
            raise self._contract_violation("tool call has no function object", data)

        if function.get("name") not in (None, tool_name):
            reason = f"unexpected tool '{function.get('name')}'"
            raise self._contract_violation(reason, data)

        raw_arguments = function.get("arguments")
        try:
            arguments = (
                json.loads(raw_arguments)
                if isinstance(raw_arguments, str)
                else raw_arguments
            )
        except json.JSONDecodeError as e:
            raise self._contract_violation("tool arguments are not JSON", data) from e

        try:
            return schema.model_validate(arguments)
        except PydanticValidationError as e:
            fields = ", ".join(".".join(map(str, err["loc"])) for err in e.errors())
            raise self._contract_violation(f"invalid tool arguments: {fields}", data) from e

    @staticmethod
    def _contract_violation(
        reason: str,
        raw_response: Any,
    ) -> ClassifierContractViolationError:
        logger.warning("Classifier contract violation (%s). Raw: %s", reason, raw_response)
        return ClassifierContractViolationError(reason, raw_response=raw_response)
