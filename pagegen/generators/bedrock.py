"""
pagegen/generators/bedrock.py
═══════════════════════════════════════════════════════════════════════════════
AWS Bedrock (Converse API) page generator.

  • One random website category per call, substituted into the prompt
  • boto3 is synchronous → every call runs in the loop's default executor,
    the event loop keeps serving requests while the model writes
  • Every failure surfaces as GenerationError with a short reason:
      ModelTimeoutException   → "Model took too long"
      ModelNotReadyException  → "Model is not ready"
      other service errors    → "Unknown"
      transport / credentials → "Unknown service error"
  • Returns the raw model text; sanitizing is the regenerator's job
═══════════════════════════════════════════════════════════════════════════════
"""

import asyncio
import functools
import logging
import random
import time
from typing import Any, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from pagegen.core.config import (
    AWS_REGION, MODEL_ID, TEMPERATURE,
    BEDROCK_READ_TIMEOUT_S, BEDROCK_CONNECT_TIMEOUT_S,
)
from pagegen.core.errors import GenerationError
from pagegen.generators.prompts import build_prompt, pick_category

log = logging.getLogger("bedrock")

_SERVICE_ERROR_REASONS: dict[str, str] = {
    "ModelTimeoutException":  "Model took too long",
    "ModelNotReadyException": "Model is not ready",
}


def make_client(region: str = AWS_REGION) -> Any:
    return boto3.client(
        "bedrock-runtime",
        region_name=region,
        config=Config(
            read_timeout=BEDROCK_READ_TIMEOUT_S,
            connect_timeout=BEDROCK_CONNECT_TIMEOUT_S,
            retries={"max_attempts": 1},
        ),
    )


def output_text(response: dict, model_id: Optional[str] = None) -> str:
    """First text block of the assistant message in a Converse response."""
    output = response.get("output")
    if not output:
        raise GenerationError("no output", model_id)

    message = output.get("message")
    if not isinstance(message, dict):
        raise GenerationError("output not a message", model_id)

    content = message.get("content") or []
    if not content:
        raise GenerationError("no content in message", model_id)

    text = content[0].get("text")
    if not isinstance(text, str):
        raise GenerationError("content is not text", model_id)
    return text


class BedrockGenerator:
    def __init__(
        self,
        client: Any = None,
        model_id: str = MODEL_ID,
        temperature: float = TEMPERATURE,
        rng: Optional[random.Random] = None,
    ):
        self.client      = client if client is not None else make_client()
        self.model_id    = model_id
        self.temperature = temperature
        self._rng        = rng

    async def generate(self) -> str:
        category = pick_category(self._rng)
        log.info(f"Starting webpage generation for category: {category}")

        t0 = time.monotonic()
        loop = asyncio.get_running_loop()
        text = await loop.run_in_executor(
            None,
            functools.partial(self._converse, build_prompt(category)),
        )
        log.info(
            f"Webpage generation complete - category={category!r} "
            f"duration={time.monotonic() - t0:.1f}s chars={len(text)}"
        )
        return text

    def _converse(self, prompt: str) -> str:
        try:
            response = self.client.converse(
                modelId=self.model_id,
                messages=[{"role": "user", "content": [{"text": prompt}]}],
                inferenceConfig={"temperature": self.temperature},
            )
        except ClientError as ex:
            code = ex.response.get("Error", {}).get("Code", "")
            log.debug(f"Bedrock service error {code}: {ex}")
            raise GenerationError(_SERVICE_ERROR_REASONS.get(code, "Unknown"), self.model_id) from ex
        except BotoCoreError as ex:
            log.debug(f"Bedrock transport error: {ex}")
            raise GenerationError("Unknown service error", self.model_id) from ex

        return output_text(response, self.model_id)
