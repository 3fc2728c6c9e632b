"""
Card rendering endpoints.

Exposes the three public entry points over HTTP:
- render a card with supplied art
- render a card with the placeholder art
- validate art dimensions without rendering a card

Every response is an ApiResponse envelope that has passed through the
failure authority boundary.
"""

import logging
from typing import Any

from fastapi import APIRouter, Response
from pydantic import BaseModel, Field

from cardgrid.config import ART_HEIGHT, ART_WIDTH, CARD_HEIGHT, CARD_WIDTH
from cardgrid.models.card import CardRecord
from cardgrid.models.failure import (
    ApiResponse,
    InternalConsistencyError,
    KnownError,
    create_success,
)
from cardgrid.models.payload import CardPayload
from cardgrid.services.art_normalizer import measure_block, validate_dimensions
from cardgrid.services.card_composer import compose_card, render_card_with_default_art

logger = logging.getLogger(__name__)

router = APIRouter(tags=["cards"])


class RenderRequest(BaseModel):
    """Request body for rendering a card with custom art."""

    card: CardPayload
    art: str | None = None


class RenderedCardResponse(BaseModel):
    """A rendered card."""

    card: str
    width: int = CARD_WIDTH
    height: int = CARD_HEIGHT
    lines: list[str] = Field(default_factory=list)


class ArtValidationRequest(BaseModel):
    """Request body for standalone art validation."""

    art: str
    width: int = Field(default=ART_WIDTH, ge=1)
    height: int = Field(default=ART_HEIGHT, ge=1)


class ArtValidationResponse(BaseModel):
    """Result of a successful art validation."""

    valid: bool
    width: int
    height: int


def _known_failure(error: KnownError, response: Response) -> ApiResponse[Any]:
    response.status_code = error.status_code
    return error.to_response()


def _render(record: CardRecord, art: str | None) -> RenderedCardResponse:
    try:
        if art:
            rendered = compose_card(record, art)
        else:
            rendered = render_card_with_default_art(record)
    except InternalConsistencyError:
        logger.critical("Card %r broke the grid contract", record.agent_name)
        raise
    return RenderedCardResponse(card=rendered, lines=rendered.split("\n"))


@router.post("/cards/render", response_model=ApiResponse[RenderedCardResponse])
async def render_with_art(request: RenderRequest, response: Response) -> ApiResponse[Any]:
    """
    Render a card with the supplied art.

    Art of any size is accepted and normalized. A missing or empty art
    string falls back to the placeholder art.
    """
    try:
        return create_success(_render(request.card.to_record(), request.art))
    except KnownError as e:
        return _known_failure(e, response)


@router.post("/cards/render/default", response_model=ApiResponse[RenderedCardResponse])
async def render_with_default_art(card: CardPayload, response: Response) -> ApiResponse[Any]:
    """Render a card with the placeholder art."""
    try:
        return create_success(_render(card.to_record(), None))
    except KnownError as e:
        return _known_failure(e, response)


@router.post("/art/validate", response_model=ApiResponse[ArtValidationResponse])
async def validate_art(request: ArtValidationRequest, response: Response) -> ApiResponse[Any]:
    """
    Check art dimensions without rendering a card.

    Intended for art-ingestion pipelines that vet art before storing it.
    """
    try:
        validate_dimensions(request.art, request.width, request.height)
    except KnownError as e:
        return _known_failure(e, response)

    width, height = measure_block(request.art)
    return create_success(ArtValidationResponse(valid=True, width=width, height=height))
