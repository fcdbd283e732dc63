import logging

from fastapi import APIRouter, Depends, HTTPException

from worksheet_ai.models.worksheet import Worksheet, WorksheetGeneratorInput
from worksheet_ai.services.ai import GenerationError
from worksheet_ai.services.generator import WorksheetGenerator, get_generator
from worksheet_ai.services.telemetry import instrument

router = APIRouter(prefix="/api/worksheets", tags=["worksheets"])

logger = logging.getLogger("worksheet_ai.worksheets")

_ROUTE = "/api/worksheets/generate"


def get_worksheet_generator() -> WorksheetGenerator:
    return get_generator()


@router.post("/generate", response_model=Worksheet)
@instrument(route=_ROUTE, version="v1")
async def generate_worksheet(
    request: WorksheetGeneratorInput,
    generator: WorksheetGenerator = Depends(get_worksheet_generator),
):
    """Generate a draft worksheet. Nothing is persisted here."""
    try:
        worksheet = await generator.generate_worksheet(request)
    except GenerationError as e:
        logger.error("Worksheet generation failed: %s", e)
        raise HTTPException(status_code=502, detail=f"Failed to generate worksheet: {e}") from e

    logger.info("Generated worksheet %s (%d questions)", worksheet.id, len(worksheet.questions))
    return worksheet
