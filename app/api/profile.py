from datetime import datetime, timezone
import logging

from fastapi import APIRouter

from app import config
from app.schemas import ProfileResponse, ProfileUser
from app.services.external_api import fetch_cat_fact

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/me", response_model=ProfileResponse)
async def get_profile():
    """
    Return profile information with a dynamic cat fact.
    """
    current_timestamp = datetime.now(timezone.utc)
    cat_fact = await fetch_cat_fact()

    logger.info(f"Profile request successful at {current_timestamp.isoformat()}")

    return ProfileResponse(
        user=ProfileUser(
            email=config.USER_EMAIL,
            name=config.USER_NAME,
            stack=config.USER_STACK,
        ),
        timestamp=current_timestamp,
        fact=cat_fact,
    )
