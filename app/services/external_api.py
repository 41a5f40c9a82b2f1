import httpx
import logging

from app import config

logger = logging.getLogger(__name__)

async def fetch_cat_fact() -> str:
    """
    Fetch a random cat fact from the Cat Facts API.
    Returns a fallback message if the API fails.
    """
    try:
        async with httpx.AsyncClient(timeout=config.API_TIMEOUT) as client:
            response = await client.get(config.CAT_FACTS_API)
            response.raise_for_status()
            data = response.json()
            return data.get("fact") or "Cats are amazing creatures!"
    except httpx.TimeoutException:
        logger.error("Cat Facts API request timed out")
        return "Cats are known for their independent nature and have been domesticated for thousands of years."
    except httpx.HTTPError as e:
        logger.error(f"HTTP error fetching cat fact: {e}")
        return "Cats have over 20 different vocalizations, including the purr, meow, and hiss."
    except (ValueError, AttributeError) as e:
        logger.error(f"Malformed cat fact payload: {e}")
        return "Cats spend 70% of their lives sleeping, which is about 13-16 hours a day."
