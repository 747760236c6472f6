import logging
from typing import List, Optional

import requests

logger = logging.getLogger(__name__)


def get_status_code(url: str, timeout: int = 10) -> Optional[List[int]]:
    """Status codes along the redirect chain of url, or None if it cannot be reached."""
    if not url or not url.startswith(('http://', 'https://')):
        return None
    try:
        response = requests.head(url, allow_redirects=True, timeout=timeout)
        return [r.status_code for r in response.history] + [response.status_code]
    except requests.RequestException as e:
        logger.warning(f"Target {url} not reachable: {e}")
        return None


def is_reachable(status_codes: Optional[List[int]]) -> bool:
    # HEAD may be refused (405) by sites that serve GET fine
    return bool(status_codes) and (status_codes[-1] < 400 or status_codes[-1] == 405)
