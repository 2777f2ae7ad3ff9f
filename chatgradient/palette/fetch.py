"""
Remote palette fetching.
"""

from pathlib import Path
from typing import Optional

import requests

from ..core.constants import PALETTE_TIMEOUT
from ..ui import display
from .palette import Palette


def fetch_palette(
    url: str,
    fallback_path: Optional[Path] = None,
    timeout: float = PALETTE_TIMEOUT,
) -> Palette:
    """
    Fetch a palette JSON document from a URL.

    Args:
        url: Location of a {"colors": {...}} document
        fallback_path: Local palette file used when the fetch fails
        timeout: Seconds to wait for the server

    Returns:
        Palette built from the remote document (or the local fallback)
    """
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        return Palette.from_dict(response.json())
    except requests.HTTPError as e:
        display.error_palette_http(e.response.status_code)
    except requests.Timeout:
        display.error_palette_timeout()
    except (requests.RequestException, ValueError) as e:
        display.error_palette_generic(str(e))

    if fallback_path is not None and fallback_path.exists():
        display.warning(f"Using local palette {fallback_path}")
        return Palette.load(fallback_path)

    if fallback_path is not None:
        display.error_no_local_palette(fallback_path)
    raise SystemExit(1)
