"""HTTP session setup shared by the metadata client and the downloader."""

from typing import Dict, Optional
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry


def build_session(max_retries: int = 0, user_agent: Optional[str] = None,
                  headers: Optional[Dict[str, str]] = None) -> requests.Session:
    """Create a session; retries are off unless ``max_retries`` says otherwise."""
    session = requests.Session()
    retries = Retry(total=max_retries, backoff_factor=1, status_forcelist=[500, 502, 503, 504],
                    raise_on_status=False)
    session.mount('https://', HTTPAdapter(max_retries=retries))
    session.mount('http://', HTTPAdapter(max_retries=retries))
    if user_agent:
        session.headers['User-Agent'] = user_agent
    if headers:
        session.headers.update(headers)
    return session
