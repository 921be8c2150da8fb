from __future__ import annotations

import logging
from http.cookiejar import DefaultCookiePolicy
from typing import Optional

import requests
from bs4 import BeautifulSoup
from requests.adapters import HTTPAdapter
from requests.cookies import RequestsCookieJar
from urllib3.util.retry import Retry

from errors import TransportError
from headers_factory import HeaderFactory

logger = logging.getLogger(__name__)


class PageFetcher:
    """
    GETs one page and returns it parsed. Passing a session id adds the PHPSESSID
    cookie; without one the request goes out anonymous (voucher pages).
    No retries; timeout is None unless configured.
    """

    def __init__(
        self,
        header_factory: Optional[HeaderFactory] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.header_factory = header_factory or HeaderFactory()
        self.timeout = timeout

        self.sess = session or requests.Session()
        # Set-Cookie is never stored, so anonymous requests stay anonymous
        self.sess.cookies = RequestsCookieJar(policy=DefaultCookiePolicy(allowed_domains=[]))
        retries = Retry(total=0, backoff_factor=0, raise_on_status=False)
        adapter = HTTPAdapter(pool_connections=10, pool_maxsize=10, max_retries=retries)
        self.sess.mount("http://", adapter)
        self.sess.mount("https://", adapter)

    @staticmethod
    def soup(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, "lxml")

    def fetch(self, url: str, session_id: Optional[str] = None) -> BeautifulSoup:
        return self.soup(self._get(url, session_id))

    def fetch_authenticated(self, url: str, session_id: str) -> BeautifulSoup:
        return self.fetch(url, session_id=session_id)

    def _get(self, url: str, session_id: Optional[str]) -> str:
        hdrs = self.header_factory.generate(session_id)
        logger.debug("GET %s (authenticated=%s)", url, bool(session_id))
        try:
            r = self.sess.get(url, headers=hdrs, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(url, reason=str(e)) from e
        if not 200 <= r.status_code < 300:
            raise TransportError(url, status=r.status_code)
        return r.text or ""
