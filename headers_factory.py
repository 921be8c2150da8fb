from typing import Optional, Dict
from fake_headers import Headers

BASE_HEADERS: Dict[str, str] = {
    "accept": "text/html",
    "accept-language": "en-GB,en-US",
    "sec-ch-ua": '"Chromium";v="88", "Google Chrome";v="88", ";Not A Brand";v="99"',
    "sec-fetch-dest": "document",
    "sec-fetch-mode": "navigate",
    "sec-fetch-site": "same-origin",
    "upgrade-insecure-requests": "1",
}

FALLBACK_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)


def session_cookie(session_id: str) -> str:
    return f"PHPSESSID={session_id};"


class HeaderFactory:
    def __init__(
        self,
        browser: str = "chrome",
        os_name: str = "win",
        user_agent: Optional[str] = None,
    ):
        self.browser = browser
        self.os_name = os_name
        self.user_agent = user_agent or self._generate_user_agent()

    def _generate_user_agent(self) -> str:
        gen = Headers(browser=self.browser, os=self.os_name, headers=False).generate()
        return gen.get("User-Agent") or FALLBACK_UA

    def generate(self, session_id: Optional[str] = None) -> Dict[str, str]:
        h: Dict[str, str] = dict(BASE_HEADERS)
        h["user-agent"] = self.user_agent
        if session_id:
            h["cookie"] = session_cookie(session_id)
        return h
