"""
Resource retrieval.

Pulls page and stylesheet sources over HTTP(S) with requests, or from the
local file system for ``file://`` URLs.
"""

import logging
import urllib.parse
import urllib.request
from typing import Optional

import certifi
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from dragonfly.errors import InvalidUrlError, LocalFileError, NetworkError
from dragonfly.utils.config import Config

logger = logging.getLogger(__name__)

SUPPORTED_SCHEMES = ('http', 'https', 'file')


def parse_url(url: str) -> urllib.parse.ParseResult:
    """
    Parse and validate a URL.

    Args:
        url: URL to parse

    Returns:
        The parsed URL

    Raises:
        InvalidUrlError: If the URL has no supported scheme
    """
    parsed = urllib.parse.urlparse(url)
    if parsed.scheme not in SUPPORTED_SCHEMES:
        raise InvalidUrlError(f"unsupported or missing URL scheme in '{url}'")
    if parsed.scheme != 'file' and not parsed.netloc:
        raise InvalidUrlError(f"missing host in '{url}'")
    return parsed


class Puller:
    """Retrieves files over the network or from disk."""

    def __init__(self, config: Optional[Config] = None, session: Optional[requests.Session] = None):
        """
        Initialize the puller.

        Args:
            config: Engine configuration
            session: Requests session to use (a configured one is created if omitted)
        """
        self.config = config or Config.defaults()
        self.allow_local_fs: bool = self.config.get('network.allow_local_fs', True)
        self.timeout = self.config.get('network.timeout', 30)
        self.session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        """
        Create a new requests session with retries and the certifi CA bundle.

        Returns:
            A configured requests session
        """
        session = requests.Session()

        retry_strategy = Retry(
            total=3,
            backoff_factor=0.5,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET", "HEAD"]
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        session.verify = certifi.where()
        session.headers.update({
            "User-Agent": self.config.get('network.user_agent', "Dragonfly/0.1"),
            "Accept": "text/html,text/css,*/*;q=0.8",
        })

        return session

    def _make_request(self, url: str) -> requests.Response:
        logger.info(f"pulling '{url}'")
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise NetworkError(f"request to '{url}' failed: {e}") from e
        return response

    def _local_path(self, parsed: urllib.parse.ParseResult) -> str:
        if not self.allow_local_fs:
            raise LocalFileError("access to the local file system is disabled")
        return urllib.request.url2pathname(parsed.path)

    def _read_local_file(self, path: str) -> bytes:
        logger.info(f"reading local file '{path}'")
        try:
            with open(path, 'rb') as f:
                return f.read()
        except OSError as e:
            raise LocalFileError(f"failed to read '{path}': {e}") from e

    def pull_bytes(self, url: str) -> bytes:
        """
        Pull raw bytes from a URL.

        Args:
            url: http(s):// or file:// URL

        Returns:
            The resource contents

        Raises:
            InvalidUrlError, NetworkError, LocalFileError
        """
        parsed = parse_url(url)
        if parsed.scheme == 'file':
            return self._read_local_file(self._local_path(parsed))
        return self._make_request(url).content

    def pull_str(self, url: str) -> str:
        """
        Pull text from a URL.

        Local files are decoded as UTF-8; HTTP responses use the encoding
        reported by the server.

        Args:
            url: http(s):// or file:// URL

        Returns:
            The resource contents as text

        Raises:
            InvalidUrlError, NetworkError, LocalFileError
        """
        parsed = parse_url(url)
        if parsed.scheme == 'file':
            return self._read_local_file(self._local_path(parsed)).decode('utf-8', errors='replace')
        return self._make_request(url).text
