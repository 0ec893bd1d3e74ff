import xml.etree.ElementTree as ET
from typing import Any, List, Optional

import requests

from . import __version__
from .errors import DecodeError, TransportError
from .models import VersionEntry
from .utils import InvalidVersion, SemanticVersion, sort_descending

META_URL = "https://meta.quiltmc.org/v3/versions"
MAVEN_URL = "https://maven.quiltmc.org/repository/release"
USER_AGENT = f"quilt-catalog/{__version__}"

LOOM_COORDINATE = "org.quiltmc.loom"
QFAPI_COORDINATE = "org.quiltmc.quilted-fabric-api.quilted-fabric-api"


class QuiltMetaClient:
    """Reads version listings from Quilt meta (JSON) and the Quilt maven (XML).

    Every call is one blocking GET: no retries, no caching.
    """

    def __init__(
        self,
        meta_url: str = META_URL,
        maven_url: str = MAVEN_URL,
        user_agent: str = USER_AGENT,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.meta_url = meta_url.rstrip("/")
        self.maven_url = maven_url.rstrip("/")
        self.timeout = timeout
        if session is None:
            session = requests.Session()
            session.headers["User-Agent"] = user_agent
        self.session = session

    def meta_endpoint(self, path: str) -> str:
        return f"{self.meta_url}/{path.lstrip('/')}"

    def maven_metadata_url(self, coordinate: str) -> str:
        return f"{self.maven_url}/{coordinate.replace('.', '/')}/maven-metadata.xml"

    def _get(self, url: str) -> requests.Response:
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise TransportError(url, str(e)) from e
        return response

    def fetch_meta(self, path: str) -> List[VersionEntry]:
        url = self.meta_endpoint(path)
        response = self._get(url)
        try:
            payload: Any = response.json()
        except ValueError as e:
            raise DecodeError(url, f"malformed JSON ({e})") from e

        if not isinstance(payload, list):
            raise DecodeError(url, f"expected a JSON array, got {type(payload).__name__}")
        entries: List[VersionEntry] = []
        for index, obj in enumerate(payload):
            if not isinstance(obj, dict):
                raise DecodeError(url, f"entry {index} is not an object")
            try:
                entries.append(VersionEntry.from_json(obj))
            except (KeyError, TypeError) as e:
                raise DecodeError(url, f"entry {index} has no usable 'version' field ({e})") from e
        return entries

    def fetch_maven_versions(self, coordinate: str) -> List[SemanticVersion]:
        """Return every published version of ``coordinate``, most recent first."""
        url = self.maven_metadata_url(coordinate)
        response = self._get(url)
        try:
            root = ET.fromstring(response.content)
        except ET.ParseError as e:
            raise DecodeError(url, f"malformed XML ({e})") from e

        versions_node = root.find("./versioning/versions")
        if versions_node is None:
            raise DecodeError(url, "missing versioning/versions element")

        versions: List[SemanticVersion] = []
        for item in versions_node.findall("version"):
            try:
                versions.append(SemanticVersion.parse(item.text or ""))
            except InvalidVersion as e:
                raise DecodeError(url, str(e)) from e
        return sort_descending(versions)
