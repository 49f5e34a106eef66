import abc
import asyncio
import json
import logging
from pathlib import Path
from urllib.parse import quote
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from datas import TranslationTree, compare_structures
from settings import Settings


logger = logging.getLogger(__name__)


class TranslationLoadError(Exception):
    """번역 문서를 가져오지 못함 (없음, 형식 오류, 네트워크 실패)"""

    def __init__(self, language: str, location: str, reason: str):
        super().__init__(f"Cannot load '{language}' translations from {location}: {reason}")
        self.language = language
        self.location = location
        self.reason = reason


def _check_language_code(language: str, location: str) -> None:
    """경로나 URL 을 바꿀 수 있는 언어 코드 거부"""
    if (
        not language
        or "/" in language
        or "\\" in language
        or ".." in language
        or any(ord(ch) < 32 or ord(ch) == 127 for ch in language)
    ):
        raise TranslationLoadError(language, location, "invalid language code")


def _check_object(payload: Any, language: str, location: str) -> Dict[str, Any]:
    if not isinstance(payload, dict):  # 최상위가 객체인지 확인
        raise TranslationLoadError(language, location, f"expected a JSON object, got {type(payload).__name__}")
    return payload


class TranslationSource(abc.ABC):
    """언어 코드로 번역 문서를 가져오는 외부 리소스"""

    @abc.abstractmethod
    async def fetch(self, language: str) -> Dict[str, Any]:
        """
        language 에 해당하는 번역 문서를 반환합니다.
        실패 시 TranslationLoadError
        """
        pass


class FileTranslationSource(TranslationSource):
    def __init__(self, directory, template: str = "{lang}.json"):
        self.directory = Path(directory)
        self.template = template

    def path_for(self, language: str) -> Path:
        _check_language_code(language, str(self.directory))
        return self.directory / self.template.format(lang=language)

    def _read(self, language: str, path: Path) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except FileNotFoundError as e:
            raise TranslationLoadError(language, str(path), "file not found") from e
        except json.JSONDecodeError as e:
            raise TranslationLoadError(language, str(path), f"invalid JSON ({e})") from e
        except (OSError, ValueError) as e:
            # UnicodeDecodeError, embedded null byte 포함
            raise TranslationLoadError(language, str(path), str(e)) from e
        return _check_object(payload, language, str(path))

    async def fetch(self, language: str) -> Dict[str, Any]:
        path = self.path_for(language)
        document = await asyncio.to_thread(self._read, language, path)
        logger.debug(f"Translation file '{path}' loaded.")
        return document


class HttpTranslationSource(TranslationSource):
    def __init__(self, url_template: str, timeout: Optional[float] = 10.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.url_template = url_template
        self.timeout = timeout
        self.transport = transport

    def url_for(self, language: str) -> str:
        _check_language_code(language, self.url_template)
        return self.url_template.format(lang=quote(language, safe=""))

    async def fetch(self, language: str) -> Dict[str, Any]:
        url = self.url_for(language)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url, headers={"Accept": "application/json"})
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            raise TranslationLoadError(language, url, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise TranslationLoadError(language, url, f"request failed ({e!r})") from e
        except httpx.InvalidURL as e:
            raise TranslationLoadError(language, url, f"invalid URL ({e})") from e
        except ValueError as e:
            # JSONDecodeError 포함
            raise TranslationLoadError(language, url, f"invalid JSON ({e})") from e
        logger.debug(f"Translation resource '{url}' fetched.")
        return _check_object(payload, language, url)


def build_translation_source(config: Settings) -> TranslationSource:
    if config.base_url:
        url_template = f"{config.base_url.rstrip('/')}/{config.resource_template}"
        return HttpTranslationSource(url_template, timeout=config.http_timeout)
    return FileTranslationSource(config.locales_dir, config.resource_template)


def check_locales(directory, reference_language: str = "en", template: str = "{lang}.json") -> Dict[str, List[str]]:
    """
    디렉터리의 모든 번역 파일을 검증하고 reference 언어와 key 구조를 비교.
    문제 목록을 언어별로 반환 (문제가 없는 언어는 빈 리스트)
    """
    directory = Path(directory)
    prefix, _, suffix = template.partition("{lang}")
    documents: Dict[str, Dict[str, Any]] = {}
    problems: Dict[str, List[str]] = {}

    for path in sorted(directory.glob(f"{prefix}*{suffix}")):
        language = path.name[len(prefix):len(path.name) - len(suffix)]
        problems[language] = []
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            documents[language] = TranslationTree.model_validate(raw).root
        except json.JSONDecodeError as e:
            problems[language].append(f"invalid JSON: {e}")
        except (OSError, UnicodeDecodeError) as e:
            problems[language].append(f"unreadable file: {e}")
        except ValidationError as e:
            for error in e.errors():
                problems[language].append(error["msg"])

    if reference_language not in documents:
        problems.setdefault(reference_language, []).append("reference document missing or invalid")
        return problems

    reference = documents[reference_language]
    for language, document in documents.items():
        if language == reference_language:
            continue
        missing, extra = compare_structures(reference, document)
        problems[language].extend(f"missing key '{key}'" for key in missing)
        problems[language].extend(f"unexpected key '{key}'" for key in extra)

    for language, items in problems.items():
        for item in items:
            logger.warning(f"[{language}] {item}")
    return problems
