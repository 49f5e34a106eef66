import logging
import os
from typing import List, Mapping, Optional, Protocol, Sequence


logger = logging.getLogger(__name__)

LANGUAGE_CODE_LENGTH = 2
NO_PREFERENCE = {"C", "POSIX"}


class LanguageEnvironment(Protocol):
    @property
    def languages(self) -> Optional[List[str]]:
        ...

    @property
    def language(self) -> Optional[str]:
        ...


def _strip_locale(tag: str) -> Optional[str]:
    """'de_DE.UTF-8@euro' -> 'de_DE', 'C' / 'POSIX' -> None"""
    tag = tag.split(".", 1)[0].split("@", 1)[0].strip()
    if not tag or tag in NO_PREFERENCE:
        return None
    return tag


class SystemLanguageEnvironment:
    """
    프로세스 환경변수에서 선호 언어를 읽음 (gettext 방식).
    LANGUAGE 는 ':' 로 구분된 우선순위 목록, LC_ALL / LC_MESSAGES / LANG 은 단일 값
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self.environ = os.environ if environ is None else environ

    @property
    def languages(self) -> Optional[List[str]]:
        raw = self.environ.get("LANGUAGE", "")
        tags = [t for t in (_strip_locale(part) for part in raw.split(":")) if t]
        return tags or None

    @property
    def language(self) -> Optional[str]:
        for name in ("LC_ALL", "LC_MESSAGES", "LANG"):
            value = self.environ.get(name)
            if value:
                return _strip_locale(value)
        return None


class StaticLanguageEnvironment:
    def __init__(self, languages: Optional[List[str]] = None, language: Optional[str] = None):
        self.languages = languages
        self.language = language


def detect_language(languages: Optional[Sequence[str]], language: Optional[str], default: str = "en") -> str:
    """
    우선순위 목록이 있으면 첫 번째 항목, 없으면 단일 선호 언어를 사용해 앞 두 글자를 반환.
    지원 여부는 여기서 검사하지 않음 (load 시점에 실패)
    """
    tag = languages[0] if languages else language
    if not tag:
        logger.debug(f"No language preference found, using default '{default}'")
        return default
    return tag[:LANGUAGE_CODE_LENGTH]


def detect_environment_language(environment: LanguageEnvironment, default: str = "en") -> str:
    code = detect_language(environment.languages, environment.language, default=default)
    logger.info(f"Detected language: '{code}'")
    return code
