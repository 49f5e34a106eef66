import asyncio
import logging
from typing import Any, List, Mapping, Optional

from datas import resolve_key_path
from enums import ContentMode, LoadPolicy, TranslatorState
from event_bus import EventBus
from models import PageDocument, PageElement
import translation_events
from utils.locale_detector import LanguageEnvironment, SystemLanguageEnvironment, detect_environment_language
from utils.translation_loader import TranslationLoadError, TranslationSource


logger = logging.getLogger(__name__)


class Translator:
    """
    페이지의 data-i18n 요소들을 언어별 번역 문서로 다시 씁니다.

    요소 목록은 생성 시점에 한 번만 수집하며, 이후 페이지에 추가된 요소는 번역되지 않습니다.
    겹치는 load() 호출은 load_policy 에 따라 처리됩니다.
    """

    def __init__(
        self,
        page: PageDocument,
        source: Optional[TranslationSource] = None,
        bus: Optional[EventBus] = None,
        environment: Optional[LanguageEnvironment] = None,
        load_policy: LoadPolicy = LoadPolicy.LAST_WRITE_WINS,
        content_mode: ContentMode = ContentMode.TEXT,
        rollback_on_failure: bool = False,
        default_language: str = "en",
    ):
        if source is None:
            from settings import settings
            from utils.translation_loader import build_translation_source
            source = build_translation_source(settings)

        self.page = page
        self.source = source
        self.bus = bus or EventBus()
        self.load_policy = LoadPolicy(load_policy)
        self.content_mode = ContentMode(content_mode)
        self.rollback_on_failure = rollback_on_failure

        self.language: str = detect_environment_language(environment or SystemLanguageEnvironment(), default=default_language)
        self.loaded_language: Optional[str] = None
        self.elements: List[PageElement] = page.query_translatable()

        self._pending = 0
        self._generation = 0
        self._inflight: Optional[asyncio.Task] = None

        logger.debug(f"Translator created with {len(self.elements)} translatable elements")

    @property
    def state(self) -> TranslatorState:
        return TranslatorState.LOADING if self._pending else TranslatorState.IDLE

    async def load(self, language: Optional[str] = None) -> bool:
        """
        번역 문서를 가져와 적용합니다. 적용되었으면 True.
        가져오기 실패나 더 최근 호출에 의한 취소는 예외 없이 False 를 반환합니다.
        """
        previous_language = self.language
        if language:
            self.language = language
        requested = self.language

        self._generation += 1
        generation = self._generation

        if self.load_policy is LoadPolicy.CANCEL_PREVIOUS and self._inflight and not self._inflight.done():
            logger.debug("Cancelling previous translation fetch")
            self._inflight.cancel()

        fetch = asyncio.ensure_future(self.source.fetch(requested))
        self._inflight = fetch
        self._pending += 1
        self.bus.publish(translation_events.LANGUAGE_LOAD_STARTED, {"language": requested})

        try:
            document = await fetch
        except TranslationLoadError as e:
            logger.error(f"Failed to load translations: {e}")
            if self.rollback_on_failure:
                self.language = self.loaded_language or previous_language
            self.bus.publish(translation_events.LANGUAGE_LOAD_FAILED, {
                "language": requested,
                "error": str(e),
            })
            return False
        except asyncio.CancelledError:
            # 호출한 쪽 task 자체가 취소된 경우는 그대로 전파
            task = asyncio.current_task()
            caller_cancelled = task is not None and task.cancelling() > 0
            if not caller_cancelled and generation != self._generation and self.load_policy is LoadPolicy.CANCEL_PREVIOUS:
                return self._discard(requested)
            raise
        finally:
            self._pending -= 1

        if self.load_policy is LoadPolicy.CANCEL_PREVIOUS and generation != self._generation:
            return self._discard(requested)

        count = self.translate(document)
        self.language = requested
        self.loaded_language = requested
        self.toggle_lang_tag()
        logger.info(f"Language '{requested}' applied to {count}/{len(self.elements)} elements")
        self.bus.publish(translation_events.LANGUAGE_LOADED, {"language": requested, "translated": count})
        return True

    def _discard(self, language: str) -> bool:
        logger.debug(f"Discarding superseded translations for '{language}'")
        self.bus.publish(translation_events.LANGUAGE_LOAD_DISCARDED, {"language": language})
        return False

    def translate(self, document: Mapping[str, Any]) -> int:
        """생성 시점에 수집한 요소들에 번역 값을 씁니다. 쓴 요소 수를 반환"""
        count = 0
        for element in self.elements:
            value = resolve_key_path(document, element.key)
            if value is None:
                continue
            if self.content_mode is ContentMode.MARKUP:
                element.set_markup(value)
            else:
                element.set_text(value)
            count += 1
        return count

    def toggle_lang_tag(self) -> bool:
        if self.page.lang == self.language:
            return False
        self.page.set_lang(self.language)
        self.bus.publish(translation_events.LANG_TAG_CHANGED, {"language": self.language})
        return True
