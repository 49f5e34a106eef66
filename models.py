import html
import logging
from typing import List, Optional

from datas import ElementData, PageData


logger = logging.getLogger(__name__)


class PageElement:
    def __init__(self, element_id: str, key: Optional[str] = None, content: str = ""):
        self.id: str = element_id
        self.key: Optional[str] = key  # data-i18n
        self.inner_html: str = content

    @classmethod
    def from_data(cls, data: ElementData) -> "PageElement":
        return cls(data.id, key=data.key, content=data.content)

    @property
    def is_translatable(self) -> bool:
        return bool(self.key)

    def set_text(self, text: str):
        self.inner_html = html.escape(text)

    def set_markup(self, markup: str):
        self.inner_html = markup

    def __repr__(self) -> str:
        return f"PageElement(id={self.id!r}, key={self.key!r})"


class PageDocument:
    """
    번역 대상 요소들을 가진 화면(host view).
    lang 은 문서 루트의 언어 표시 속성
    """

    def __init__(self, elements: Optional[List[PageElement]] = None, lang: str = "", title: str = ""):
        self.elements: List[PageElement] = list(elements or [])
        self.lang: str = lang
        self.title: str = title

    @classmethod
    def from_data(cls, data: PageData) -> "PageDocument":
        elements = [PageElement.from_data(item) for item in data.elements]
        return cls(elements, lang=data.lang, title=data.title)

    def add_element(self, element: PageElement):
        self.elements.append(element)

    def get_element(self, element_id: str) -> Optional[PageElement]:
        for element in self.elements:
            if element.id == element_id:
                return element
        return None

    def query_translatable(self) -> List[PageElement]:
        """data-i18n key가 있는 요소들을 문서 순서대로 반환"""
        return [element for element in self.elements if element.is_translatable]

    def set_lang(self, lang: str):
        logger.debug(f"Document lang attribute: '{self.lang}' -> '{lang}'")
        self.lang = lang

    def render(self) -> str:
        lines = [f'<html lang="{html.escape(self.lang)}">']
        if self.title:
            lines.append(f"  <title>{html.escape(self.title)}</title>")
        for element in self.elements:
            key_attr = f' data-i18n="{html.escape(element.key)}"' if element.key else ""
            lines.append(f'  <div id="{html.escape(element.id)}"{key_attr}>{element.inner_html}</div>')
        lines.append("</html>")
        return "\n".join(lines)
