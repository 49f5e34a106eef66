import asyncio
import json

import pytest

from models import PageDocument, PageElement
from utils.translation_loader import TranslationLoadError, TranslationSource


EN = {"greeting": "Hello World", "header": {"title": "Header", "button": "Click me!"}}
DE = {"greeting": "Hallo Welt", "header": {"title": "Kopfzeile", "button": "Klick mich!"}}
ES = {"greeting": "Hola Mundo", "header": {"title": "Encabezado", "button": "¡Haz clic!"}}


class DictSource(TranslationSource):
    """Serves documents from memory; unknown languages fail like a missing file."""

    def __init__(self, documents):
        self.documents = documents
        self.calls = []

    async def fetch(self, language):
        self.calls.append(language)
        if language not in self.documents:
            raise TranslationLoadError(language, "memory", "file not found")
        return self.documents[language]


class GatedSource(DictSource):
    """Each language's fetch settles only once the test releases it."""

    def __init__(self, documents):
        super().__init__(documents)
        self.gates = {}

    def _gate(self, language):
        return self.gates.setdefault(language, asyncio.Event())

    def release(self, language):
        self._gate(language).set()

    async def fetch(self, language):
        await self._gate(language).wait()
        return await super().fetch(language)


@pytest.fixture
def documents():
    return {"en": EN, "de": DE, "es": ES}


@pytest.fixture
def page():
    return PageDocument(
        [
            PageElement("greeting", key="greeting", content="..."),
            PageElement("title", key="header.title", content="..."),
            PageElement("button", key="header.button", content="..."),
            PageElement("signature", content="Author"),
        ],
        lang="en",
    )


@pytest.fixture
def locales_dir(tmp_path, documents):
    directory = tmp_path / "locales"
    directory.mkdir()
    for language, document in documents.items():
        (directory / f"{language}.json").write_text(json.dumps(document, ensure_ascii=False), encoding="utf-8")
    return directory
