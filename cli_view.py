import logging
from colorama import Fore, Style

from event_bus import EventBus
from models import PageDocument
import translation_events

logger = logging.getLogger(__name__)


class CliView:
    def __init__(self, bus: EventBus, page: PageDocument):
        self.bus = bus
        self.page = page
        self.bus.subscribe(translation_events.LANGUAGE_LOADED, self.on_language_loaded)
        self.bus.subscribe(translation_events.LANGUAGE_LOAD_FAILED, self.on_load_failed)
        self.bus.subscribe(translation_events.LANGUAGE_LOAD_DISCARDED, self.on_load_discarded)

    def on_language_loaded(self, data):
        self.print(Fore.GREEN + Style.BRIGHT + f"=== Page ({data['language']}) ===")
        self.show_page()

    def on_load_failed(self, data):
        self.print(f"{Fore.RED}[ERROR]{Fore.RESET} '{data['language']}' 번역을 불러오지 못했습니다: {data.get('error', '')}")

    def on_load_discarded(self, data):
        self.print(f"{Fore.YELLOW}[INFO]{Style.RESET_ALL} '{data['language']}' 로드가 취소되었습니다.")

    def show_page(self):
        self.print(Fore.CYAN + self.page.render())

    def print(self, message):
        print(message)
