import argparse
import asyncio
import logging
import sys
from colorama import Fore, init as init_colorama

import logger as log
from cli_view import CliView
from event_bus import EventBus
from settings import Settings, settings
from translator import Translator
from utils.page_loader import load_page
from utils.translation_loader import build_translation_source, check_locales


class TranslatorApp:
    def __init__(self, config: Settings, page_file=None):
        self.config = config
        self.logger = logging.getLogger(__name__)

        page_path = page_file or config.page_file
        self.page = load_page(page_path)
        if self.page is None:
            self.logger.error("페이지를 불러오지 못했습니다.")
            sys.exit(1)

        self.bus = EventBus()
        self.view = CliView(self.bus, self.page)
        self.translator = Translator(
            self.page,
            source=build_translation_source(config),
            bus=self.bus,
            load_policy=config.load_policy,
            content_mode=config.content_mode,
            rollback_on_failure=config.rollback_on_failure,
            default_language=config.default_language,
        )

    async def show(self, language=None) -> int:
        loaded = await self.translator.load(language)
        if not loaded:
            # 번역 전 원본 페이지를 그대로 보여줌
            self.view.show_page()
        return 0 if loaded else 1

    async def run(self):
        self.logger.info(f"Active language: '{self.translator.language}'")
        await self.translator.load()

        tasks = set()
        while True:
            user_input = (await asyncio.to_thread(input, "언어 코드 입력> ")).strip()
            if user_input.lower() in ("quit", "exit"):
                self.logger.info("Exit command received.")
                break
            if not user_input:
                print(f"{Fore.RED}[ERROR]{Fore.RESET} 언어 코드를 입력하세요. (예: en, de)")
                continue

            # 이전 load 를 기다리지 않음. 겹치는 호출은 load_policy 에 따름
            task = asyncio.create_task(self.translator.load(user_input))
            tasks.add(task)
            task.add_done_callback(tasks.discard)

        if tasks:
            await asyncio.gather(*tasks)


def run_check(config: Settings, reference: str) -> int:
    problems = check_locales(config.locales_dir, reference_language=reference, template=config.resource_template)
    failed = False
    for language, items in problems.items():
        if items:
            failed = True
            print(f"{Fore.RED}[FAIL]{Fore.RESET} {language}: {len(items)} problem(s)")
            for item in items:
                print(f"  - {item}")
        else:
            print(f"{Fore.GREEN}[OK]{Fore.RESET} {language}")
    return 1 if failed else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Translate data-i18n page elements from per-language JSON documents.")
    subparsers = parser.add_subparsers(dest="command")

    show_parser = subparsers.add_parser("show", help="translate the page once and print it")
    show_parser.add_argument("--lang", help="language code (default: detected from the environment)")
    show_parser.add_argument("--page", help="page description JSON file")

    check_parser = subparsers.add_parser("check", help="validate translation files against a reference language")
    check_parser.add_argument("--reference", help="reference language code")

    parser.add_argument("--page", dest="interactive_page", help="page description JSON file (interactive mode)")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    init_colorama(autoreset=True)
    log.init_logger(settings.log_dir, settings.log_level)

    if args.command == "check":
        return run_check(settings, args.reference or settings.default_language)

    if args.command == "show":
        app = TranslatorApp(settings, page_file=args.page)
        return asyncio.run(app.show(args.lang))

    app = TranslatorApp(settings, page_file=args.interactive_page)
    asyncio.run(app.run())
    return 0


if __name__ == "__main__":
    sys.exit(main())
