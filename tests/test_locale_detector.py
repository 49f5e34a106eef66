from utils.locale_detector import (
    StaticLanguageEnvironment,
    SystemLanguageEnvironment,
    detect_environment_language,
    detect_language,
)


def test_first_listed_language_wins():
    assert detect_language(["en-US", "en", "de-DE"], "de-DE") == "en"


def test_single_language_fallback():
    assert detect_language(None, "fr-FR") == "fr"
    assert detect_language([], "fr-FR") == "fr"


def test_two_letter_tag_is_unchanged():
    assert detect_language(["en"], None) == "en"


def test_unsupported_first_locale_is_still_chosen():
    assert detect_language(["zz-ZZ", "en"], None) == "zz"


def test_default_when_no_preference():
    assert detect_language(None, None) == "en"
    assert detect_language(None, "", default="de") == "de"


def test_system_environment_language_list():
    environment = SystemLanguageEnvironment({"LANGUAGE": "de_AT:de:en", "LANG": "en_US.UTF-8"})
    assert environment.languages == ["de_AT", "de", "en"]
    assert detect_environment_language(environment) == "de"


def test_system_environment_single_locale():
    environment = SystemLanguageEnvironment({"LANG": "fr_FR.UTF-8"})
    assert environment.languages is None
    assert environment.language == "fr_FR"
    assert detect_environment_language(environment) == "fr"


def test_system_environment_prefers_lc_all():
    environment = SystemLanguageEnvironment({"LC_ALL": "es_ES@euro", "LANG": "en_US.UTF-8"})
    assert environment.language == "es_ES"


def test_posix_locale_means_no_preference():
    environment = SystemLanguageEnvironment({"LANG": "C.UTF-8", "LANGUAGE": "C"})
    assert environment.languages is None
    assert environment.language is None
    assert detect_environment_language(environment, default="de") == "de"


def test_system_environment_reads_process_environment(monkeypatch):
    monkeypatch.delenv("LANGUAGE", raising=False)
    monkeypatch.delenv("LC_ALL", raising=False)
    monkeypatch.delenv("LC_MESSAGES", raising=False)
    monkeypatch.setenv("LANG", "pt_BR.UTF-8")
    assert detect_environment_language(SystemLanguageEnvironment()) == "pt"


def test_static_environment():
    environment = StaticLanguageEnvironment(languages=["en-GB"], language="de")
    assert detect_environment_language(environment) == "en"
