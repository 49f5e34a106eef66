# Translator -> View
LANGUAGE_LOAD_STARTED = "LANGUAGE_LOAD_STARTED"
LANGUAGE_LOADED = "LANGUAGE_LOADED"
LANGUAGE_LOAD_FAILED = "LANGUAGE_LOAD_FAILED"
LANGUAGE_LOAD_DISCARDED = "LANGUAGE_LOAD_DISCARDED"  # 더 최근 load()에 의해 취소됨
LANG_TAG_CHANGED = "LANG_TAG_CHANGED"
