from enum import Enum, auto


class TranslatorState(Enum):
    IDLE = auto()
    LOADING = auto() # fetch 진행 중


class LoadPolicy(str, Enum):
    """
    겹치는 load() 호출을 처리하는 방식.
    settings의 load_policy 값과 일치해야 함.
    """
    LAST_WRITE_WINS = "last_write_wins"
    CANCEL_PREVIOUS = "cancel_previous"


class ContentMode(str, Enum):
    """
    번역 값을 요소에 쓰는 방식.
    MARKUP은 사이트 소유자가 작성한 번역 파일에서만 사용할 것.
    """
    TEXT = "text"
    MARKUP = "markup"
