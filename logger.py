import logging
import os
from datetime import datetime
from logging.handlers import RotatingFileHandler
from colorama import Fore, Style


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"

# 로그 레벨별 색상 정의
LOG_COLORS = {
    "DEBUG": Fore.CYAN,
    "INFO": Fore.GREEN,
    "WARNING": Fore.YELLOW,
    "ERROR": Fore.RED,
    "CRITICAL": Fore.RED + Style.BRIGHT,
}


class ColorFormatter(logging.Formatter):
    def format(self, record):
        log_color = LOG_COLORS.get(record.levelname, Fore.WHITE)
        s = super().format(record)
        # 레벨명 부분만 색상 적용
        return s.replace(f"[{record.levelname}]", f"{log_color}[{record.levelname}]{Style.RESET_ALL}")


def cleanup_old_logs(log_dir, keep: int = 5):
    """날짜 기반 로그 파일을 최신 keep개만 남기고 삭제"""
    log_files = [f for f in os.listdir(log_dir) if f.endswith(".log") and f != "latest.log"]
    log_files.sort()  # 파일 이름 기준 정렬 (날짜 순서)
    for old_file in log_files[:max(len(log_files) - keep, 0)]:
        os.remove(os.path.join(log_dir, old_file))


def init_logger(log_dir="logs", level="DEBUG", keep: int = 5):
    os.makedirs(log_dir, exist_ok=True)
    # 이번 실행의 로그 파일이 추가되므로 하나 적게 남김
    cleanup_old_logs(log_dir, keep=max(keep - 1, 0))

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(ColorFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    latest_log_path = os.path.join(log_dir, "latest.log")
    file_handler = RotatingFileHandler(latest_log_path, maxBytes=5 * 1024 * 1024, backupCount=0, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    start_time = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    timestamped_log_path = os.path.join(log_dir, f"{start_time}.log")
    timestamped_file_handler = logging.FileHandler(timestamped_log_path, encoding="utf-8")
    timestamped_file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logging.basicConfig(
        level=level,
        handlers=[console_handler, file_handler, timestamped_file_handler],
        force=True,
    )
    # httpx 요청 로그는 너무 많음
    logging.getLogger("httpx").setLevel(logging.WARNING)
