import logging

from logger import ColorFormatter, LOG_FORMAT, cleanup_old_logs


def test_cleanup_keeps_newest_logs(tmp_path):
    names = [f"2026-01-0{day}_10-00-00.log" for day in range(1, 8)]
    for name in names + ["latest.log", "notes.txt"]:
        (tmp_path / name).write_text("", encoding="utf-8")

    cleanup_old_logs(tmp_path, keep=5)

    remaining = sorted(p.name for p in tmp_path.iterdir())
    assert remaining == sorted(names[2:] + ["latest.log", "notes.txt"])


def test_color_formatter_colors_level_name():
    record = logging.LogRecord("translator", logging.ERROR, __file__, 1, "boom", None, None)
    formatted = ColorFormatter(LOG_FORMAT).format(record)
    assert "translator: boom" in formatted
    assert "[ERROR]" in formatted
    assert "\x1b[" in formatted
