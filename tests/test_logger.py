"""
Tests for the category logger.
"""

from tweenloop.engine.tween import Tween
from tweenloop.models.enums import LogLevel, LogCategory
from tweenloop.utils.logger import CATEGORY_COLORS, Logger, get_logger, get_category_logger, configure_logger


class TestLoggerSingleton:

    def test_get_logger_is_singleton(self):
        assert get_logger() is get_logger()

    def test_configure_logger_modifies_in_place(self):
        original = get_logger()
        configure_logger(LogLevel.DEBUG, use_colors=False)

        assert get_logger() is original
        assert original.min_level == LogLevel.DEBUG
        assert original.use_colors is False

    def test_bound_logger_follows_configuration(self, capsys):
        log = get_category_logger(LogCategory.TWEEN)

        configure_logger(LogLevel.WARN, use_colors=False)
        log.info("hidden")
        configure_logger(LogLevel.DEBUG, use_colors=False)
        log.debug("shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out


class TestLoggerOutput:

    def test_format_without_colors(self, capsys):
        logger = Logger(min_level=LogLevel.DEBUG, use_colors=False)

        logger.info(LogCategory.LOOP, "Tween added", live=3)

        lines = capsys.readouterr().out.splitlines()
        assert "LOOP" in lines[0]
        assert "✓ Tween added" in lines[0]
        assert lines[1].strip() == "└─ live: 3"

    def test_multiple_details_use_tree(self, capsys):
        logger = Logger(use_colors=False)

        logger.warn(LogCategory.CONFIG, "Odd", a=1, b=2)

        lines = capsys.readouterr().out.splitlines()
        assert lines[1].strip() == "├─ a: 1"
        assert lines[2].strip() == "└─ b: 2"

    def test_level_filtering(self, capsys):
        logger = Logger(min_level=LogLevel.ERROR, use_colors=False)

        logger.warn(LogCategory.LOOP, "skip me")
        logger.error(LogCategory.LOOP, "keep me")

        out = capsys.readouterr().out
        assert "skip me" not in out
        assert "keep me" in out

    def test_colors_wrap_message(self, capsys):
        logger = Logger(use_colors=True)

        logger.error(LogCategory.TWEEN, "colored")

        assert "\033[31mcolored\033[0m" in capsys.readouterr().out

    def test_bound_logger_uses_its_category(self, capsys):
        logger = Logger(use_colors=False)

        logger.for_category(LogCategory.EASING).info("hello")

        assert capsys.readouterr().out.split()[1] == "EASING"

    def test_every_category_has_a_color(self):
        assert set(CATEGORY_COLORS) == set(LogCategory)

    def test_tween_callback_failure_is_logged(self, loop, capsys):
        configure_logger(LogLevel.INFO, use_colors=False)

        def explode(obj):
            raise ValueError("bad frame")

        Tween({"x": 0}, duration_ms=10, loop=loop, on_start=explode).to({"x": 1}).start(0)
        loop.tick(5)

        out = capsys.readouterr().out
        assert "Tween callback failed: on_start" in out
        assert "bad frame" in out
