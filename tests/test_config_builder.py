"""Tests for fluent and declarative config construction"""

import json

import pytest

from taglog import ConfigurationError, LoggerConfig, LoggerConfigBuilder, LoggingContext, LogLevel
from taglog.appenders import ConsoleAppender, MemoryAppender
from taglog.layouts import BasicLayout, HTMLColorTheme, HTMLLayout, HTMLLayoutColors, THEME_COLORS


class TestLoggerConfigBuilder:
    """Test the fluent builder."""

    def test_builder_pattern(self):
        console = ConsoleAppender()
        memory = MemoryAppender()
        layout = BasicLayout()
        config = (LoggerConfigBuilder()
            .with_level(LogLevel.DEBUG)
            .with_tags("app", "db")
            .add_appender(console, layout)
            .add_appender(memory, layout)
            .build())

        assert config.get_level() == LogLevel.DEBUG
        assert config.get_tags() == frozenset({"app", "db"})
        assert config.get_appenders() == [console, memory]
        assert console.get_layout() is layout
        assert memory.get_layout() is layout

    def test_level_by_name(self):
        assert LoggerConfigBuilder().with_level("warn").build().get_level() == LogLevel.WARN

    def test_unknown_level_name(self):
        with pytest.raises(ConfigurationError):
            LoggerConfigBuilder().with_level("LOUD")

    def test_keeps_existing_layout(self):
        layout = BasicLayout()
        appender = MemoryAppender(layout=layout)
        LoggerConfigBuilder().add_appender(appender).build()
        assert appender.get_layout() is layout

    def test_unresolved_appender(self):
        builder = LoggerConfigBuilder().add_appender(None, BasicLayout())
        with pytest.raises(ConfigurationError):
            builder.build()


class TestFromDict:
    """Test the declarative builder."""

    def test_basic_console(self):
        config = LoggerConfig.from_dict({
            "level": "WARN",
            "tags": ["svc"],
            "layouts": [{"type": "basic", "appenders": [{"type": "console"}]}],
        })

        assert config.get_level() == LogLevel.WARN
        assert config.has_tag("svc")
        assert not config.has_tag("other")
        [appender] = config.get_appenders()
        assert isinstance(appender, ConsoleAppender)
        assert isinstance(appender.get_layout(), BasicLayout)

    def test_layout_shared_by_its_appenders_in_order(self):
        config = LoggerConfigBuilder.from_dict({
            "level": "ALL",
            "layouts": [
                {"type": "basic", "appenders": [{"type": "console"}, {"type": "memory"}]},
                {"type": "html", "appenders": [{"type": "memory"}]},
            ],
        })

        first, second, third = config.get_appenders()
        assert isinstance(first, ConsoleAppender)
        assert isinstance(second, MemoryAppender)
        assert isinstance(third, MemoryAppender)
        assert first.get_layout() is second.get_layout()
        assert isinstance(third.get_layout(), HTMLLayout)
        assert config.get_level() == LogLevel.ALL

    def test_html_theme(self):
        config = LoggerConfig.from_dict({
            "level": "INFO",
            "layouts": [{
                "type": "html",
                "options": {"color_scheme": "DARK"},
                "appenders": [{"type": "memory"}],
            }],
        })
        layout = config.get_appenders()[0].get_layout()
        assert layout.colors == THEME_COLORS[HTMLColorTheme.DARK]

    def test_html_custom_colors(self):
        colors = {"time": "#1", "level": "#2", "tag": "#3", "message": "#4"}
        config = LoggerConfig.from_dict({
            "level": "INFO",
            "layouts": [{
                "type": "html",
                "options": {"color_scheme": colors},
                "appenders": [{"type": "memory"}],
            }],
        })
        layout = config.get_appenders()[0].get_layout()
        assert layout.colors == HTMLLayoutColors(**colors)

    def test_html_without_options(self):
        config = LoggerConfig.from_dict({
            "level": "INFO",
            "layouts": [{"type": "html", "appenders": [{"type": "memory"}]}],
        })
        assert config.get_appenders()[0].get_layout().colors is None

    def test_memory_options(self):
        config = LoggerConfig.from_dict({
            "level": "INFO",
            "layouts": [{
                "type": "basic",
                "appenders": [{"type": "memory", "options": {"buffer_size": 5, "escape_html": True}}],
            }],
        })
        appender = config.get_appenders()[0]
        assert appender.buffer_size == 5
        assert appender.escape_html is True

    def test_defaults(self):
        config = LoggerConfig.from_dict({})
        assert config.get_level() == LogLevel.INFO
        assert config.get_tags() is None
        assert config.get_appenders() == []

    def test_dom_appender_is_configuration_error(self):
        with pytest.raises(ConfigurationError, match="dom"):
            LoggerConfig.from_dict({
                "level": "INFO",
                "layouts": [{
                    "type": "basic",
                    "appenders": [{"type": "dom", "options": {"container_id": "log"}}],
                }],
            })

    def test_unknown_layout_fails_on_first_append(self):
        config = LoggerConfig.from_dict({
            "level": "INFO",
            "layouts": [{"type": "fancy", "appenders": [{"type": "memory"}]}],
        })
        [appender] = config.get_appenders()
        assert appender.get_layout() is None

        log = LoggingContext(config).get_logger("app")
        with pytest.raises(ConfigurationError):
            log.info("boom")

    def test_unknown_level(self):
        with pytest.raises(ConfigurationError):
            LoggerConfig.from_dict({"level": "LOUD", "layouts": []})

    @pytest.mark.parametrize("tags", ["svc", {"svc": True}, 7])
    def test_tags_must_be_a_list(self, tags):
        with pytest.raises(ConfigurationError, match="tags"):
            LoggerConfig.from_dict({"level": "INFO", "tags": tags})

    def test_tags_list_is_matched_whole(self):
        config = LoggerConfig.from_dict({"level": "INFO", "tags": ["svc"]})
        assert config.get_tags() == frozenset({"svc"})
        assert config.has_tag("svc")
        assert not config.has_tag("s")

    def test_malformed_blocks(self):
        with pytest.raises(ConfigurationError):
            LoggerConfig.from_dict({"layouts": {"type": "basic"}})
        with pytest.raises(ConfigurationError):
            LoggerConfig.from_dict({"layouts": ["basic"]})
        with pytest.raises(ConfigurationError):
            LoggerConfig.from_dict(["not", "a", "mapping"])

    def test_end_to_end(self):
        config = LoggerConfig.from_dict({
            "level": "WARN",
            "tags": ["svc"],
            "layouts": [{"type": "basic", "appenders": [{"type": "memory"}]}],
        })
        context = LoggingContext(config)
        context.get_logger("svc").info("dropped")
        context.get_logger("svc").warn("kept")
        context.get_logger("other").fatal("dropped")

        lines = config.get_appenders()[0].get_lines()
        assert len(lines) == 1
        assert lines[0].endswith(" WARN [svc] - kept")


class TestFromJson:
    """Test JSON config documents."""

    DOCUMENT = {
        "level": "DEBUG",
        "tags": [],
        "layouts": [{"type": "basic", "appenders": [{"type": "memory"}]}],
    }

    def test_from_text(self):
        config = LoggerConfig.from_json(json.dumps(self.DOCUMENT))
        assert config.get_level() == LogLevel.DEBUG
        assert config.has_tag("anything")
        assert len(config.get_appenders()) == 1

    def test_from_file(self, tmp_path):
        path = tmp_path / "logging.json"
        path.write_text(json.dumps(self.DOCUMENT), encoding="utf-8")

        assert LoggerConfigBuilder.from_json(path).get_level() == LogLevel.DEBUG
        assert LoggerConfigBuilder.from_json(str(path)).get_level() == LogLevel.DEBUG

    def test_invalid_json(self):
        with pytest.raises(ConfigurationError):
            LoggerConfig.from_json("{not json")

    @pytest.mark.parametrize("text", ['[{"level": "INFO"}]', "null", "42"])
    def test_json_that_is_not_a_mapping(self, text):
        with pytest.raises(ConfigurationError, match="mapping"):
            LoggerConfig.from_json(text)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            LoggerConfig.from_json(str(tmp_path / "missing.json"))

    def test_invalid_json_file(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{broken", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            LoggerConfig.from_json(path)
