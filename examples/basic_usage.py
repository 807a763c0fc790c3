#!/usr/bin/env python3
"""Basic usage example"""

from taglog import LoggerConfig, LoggerConfigBuilder, LoggingContext, LogLevel
from taglog.appenders import ConsoleAppender
from taglog.layouts import BasicLayout

CONFIG = {
    "level": "DEBUG",
    "tags": ["app", "db"],
    "layouts": [
        {"type": "basic", "appenders": [{"type": "console"}]},
        {
            "type": "html",
            "options": {"color_scheme": "SOLARIZED"},
            "appenders": [{"type": "memory", "options": {"buffer_size": 100}}],
        },
    ],
}


def main():
    # Code-first configuration
    context = LoggingContext(
        LoggerConfigBuilder()
            .with_level(LogLevel.TRACE)
            .add_appender(ConsoleAppender(), BasicLayout())
            .build()
    )

    log = context.get_logger("app")
    log.trace("This is trace")
    log.debug("This is debug")
    log.info("Application started", {"pid": 42, "env": {"name": "dev"}}, 2)
    log.warn("This is warning")
    log.error("This is error")
    log.fatal("This is fatal")

    # Declarative configuration, swapped in at runtime
    context.set_config(LoggerConfig.from_dict(CONFIG))
    context.get_logger("db").info("Connected")
    context.get_logger("ui").info("Filtered out by tag")

    memory = context.get_config().get_appenders()[1]
    for line in memory.get_lines():
        print(line)


if __name__ == "__main__":
    main()
