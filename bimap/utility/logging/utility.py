import dataclasses
import enum
import logging
import logging.config
import os
import typing

STANDARD_FORMAT = "[%(levelname)s]%(asctime)s:%(name)s: %(message)s"
VERBOSE_FORMAT = "[%(levelname)s]%(asctime)s:%(name)s:%(module)s:%(funcName)s:%(lineno)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S%z"


class LogType(enum.Enum):
    Screen = enum.auto()
    File = enum.auto()


@dataclasses.dataclass
class LogPath:
    log_type: LogType
    path: str


class LoggingLevel(enum.Enum):
    CRITICAL = logging.CRITICAL
    ERROR = logging.ERROR
    WARNING = logging.WARNING
    INFO = logging.INFO
    DEBUG = logging.DEBUG
    NOTSET = logging.NOTSET


def setup_logger(
    log_paths: typing.Tuple[str, ...] = ("/dev/stdout",),
    logging_config_file: typing.Optional[str] = None,
    logging_level: typing.Union[str, LoggingLevel] = LoggingLevel.INFO,
):
    """
    Configure the root logger for applications and tests that use bimap.

    :param log_paths: where to write logs, "-" or "/dev/stdout" mean the console, anything else is a file path that
        gets rotated at midnight
    :param logging_config_file: if given, the file is handed to logging.config.fileConfig and log_paths is ignored
    :param logging_level: level name or LoggingLevel member, applied to every handler
    """

    if not log_paths and not logging_config_file:
        return

    if logging_config_file is not None:
        print(f"use logging config file: {logging_config_file}")
        logging.config.fileConfig(logging_config_file, disable_existing_loggers=True)
        return

    level_name = logging_level.name if isinstance(logging_level, LoggingLevel) else LoggingLevel[logging_level].name

    resolved_log_paths = [LogPath(log_type=__detect_log_type(path), path=path) for path in log_paths]
    logging.config.dictConfig(__build_config(resolved_log_paths, level_name))
    logging.info(f"logging to {log_paths}")


def __detect_log_type(path: str) -> LogType:
    if path in {"-", "/dev/stdout"}:
        return LogType.Screen

    return LogType.File


def __build_config(log_paths: typing.List[LogPath], level_name: str) -> typing.Dict:
    logging.addLevelName(logging.INFO, "INFO")
    logging.addLevelName(logging.WARNING, "WARN")
    logging.addLevelName(logging.ERROR, "EROR")
    logging.addLevelName(logging.DEBUG, "DEBG")
    logging.addLevelName(logging.CRITICAL, "CTIC")

    handlers: typing.Dict[str, typing.Dict] = {}
    for log_path in log_paths:
        if log_path.log_type == LogType.Screen:
            handlers["console"] = __console_handler(level_name)
            continue

        if log_path.log_type == LogType.File:
            handlers[log_path.path] = __rotating_file_handler(level_name, log_path.path)
            continue

        raise TypeError(f"Unsupported LogPath: {log_path}")

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": STANDARD_FORMAT, "datefmt": DATE_FORMAT},
            "verbose": {"format": VERBOSE_FORMAT, "datefmt": DATE_FORMAT},
        },
        "handlers": handlers,
        "loggers": {"": {"handlers": list(handlers.keys()), "level": "DEBUG", "propagate": True}},
    }


def __console_handler(level_name: str) -> typing.Dict:
    return {
        "class": "logging.StreamHandler",
        "level": level_name,
        "formatter": "standard",
        "stream": "ext://sys.stdout",
    }


def __rotating_file_handler(level_name: str, file_path: str) -> typing.Dict:
    return {
        "class": "logging.handlers.TimedRotatingFileHandler",
        "level": level_name,
        "formatter": "verbose",
        "filename": os.path.expandvars(os.path.expanduser(file_path)),
        "when": "midnight",
    }
