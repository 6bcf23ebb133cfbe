"""
Module description:
Logging setup for the Slope One pipeline. The configuration is a YAML
``dictConfig`` whose ``${log_folder}`` placeholders point to the run's log folder.
"""

__version__ = '0.1.0'

import datetime
import logging
import logging.config as cfg
import os
import re
import sys

import yaml

from slopeone.utils.folder import build_log_folder

DEFAULT_LOGGER_CONFIG = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
                                     "config", "logger_config.yml")


class TimeFilter(logging.Filter):

    def filter(self, record: logging.LogRecord) -> bool:
        record.time_filter = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")
        return True


def init(path_config=None, folder_log="./log", log_level=logging.WARNING):
    # Pull in Logging Config
    path = os.path.join(path_config or DEFAULT_LOGGER_CONFIG)
    build_log_folder(folder_log)
    folder_log = os.path.abspath(os.sep.join([folder_log, "slopeone.log"]))
    pattern = re.compile(r'.*?\${(\w+)}.*?')

    class _Loader(yaml.SafeLoader):
        pass

    _Loader.add_implicit_resolver('!CUSTOM', pattern, None)

    def constructor_log_folder(loader, node):
        """
        Replaces the placeholders in the node's value with the log file path
        :param yaml.Loader loader: the yaml loader
        :param node: the current node in the yaml
        :return: the parsed string with the placeholders resolved
        """
        value = loader.construct_scalar(node)
        match = pattern.findall(value)
        if match:
            full_value = value
            for g in match:
                full_value = full_value.replace(
                    f'${{{g}}}', folder_log
                )
            return full_value
        return value

    _Loader.add_constructor('!CUSTOM', constructor_log_folder)

    with open(path, 'r') as stream:
        try:
            logging_config = yaml.load(stream, Loader=_Loader)
        except yaml.YAMLError as exc:
            raise ValueError(f"Error loading logger config '{path}'") from exc

    # Load Logging configs
    cfg.dictConfig(logging_config)

    # Initialize Log Levels
    loggers = {name: logging.getLogger(name) for name in logging.root.manager.loggerDict}
    for _, log in loggers.items():
        log.setLevel(log_level)


def get_logger(name, log_level=logging.DEBUG):
    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    return logger


def prepare_logger(name, path, log_level=logging.DEBUG):
    build_log_folder(path)
    logger = logging.getLogger(name)
    logger.addFilter(TimeFilter())
    logger.setLevel(log_level)
    logfilepath = os.path.abspath(os.sep.join([path, f"{name}-{datetime.datetime.now().strftime('%b-%d-%Y_%H-%M-%S')}.log"]))
    fh = logging.FileHandler(logfilepath)
    sh = logging.StreamHandler(sys.stdout)
    fh.setLevel(log_level)
    sh.setLevel(log_level)
    filefmt = "%(time_filter)-15s: %(levelname)-.1s %(message)s"
    formatter = logging.Formatter(filefmt)
    fh.setFormatter(formatter)
    sh.setFormatter(formatter)
    logger.addHandler(fh)
    logger.addHandler(sh)
    return logger
