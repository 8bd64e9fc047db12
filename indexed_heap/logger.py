import logging
import os

LOGGER_NAME = 'indexed_heap'
LOG_FILE_ENV = 'INDEXED_HEAP_LOG_FILE'
DEBUG_ENV = 'INDEXED_HEAP_DEBUG'


class Logger:
  __instance = None

  @staticmethod
  def get_instance():
    if Logger.__instance is None:
      return Logger()
    return Logger.__instance

  def __init__(self):
    if Logger.__instance is not None:
      raise Exception("Invalid re-instantiation of Logger")
    self._logger = logging.getLogger(LOGGER_NAME)
    debug = os.environ.get(DEBUG_ENV, '')
    debug = debug == 'true' or debug == '1'
    self._logger.setLevel(logging.DEBUG if debug else logging.INFO)
    log_file_name = os.environ.get(LOG_FILE_ENV)
    if log_file_name:
      handler = logging.FileHandler(log_file_name)
      handler.setFormatter(logging.Formatter(
        fmt='%(asctime)s %(levelname)-8s %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'))
      self._logger.addHandler(handler)
    Logger.__instance = self

  def is_debug(self) -> bool:
    return self._logger.isEnabledFor(logging.DEBUG)

  def debug(self, msg):
    self._logger.debug(msg)

  def info(self, msg):
    self._logger.info(msg)

  def warning(self, msg):
    self._logger.warning(msg)

  def error(self, msg):
    self._logger.error(msg)


def logger():
  return Logger.get_instance()
