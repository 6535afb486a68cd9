import system_info

from log import logger

_logger = logger.Logger(system_info.get_log_directory())

debug = _logger.debug
info = _logger.info
warning = _logger.warning
error = _logger.error
data = _logger.data
