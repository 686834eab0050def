import logging
import os
import coloredlogs


def _log_level(name: str = 'NBIP_LOG_LEVEL') -> int:
    """
    Logging level set in an environment variable, either a level name in
    any case (e.g. debug) or an integer. INFO if unset

    ---------------------------------------------------------------------------
    Raises:
        (ValueError): If the value is not a known level
    """
    value = os.environ.get(name, default='INFO').strip()

    if value.isdigit():
        return int(value)

    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise ValueError(f'Unknown log level {name}={value}')

    return level


logger = logging.getLogger('nbodyips')

# Coloured output on the package logger only, so importing nbodyips leaves
# the root logger of an application untouched
coloredlogs.install(
    level=_log_level(),
    logger=logger,
    fmt='%(name)-12s: %(levelname)-8s %(message)s',
)
