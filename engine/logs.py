import logging

from config.default_params import LOG_LEVEL


def get_logger(name: str) -> logging.Logger:
    """Module logger under the 'badminton' namespace; falls back to basicConfig if the host set nothing up"""
    logger = logging.getLogger(f"badminton.{name}")
    if not logging.getLogger().handlers:
        logging.basicConfig(level=LOG_LEVEL, format='[%(asctime)s] %(levelname)s %(name)s: %(message)s')
    return logger
