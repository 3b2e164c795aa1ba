import logging

logger: logging.Logger = logging.getLogger("leona")
logger.addHandler(logging.StreamHandler())
# By default, we should not output any log messages
logger.setLevel(logging.CRITICAL)

try:
    import regex  # type: ignore
except ImportError:
    regex = None
