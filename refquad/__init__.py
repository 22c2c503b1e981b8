import logging

__version__ = '0.1.0'

logger = logging.getLogger('refquad')
logger.setLevel(logging.WARNING)
handler = logging.StreamHandler()
formatter = logging.Formatter('[%(asctime)s][%(levelname)s] %(name)s: %(message)s', datefmt='%m-%d %H:%M:%S')
handler.setFormatter(formatter)

if not logger.handlers:
    logger.addHandler(handler)
    logger.propagate = False


def set_log_level(level) -> None:
    """Set the level of the `refquad` logger, e.g. 'DEBUG' or logging.INFO."""
    logger.setLevel(level)


from .quadrature import (
    QuadratureRule,
    ReferenceShape,
    RuleCache,
    get_rule,
    weights,
    points,
    integrate,
    PreconditionError,
    DataIntegrityError,
)
