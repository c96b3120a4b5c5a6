from dataclasses import dataclass
import logging
import os


@dataclass
class Config:
    """Library-wide knobs.

    The floating point tolerances decide when two `Real` or `Complex`
    values count as equal; everything that tests `is_zero` on them
    (normalization, root of unity checks, division) goes through these.
    """

    real_rtol: float = 1e-9
    real_atol: float = 1e-12
    log_level: str = "WARNING"


config = Config()


def setup_logging(level=None):
    """Install a stderr handler on the root logger at `level`.

    The level is taken from the argument, then from $ALGEBRA_LOG, then
    from `config.log_level`.
    """
    if level is None:
        level = os.environ.get("ALGEBRA_LOG", config.log_level)
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("algebra").setLevel(level)
    return level
