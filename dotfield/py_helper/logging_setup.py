import logging
import sys


def setup_logging(verbose: bool = False) -> None:
    """
    Configure the root logger for the command line tools.
    Debug output only for dotfield itself; everything else stays at WARNING.
    """
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d | %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    logging.getLogger("dotfield").setLevel(logging.DEBUG if verbose else logging.INFO)
