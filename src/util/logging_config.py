import logging

from pathlib import Path

def setup_logging(log_level: str = "DEBUG", log_to_file: bool = False) -> None:
    """
    Configure logging for the hex wave lattice viewer.
    - Console handler for real-time output.
    - Optional file handler writing to <project>/logs/hexwave.log.
    """

    logger = logging.getLogger()
    logger.setLevel(log_level)

    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter('(%(asctime)s) [%(levelname)s] <%(filename)s> %(message)s')

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_to_file:
        log_dir = Path(__file__).parent.parent.parent / "logs"
        log_dir.mkdir(exist_ok=True)
        file_handler = logging.FileHandler(log_dir / "hexwave.log")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Panda3D's python-side notifiers go through "panda3d.*" loggers
    logging.getLogger('panda3d').setLevel(log_level)
