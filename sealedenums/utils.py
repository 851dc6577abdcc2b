import logging as _logging

from typing import Union

LOG_FORMAT = "%(asctime)s [%(funcName)s] %(levelname)s: %(message)s"


def configure_logging(verbose: bool, output_logger: bool = False) -> Union[_logging.Logger, None]:
    """Set up root logging so enum sealing and registration messages can be seen

    Sealing and registration report at DEBUG, so they are only shown when verbose.

    :param bool verbose: True: DEBUG, False: INFO
    :param bool output_logger: Flag to indicate whether to return the root Logger, defaults to False
    :return _logging.Logger | None: the root logger if output_logger, otherwise None
    """
    _logging.basicConfig(format=LOG_FORMAT)
    root_logger = _logging.getLogger()
    root_logger.setLevel(_logging.DEBUG if verbose else _logging.INFO)
    return root_logger if output_logger else None
