import logging


def init_logging(service_name: str, level: str = "INFO"):
    """Route every logger through one stderr handler tagged with ``service_name``.

    ``level`` is a level name as found in ``LOG_LEVEL``, in any case.
    """
    log_format = (
        "%(asctime)s | "
        + service_name + " | "
        "%(levelname)s | "
        "%(name)s | "
        "%(message)s"
    )

    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    logging.basicConfig(level=level.upper(), format=log_format)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
