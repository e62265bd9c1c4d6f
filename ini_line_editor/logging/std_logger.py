"""Logger délégant au module logging standard, sans handler propre."""

import logging

from ini_line_editor.logging.base import Logger


class StdLogger(Logger):
    """Transmet les messages à ``logging.getLogger(name)``.

    C'est le logger par défaut de l'éditeur : l'application hôte
    garde la main sur les handlers et les niveaux.
    """

    def __init__(self, name: str = "ini_line_editor") -> None:
        self.logger = logging.getLogger(name)

    def log_debug(self, message: str) -> None:
        self.logger.debug(message)

    def log_info(self, message: str) -> None:
        self.logger.info(message)

    def log_warning(self, message: str) -> None:
        self.logger.warning(message)

    def log_error(self, message: str) -> None:
        self.logger.error(message)
