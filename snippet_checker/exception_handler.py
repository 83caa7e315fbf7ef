import logging
from typing import Any, Dict

from .exceptions import SnippetCheckError


class ErrorHandler:
    """Logging setup and fatal error reporting for snippet checks."""

    def __init__(self, log_level: str = "WARNING"):
        self.logger = self.setup_logging(log_level)

    @staticmethod
    def setup_logging(level: str) -> logging.Logger:
        """Configure the ``snippet_checker`` logger."""
        logger = logging.getLogger("snippet_checker")
        logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        return logger

    def describe(self, error: Exception) -> Dict[str, Any]:
        """Collect the context attached to an error."""
        return {
            "type": type(error).__name__,
            "message": str(error),
            "path": getattr(error, "path", None) or getattr(error, "filename", None),
            "snippet_index": getattr(error, "snippet_index", None),
            "document": getattr(error, "document", None),
            "report": getattr(error, "report", None),
            "fatal": getattr(error, "fatal", True),
        }

    def handle_fatal(self, error: Exception) -> Dict[str, Any]:
        """Log an error that aborts the run and return its context."""
        info = self.describe(error)
        if isinstance(error, SnippetCheckError):
            self.logger.error(
                "%s: %s | document=%s path=%s snippet=%s",
                info["type"],
                info["message"],
                info["document"],
                info["path"],
                info["snippet_index"],
            )
        else:
            self.logger.exception("Unexpected error during snippet check")
        return info


__all__ = ["ErrorHandler"]
