from .logging import ROOT_LOGGER_NAME, configure_logging, get_logger

__all__ = ["ROOT_LOGGER_NAME", "configure_logging", "get_logger"]
