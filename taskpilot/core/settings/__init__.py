from .settings import TaskpilotSettings, configure_logging, load_settings

__all__ = ["TaskpilotSettings", "configure_logging", "load_settings"]
