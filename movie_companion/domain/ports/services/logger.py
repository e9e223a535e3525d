from abc import ABC, abstractmethod


class LoggerPort(ABC):
    """Logging seam for domain services.

    Messages are pre-formatted strings; extra ``*args``/``**kwargs`` are passed
    through to the backing logger unchanged.
    """

    @abstractmethod
    def debug(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def info(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def warning(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def error(self, msg: str, *args, **kwargs) -> None:
        pass

    def exception(self, msg: str, *args, **kwargs) -> None:
        """Error with the active exception's traceback attached"""
        kwargs.setdefault("exc_info", True)
        self.error(msg, *args, **kwargs)
