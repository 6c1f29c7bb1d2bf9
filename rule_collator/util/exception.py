from traceback import format_exception
from types import TracebackType
from typing import Any, Callable, Optional, Type


class ExceptionHandler:
    """ Generic exception handler with the same signature as __exit__ and sys.excepthook.
        Should return True if the exception was handled. """

    def __call__(self, exc_type:Type[BaseException], exc_value:BaseException,
                 traceback:Optional[TracebackType]) -> bool:
        raise NotImplementedError


class ExceptionLogger(ExceptionHandler):
    """ Writes exception tracebacks to a string logger callable. """

    def __init__(self, logger:Callable[[str], Any], *, max_frames=20) -> None:
        self._logger = logger          # String logger callable. Its return value is ignored.
        self._max_frames = max_frames  # Maximum number of stack frames to write.

    def __call__(self, exc_type, exc_value, traceback) -> bool:
        """ Write the stack trace to the logger. This does *not* count as handling the exception. """
        tb_lines = format_exception(exc_type, exc_value, traceback, limit=self._max_frames)
        self._logger("".join(tb_lines).rstrip())
        return False


class ErrorMessageHandler(ExceptionHandler):
    """ Handles expected error types by logging only their message, with no traceback. """

    def __init__(self, logger:Callable[[str], Any], *exc_types:Type[BaseException]) -> None:
        self._logger = logger        # String logger callable.
        self._exc_types = exc_types  # Exception classes considered user errors rather than bugs.

    def __call__(self, exc_type, exc_value, traceback) -> bool:
        if not issubclass(exc_type, self._exc_types):
            return False
        self._logger(f'{exc_type.__name__}: {exc_value}')
        return True


class CompositeExceptionHandler(ExceptionHandler):
    """ Delegates exception handling to other handlers in order of addition.
        Also works as a context manager that suppresses whatever one of its handlers handles. """

    def __init__(self) -> None:
        self._handlers = []  # List of all child exception handler callbacks.

    def add(self, handler:ExceptionHandler) -> None:
        self._handlers.append(handler)

    def __call__(self, exc_type, exc_value, traceback) -> bool:
        """ Call each exception handler in turn until one (if any) returns True. """
        for handle_exception in self._handlers:
            if handle_exception(exc_type, exc_value, traceback):
                return True
        return False

    def __enter__(self) -> "CompositeExceptionHandler":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        if exc_type is None:
            return False
        return self(exc_type, exc_value, traceback)
