import sys
from threading import Lock
from time import strftime
from typing import List, TextIO


class StreamLogger:
    """ Writes status lines to pre-opened text streams. Safe to share between threads. """

    def __init__(self, *streams:TextIO, owned:List[TextIO]=(), time_fmt="[%b %d %Y %H:%M:%S]: ",
                 repeat_mark="*") -> None:
        self._streams = streams          # One or more writable/appendable text streams for logging.
        self._owned = [*owned]           # Streams opened on our behalf, to be closed with the logger.
        self._time_fmt = time_fmt        # Format for timestamps using time.strftime. If None, do not add timestamps.
        self._repeat_mark = repeat_mark  # Mark to replace repeated messages. If None, log all messages fully.
        self._last_message = ""          # Most recent unique message string.
        self._lock = Lock()              # Only one thread writes to the streams at a time.

    def _format(self, message:str) -> str:
        """ Shorten a repeat of the last message and add a timestamp. Must be called under the lock. """
        if self._repeat_mark is not None:
            if message == self._last_message:
                message = self._repeat_mark
            else:
                self._last_message = message
        if self._time_fmt is not None:
            message = strftime(self._time_fmt) + message
        return message + '\n'

    def log(self, message:str) -> None:
        """ Write <message> to every stream, flushing each so nothing is lost if the process dies. """
        with self._lock:
            line = self._format(message)
            for stream in self._streams:
                try:
                    stream.write(line)
                    stream.flush()
                except (OSError, ValueError):
                    # A closed or broken stream must not stop the others from receiving the message.
                    continue

    __call__ = log

    def close(self) -> None:
        """ Close any log files this logger opened. System streams are left alone. """
        with self._lock:
            for stream in self._owned:
                stream.close()
            self._owned.clear()


def open_logger(*filenames:str, encoding='utf-8', to_stdout=False, to_stderr=False, **kwargs) -> StreamLogger:
    """ Open a logger that appends to text files and/or prints to system streams. Empty filenames are skipped. """
    files = [open(f, 'a', encoding=encoding) for f in filenames if f]
    streams = [*files]
    if to_stdout:
        streams.append(sys.stdout)
    if to_stderr:
        streams.append(sys.stderr)
    return StreamLogger(*streams, owned=files, **kwargs)
