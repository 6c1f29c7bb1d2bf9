from functools import partial
from itertools import starmap
import os
import sys
from typing import Callable, Iterable


class ParallelMapper:
    """ Maps a function over large iterables in parallel using multiprocessing.

        Everything reachable from the callable (including partial arguments such as a weight table) is pickled
        and sent to each worker process. If the pool cannot be started or a worker fails to unpickle its state,
        we fall back to single-process computation and print a message to stderr.

        The pool consumes the whole iterable into a list before dispatching chunks. We keep that list ourselves
        so the work can be retried serially. Results always come back in input order. """

    def __init__(self, func:Callable, *args, processes=1, retry=True, chunksize:int=None, **kwargs) -> None:
        """ Extra arguments are treated as partials applying to *every* call. """
        if args or kwargs:
            func = partial(func, *args, **kwargs)
        if not processes:
            processes = os.cpu_count() or 1
        self._func = func            # Function to map over.
        self._processes = processes  # Number of worker processes (0 = one for each logical CPU core).
        self._retry = retry          # If True, retry with a single process on failure.
        self._chunksize = chunksize  # Items sent to a worker at a time (None lets the pool decide).

    def map(self, *iterables:Iterable) -> list:
        """ Perform the equivalent of builtins.map on <iterables>, returning a list in input order. """
        return self.starmap(zip(*iterables))

    def starmap(self, iterable:Iterable[tuple]) -> list:
        """ Perform the equivalent of itertools.starmap on <iterable>, returning a list in input order. """
        if self._processes == 1:
            return self._serial_starmap(iterable)
        iterable = list(iterable)
        if len(iterable) < 2:
            return self._serial_starmap(iterable)
        try:
            return self._parallel_starmap(iterable)
        except Exception:
            if not self._retry:
                raise
            print("Parallel operation failed. Trying with a single process...", file=sys.stderr)
            return self._serial_starmap(iterable)

    def _parallel_starmap(self, iterable:list) -> list:
        """ Map the function over <iterable> with Pool.starmap. """
        # multiprocessing is fairly large, so don't import until we have to.
        from multiprocessing import Pool
        with Pool(processes=self._processes) as pool:
            return pool.starmap(self._func, iterable, self._chunksize)

    def _serial_starmap(self, iterable:Iterable[tuple]) -> list:
        return list(starmap(self._func, iterable))
