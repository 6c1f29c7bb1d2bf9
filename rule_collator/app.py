""" Component container shared by the command-line modes. """

from rule_collator.collator import RuleCollator
from rule_collator.options import CollatorOptions
from rule_collator.rules import CollationError
from rule_collator.rules.io import load_rule_file
from rule_collator.rules.table import build_table, WeightTable
from rule_collator.util.exception import CompositeExceptionHandler, ErrorMessageHandler, ExceptionLogger
from rule_collator.util.log import open_logger, StreamLogger


class CollatorApp:
    """ Container/factory for the components of the command-line applications. """

    def __init__(self, opts:CollatorOptions=None) -> None:
        """ Start with the bare minimum of components and create the rest on demand. """
        self._opts = opts or CollatorOptions()

    class Component:
        """ Property-like descriptor to create a component if it does not exist, then save it over the attribute. """

        def __init__(self, func) -> None:
            self._func = func

        def __get__(self, instance, owner=None) -> object:
            value = self._func(instance)
            setattr(instance, self._func.__name__, value)
            return value

    def setup(self, argv=None) -> None:
        """ Parse command-line options, then fill in the rest from the config file. """
        self._opts.parse(argv)
        self._opts.load_config()

    def args(self) -> list:
        return self._opts.args()

    def log(self, message:str) -> None:
        self.logger.log(message)

    def close(self) -> None:
        """ Close the log file if the logger was ever opened. Components are never created just to be closed. """
        if "logger" in vars(self):
            self.logger.close()

    @Component
    def logger(self) -> StreamLogger:
        """ Open a thread-safe logger that writes to stderr and the log file (if any).
            stdout is reserved for results. """
        return open_logger(self._opts.log_path(), to_stderr=True)

    @Component
    def errors(self) -> CompositeExceptionHandler:
        """ Expected errors (bad rules, bad options, missing files) are logged as one line and suppressed.
            Anything else is logged with its traceback and allowed to propagate. """
        handler = CompositeExceptionHandler()
        handler.add(ErrorMessageHandler(self.log, CollationError, OSError, ValueError))
        handler.add(ExceptionLogger(self.log))
        return handler

    @Component
    def rule_text(self) -> str:
        if self._opts.rules:
            return self._opts.rules
        return load_rule_file(self._opts.rules_path())

    @Component
    def table(self) -> WeightTable:
        table = build_table(self.rule_text, self._opts.normalization_form())
        self.log(f"Loaded {len(table)} collation elements in {table.max_primary + 1} primary groups.")
        return table

    @Component
    def collator(self) -> RuleCollator:
        return RuleCollator(self.table, self._opts.strength_value(), processes=self._opts.processes)
