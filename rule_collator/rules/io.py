""" Module for reading collation rule text from files. """


def decode_rule_file(s:str, *, comment_prefix="#") -> str:
    """ Drop full-line comments and join the remaining lines of a rule file with spaces.
        The comment prefix is reserved in rule syntax, so an unquoted one can never start a rule line. """
    lines = s.splitlines()
    stripped_line_iter = map(str.strip, lines)
    data_lines = [line for line in stripped_line_iter
                  if line and not line.startswith(comment_prefix)]
    return " ".join(data_lines)


def load_rule_file(filename:str, *, encoding='utf-8') -> str:
    """ Read and decode rule text from a file. """
    with open(filename, 'r', encoding=encoding) as fp:
        return decode_rule_file(fp.read())
