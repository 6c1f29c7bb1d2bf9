""" Package for general utilities used by the command-line applications (options, config, logging, workers).
    Nothing in here knows about collation. """
