"""Train ticket history, counter queue, Java route map and Morse-tree password hashing."""

__version__ = "0.1.0"