"""orgsize - npm organization package size reporter."""

__version__ = "0.1.0"
