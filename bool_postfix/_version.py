__version__ = "20261019"
