"""CodeKata - practise coding challenges in the terminal."""

__version__ = "0.1.0"
