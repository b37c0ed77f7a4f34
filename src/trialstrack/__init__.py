"""trialstrack: read and write LZMA-compressed Trials track files."""

__version__ = "0.1.0"
