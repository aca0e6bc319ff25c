"""
googmodule utilities package
"""

from .io_utils import read_source_file, write_output_file, to_posix

__all__ = ["read_source_file", "write_output_file", "to_posix"]
