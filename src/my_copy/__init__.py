"""Copy one file onto another, asking before an existing destination is overwritten."""
from my_copy.copier import copy_file
from my_copy.version import VERSION

__all__ = ["copy_file", "VERSION"]
