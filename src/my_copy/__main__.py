"""Allow running as ``python -m my_copy``."""
from my_copy.cli import main

if __name__ == "__main__":
    main()
