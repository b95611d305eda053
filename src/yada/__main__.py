"""Run the interactive menu with ``python -m yada``."""

from yada.cli import main

if __name__ == "__main__":
    main()
