"""Allow running as `python -m jikko`."""

from .command import main

main()
