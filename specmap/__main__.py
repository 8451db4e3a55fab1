"""Entry point for the specification mapper.

Executing ``python -m specmap`` forwards to the CLI defined in
``specmap.cli``.
"""
import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
