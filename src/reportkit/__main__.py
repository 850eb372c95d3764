"""Package entry point.

Preferred invocation is via the installed console script:

    reportkit ...

For convenience we also support:

    python -m reportkit ...
"""

from __future__ import annotations

from .cli import app


def main() -> None:
    """Entry point used by `python -m reportkit`."""

    app()


if __name__ == "__main__":
    main()
