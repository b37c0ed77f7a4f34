"""Allow running as python -m trialstrack."""

from trialstrack.cli import app


def main() -> None:
    app()


main()
