"""Module entrypoint for `python -m attrguard`."""

from attrguard.cli import app


def main() -> None:
    app()


if __name__ == "__main__":
    main()
