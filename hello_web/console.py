from __future__ import annotations

GREETING = "Hello, World!"


def main() -> None:
    """Print the classic greeting to standard output."""

    print(GREETING)


if __name__ == "__main__":
    main()
