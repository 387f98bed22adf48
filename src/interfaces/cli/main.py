"""Entry point for the debates CLI."""

from src.interfaces.cli.commands.debates import debates


def main():
    debates()


if __name__ == "__main__":
    main()
