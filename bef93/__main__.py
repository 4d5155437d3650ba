""" Main entry point, so that ``python -m bef93 FILE`` runs a program. """

from .cli.run import run


if __name__ == "__main__":
    run()
