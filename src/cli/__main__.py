"""Run: python -m cli add <name> <email> | list | help"""

from cli.dispatcher import run

if __name__ == "__main__":
    run()
