"""
main.py
-------
Entry point: start the game window.
"""

from catch_game.core.runtime.main_loop import MainLoop


def main():
    MainLoop().run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
