"""
AutoClicker - repeats mouse clicks while armed; a global hotkey arms and disarms it.
Entry point
"""
import sys
import os

ROOT = os.path.dirname(os.path.abspath(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from ui.app import ClickerApp


def main():
    ClickerApp().run()


if __name__ == "__main__":
    main()
