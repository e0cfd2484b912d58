"""itembar demo.

Entry point for the demo window.
"""

import logging

from .ui.demo import DemoUI


def main():
    """Run the demo."""
    logging.basicConfig(level=logging.INFO)
    ui = DemoUI()
    ui.run()


if __name__ == "__main__":
    main()
