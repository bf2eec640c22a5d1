"""Deal one table and print it: python -m core"""

from core.game import deal
from core.logging_utils import setup_logging
from core.render import render


def main() -> None:
    setup_logging()
    print(render(deal()))


if __name__ == "__main__":
    main()
