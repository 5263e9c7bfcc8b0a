import typing as tp

from lambdautils.functional.collections import group
from lambdautils.logger.logger import logger


def parity(x: int) -> str:
    return "even" if x % 2 == 0 else "odd"


def main() -> tp.Dict[str, tp.Set[int]]:
    """Group 1..5 by parity and print every bucket."""
    logger.info("Grouping integers by parity...")
    groups = group([1, 2, 3, 4, 5], parity)

    # Sorted so the printed output is stable across runs
    for key in sorted(groups):
        print(key)
        for element in sorted(groups[key]):
            print(f"\t{element}")

    return groups


if __name__ == "__main__":
    main()
