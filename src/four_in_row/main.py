from __future__ import annotations

from four_in_row.ui.menu import run_menu


def main() -> None:
    run_menu()


if __name__ == "__main__":
    main()
