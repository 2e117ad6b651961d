"""
Вывод организаций iiko Cloud API, доступных по учетным данным из ~/.failovermenu.
"""

import sys

from failover_menu.cli import main

if __name__ == "__main__":
    sys.exit(main())
