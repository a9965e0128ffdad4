import sys

from card_autonumber.cli.autonumber_cli import main

sys.exit(main())
