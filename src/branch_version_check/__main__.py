import sys

from branch_version_check import cli

sys.exit(cli.main())
