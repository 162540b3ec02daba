"""Allow `python -m clipfrag`."""

from clipfrag.cli.main import main

main()
