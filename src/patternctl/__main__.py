"""Allow ``python -m patternctl``."""

from patternctl.cli import cli

cli()
