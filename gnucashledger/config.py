# config.py --- Configuration and logging setup


# Copyright (C) 2012 Jorgen Schaefer <forcer@forcix.cx>

# Author: Jorgen Schaefer <forcer@forcix.cx>

# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU General Public License
# as published by the Free Software Foundation; either version 3
# of the License, or (at your option) any later version.

# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

# You should have received a copy of the GNU General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.

import logging
import os
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

ENV_PREFIX = "GNUCASH_LEDGER_"

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class LedgerConfig:
    """
    Settings for the gnucash-ledger command line.

    Attributes:
        gnucash_file: GNU Cash file used when none is given on the
                      command line.
        indent: Indentation for each level of the account tree.
        description_width: Width of the description column of an
                           account register.
        verbose: Log debugging output.
    """

    gnucash_file: Optional[str] = None
    indent: str = "  "
    description_width: int = 41
    verbose: bool = False

    @classmethod
    def from_env(cls, environ=None):
        """Read settings from GNUCASH_LEDGER_* environment variables."""
        if environ is None:
            environ = os.environ
        config = cls()
        if environ.get(ENV_PREFIX + "FILE"):
            config.gnucash_file = environ[ENV_PREFIX + "FILE"]
        if environ.get(ENV_PREFIX + "INDENT"):
            config.indent = environ[ENV_PREFIX + "INDENT"]
        width = environ.get(ENV_PREFIX + "DESCRIPTION_WIDTH")
        if width:
            try:
                config.description_width = int(width)
            except ValueError:
                raise ValueError(
                    "{}DESCRIPTION_WIDTH must be an integer, got {!r}"
                    .format(ENV_PREFIX, width)) from None
        verbose = environ.get(ENV_PREFIX + "VERBOSE", "")
        config.verbose = verbose.strip().lower() in _TRUE_VALUES
        return config


def setup_logging(verbose=False):
    """
    Configure logging for the command line.

    Reports go to stdout, so only warnings are logged unless verbose.
    """
    log_level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    if verbose:
        logger.debug("Verbose logging enabled")
