"""Environment configuration helpers."""

from kochflake.utilities.env.config import Configuration as Configuration
from kochflake.utilities.env.enums import DisplayMode as DisplayMode
