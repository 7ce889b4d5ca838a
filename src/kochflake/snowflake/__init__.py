from kochflake.snowflake.directions import Direction  # noqa: F401
from kochflake.snowflake.directions import (  # noqa: F401
    build_direction_sequence, next_iteration)
from kochflake.snowflake.state import SnowflakeState, TickResult  # noqa: F401
from kochflake.snowflake.stepper import SnowflakeStepper  # noqa: F401
from kochflake.snowflake.frame import SnowflakeFrame  # noqa: F401
from kochflake.snowflake.provider import SnowflakeStateProvider  # noqa: F401
from kochflake.snowflake.renderer import SnowflakeRenderer  # noqa: F401
