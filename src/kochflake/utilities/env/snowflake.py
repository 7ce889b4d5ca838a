from kochflake.snowflake.provider import DEFAULT_MAX_CATCH_UP_TICKS
from kochflake.snowflake.stepper import (DEFAULT_INITIAL_DELAY_MS,
                                        DEFAULT_MAX_DEPTH,
                                        DEFAULT_RESTART_PAUSE_MS,
                                        DEFAULT_TICK_INTERVAL_MS)
from kochflake.utilities.env.parsing import _env_int


class SnowflakeConfiguration:
    @classmethod
    def tick_interval_ms(cls) -> int:
        return _env_int(
            "KOCHFLAKE_TICK_INTERVAL_MS", default=DEFAULT_TICK_INTERVAL_MS, minimum=1
        )

    @classmethod
    def restart_pause_ms(cls) -> int:
        return _env_int(
            "KOCHFLAKE_RESTART_PAUSE_MS", default=DEFAULT_RESTART_PAUSE_MS, minimum=0
        )

    @classmethod
    def initial_delay_ms(cls) -> int:
        return _env_int(
            "KOCHFLAKE_INITIAL_DELAY_MS", default=DEFAULT_INITIAL_DELAY_MS, minimum=0
        )

    @classmethod
    def max_depth(cls) -> int:
        return _env_int("KOCHFLAKE_MAX_DEPTH", default=DEFAULT_MAX_DEPTH, minimum=1)

    @classmethod
    def max_catch_up_ticks(cls) -> int:
        return _env_int(
            "KOCHFLAKE_MAX_CATCH_UP_TICKS",
            default=DEFAULT_MAX_CATCH_UP_TICKS,
            minimum=1,
        )
