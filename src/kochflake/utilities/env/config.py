from kochflake.utilities.env.display import DisplayConfiguration
from kochflake.utilities.env.snowflake import SnowflakeConfiguration


class Configuration(
    SnowflakeConfiguration,
    DisplayConfiguration,
):
    """Aggregate environment configuration helpers."""
