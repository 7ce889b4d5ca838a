from kochflake.renderers.base import StatefulBaseRenderer  # noqa: F401
