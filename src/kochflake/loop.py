import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import typer

from kochflake.cli.commands.run import run_command

app = typer.Typer()

app.command(name="run")(run_command)


@app.callback()
def callback() -> None:
    """Animate successive iterations of the Koch snowflake."""


def main() -> None:
    app()


if __name__ == "__main__":
    main()
