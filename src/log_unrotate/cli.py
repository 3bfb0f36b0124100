import typer

from log_unrotate.commands.open_collection import open_collection
from log_unrotate.commands.run import run
from log_unrotate.commands.show_config import show_config
from log_unrotate.commands.step import step

app = typer.Typer(
    help="Mirror rotated VRChat output logs into a date-partitioned folder tree.",
    no_args_is_help=True,
)

# Add commands from different modules
app.command()(run)
app.command()(step)
app.command("open-collection")(open_collection)
app.command("show-config")(show_config)

if __name__ == "__main__":
    app()
